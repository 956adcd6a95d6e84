from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from pydantic import ValidationError

from app.schemas.styles import StyleSettings

logger = logging.getLogger(__name__)

STYLE_SETTINGS_KEY = "styleSettings"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class JsonFileStore:
    """Key-value store persisted as one JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Preference file %s is not valid JSON, starting empty", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)


def build_store(path: str | None = None) -> KeyValueStore:
    return JsonFileStore(path) if path else MemoryStore()


class StylePreferences:
    """Style settings cached in memory, loaded once and saved on every change."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.settings = self._load()

    def _load(self) -> StyleSettings:
        raw = self.store.get(STYLE_SETTINGS_KEY)
        if not raw:
            return StyleSettings()
        try:
            return StyleSettings.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Error parsing saved style settings: %s", e)
            return StyleSettings()

    def _save(self) -> None:
        self.store.set(STYLE_SETTINGS_KEY, json.dumps(self.settings.to_wire(), ensure_ascii=False))

    def get(self) -> StyleSettings:
        return self.settings

    def update(self, changes: Dict[str, str]) -> StyleSettings:
        aliases = {name: f.alias or name for name, f in StyleSettings.model_fields.items()}
        normalized = {aliases.get(k, k): v for k, v in changes.items()}
        merged = {**self.settings.to_wire(), **normalized}
        self.settings = StyleSettings.model_validate(merged)
        self._save()
        return self.settings

    def reset(self) -> StyleSettings:
        self.settings = StyleSettings()
        self._save()
        return self.settings
