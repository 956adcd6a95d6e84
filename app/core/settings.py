from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic_settings import BaseSettings


def _load_yaml_config() -> dict:
    root = Path(__file__).resolve().parents[2]  # project root
    cfg_path = root / "config.yaml"
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    app_title: str = "Text Infographic Analyzer"
    log_level: str = "INFO"

    # Input bounds
    max_text_length: int = 5000

    # Extraction
    context_window: int = 50
    max_numbers: int = 10
    max_timeline: int = 5
    max_key_points: int = 4
    display_themes: int = 6

    # Style preferences (in-memory when unset)
    preferences_path: Optional[str] = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    def __init__(self, **kwargs):
        cfg = _load_yaml_config()
        app_cfg = (cfg.get("app") or {})
        analysis = (cfg.get("analysis") or {})
        prefs = (cfg.get("preferences") or {})

        defaults = {
            "app_title": app_cfg.get("title", "Text Infographic Analyzer"),
            "log_level": app_cfg.get("log_level", "INFO"),
            "max_text_length": analysis.get("max_text_length", 5000),
            "context_window": analysis.get("context_window", 50),
            "max_numbers": analysis.get("max_numbers", 10),
            "max_timeline": analysis.get("max_timeline", 5),
            "max_key_points": analysis.get("max_key_points", 4),
            "display_themes": analysis.get("display_themes", 6),
            "preferences_path": prefs.get("path"),
        }
        defaults.update(kwargs)
        super().__init__(**defaults)
