from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

import pandas as pd

from app.core.errors import ExportError
from app.schemas.analysis import AnalysisResult

_SAFE_NAME_RE = re.compile(r"[^\w.-]+", re.ASCII)


def safe_filename(name: str, default: str = "infographic") -> str:
    cleaned = _SAFE_NAME_RE.sub("_", (name or "").strip()).strip("._")
    return cleaned or default


def export_json(result: AnalysisResult, filename: str = "infographic") -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "filename": safe_filename(filename),
        "content": result.to_wire(),
    }


# -----------------------------
# Tables
# -----------------------------
def numbers_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [n.model_dump() for n in result.chart_data.numbers]
    return pd.DataFrame(rows, columns=["label", "value", "context"])


def timeline_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [
        {"period": t.period, "event": event}
        for t in result.chart_data.timeline
        for event in t.events
    ]
    return pd.DataFrame(rows, columns=["period", "event"])


def statistics_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [s.model_dump() for s in result.statistics]
    return pd.DataFrame(rows, columns=["label", "value"])


def categories_frame(result: AnalysisResult) -> pd.DataFrame:
    rows = [
        {"category": c.name, "item": item}
        for c in result.chart_data.categories
        for item in c.items
    ]
    return pd.DataFrame(rows, columns=["category", "item"])


TABLES: Dict[str, Callable[[AnalysisResult], pd.DataFrame]] = {
    "numbers": numbers_frame,
    "timeline": timeline_frame,
    "statistics": statistics_frame,
    "categories": categories_frame,
}


def table_names() -> List[str]:
    return sorted(TABLES)


def export_csv(result: AnalysisResult, table: str) -> str:
    builder = TABLES.get(table)
    if builder is None:
        raise ExportError(f"Неизвестная таблица для экспорта: {table}. Доступны: {table_names()}")
    return builder(result).to_csv(index=False)
