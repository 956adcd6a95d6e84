"""Infographic renderers.

Every visualization kind is a pure function of an ``AnalysisResult`` and a
resolved style. The result is a ``Visual``: a JSON-friendly structure holding
either chart specs / rows for the client, or an "insufficient data" message.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, Field

from app.core.errors import UnknownVisualKind
from app.schemas.analysis import AnalysisResult
from app.schemas.styles import StyleSettings
from app.services.styles import ResolvedStyle, css, hex_to_rgba, resolve_style

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

NO_CHART_DATA = (
    "Недостаточно данных для создания диаграмм. "
    "Попробуйте добавить текст с числовыми значениями или списками."
)


class VisualKind(str, Enum):
    STATISTICS = "statistics"
    COMPARISON = "comparison"
    TIMELINE = "timeline"
    LIST = "list"
    TRENDS = "trends"
    SUMMARY = "summary"


class Visual(BaseModel):
    kind: str
    title: str
    empty: bool = False
    message: str | None = None
    style: Dict[str, Any] = Field(default_factory=dict)
    body: Dict[str, Any] = Field(default_factory=dict)


def _style_payload(style: ResolvedStyle) -> Dict[str, Any]:
    return {
        "primary": style.scheme.primary,
        "secondary": style.scheme.secondary,
        "textColor": style.scheme.text_color,
        "lightBg": style.scheme.light_bg,
        "fonts": dict(style.fonts),
        "layout": style.layout,
        "background": css(style.background),
    }


def _visual(kind: VisualKind, style: ResolvedStyle, body: Dict[str, Any] | None = None, message: str | None = None) -> Visual:
    return Visual(
        kind=kind.value,
        title=VISUAL_KINDS[kind].title,
        empty=body is None,
        message=message if body is None else None,
        style=_style_payload(style),
        body=body or {},
    )


def _cycle(colors: List[str], n: int) -> List[str]:
    return [colors[i % len(colors)] for i in range(n)]


# -----------------------------
# Renderers
# -----------------------------
def render_statistics(result: AnalysisResult, style: ResolvedStyle) -> Visual:
    numbers = result.chart_data.numbers
    if not numbers:
        return _visual(VisualKind.STATISTICS, style, message="Недостаточно числовых данных для построения диаграммы.")

    colors = style.chart_colors
    chart = {
        "type": "bar",
        "data": {
            "labels": [n.label for n in numbers],
            "datasets": [
                {
                    "label": "Значения",
                    "data": [n.value for n in numbers],
                    "backgroundColor": _cycle(colors["backgroundColor"], len(numbers)),
                    "borderColor": _cycle(colors["borderColor"], len(numbers)),
                    "borderWidth": 2,
                }
            ],
        },
        "options": {
            "indexAxis": "y",
            "plugins": {
                "legend": {"position": "top", "labels": {"font": {"size": style.font_px("small")}}},
                "title": {"display": True, "text": "Статистика", "font": {"size": style.font_px("subtitle")}},
            },
            "scales": {"x": {"beginAtZero": True}},
        },
    }
    contexts = [{"label": n.label, "value": n.value, "context": n.context} for n in numbers[:3]]
    return _visual(VisualKind.STATISTICS, style, {"chart": chart, "contexts": contexts})


def render_comparison(result: AnalysisResult, style: ResolvedStyle) -> Visual:
    if not result.statistics:
        return _visual(VisualKind.COMPARISON, style, message="Недостаточно данных для построения сравнительной таблицы.")

    rows = [
        {
            "label": s.label,
            "value": s.value,
            "background": "#ffffff" if i % 2 == 0 else style.scheme.light_bg,
        }
        for i, s in enumerate(result.statistics)
    ]
    return _visual(VisualKind.COMPARISON, style, {"columns": ["Показатель", "Значение"], "rows": rows})


def render_timeline(result: AnalysisResult, style: ResolvedStyle) -> Visual:
    timeline = result.chart_data.timeline
    if not timeline:
        return _visual(VisualKind.TIMELINE, style, message="Недостаточно данных для построения временной шкалы.")

    entries = [{"period": t.period, "events": list(t.events)} for t in timeline]
    return _visual(VisualKind.TIMELINE, style, {"entries": entries})


def render_list(result: AnalysisResult, style: ResolvedStyle) -> Visual:
    categories = result.chart_data.categories
    if not result.key_points and not categories:
        return _visual(VisualKind.LIST, style, message="Недостаточно данных для построения структурированного списка.")

    return _visual(
        VisualKind.LIST,
        style,
        {
            "keyPoints": list(result.key_points),
            "categories": [
                {"name": c.name, "items": list(c.items), "count": c.count, "caption": f"{c.name} ({c.count} элементов)"}
                for c in categories
            ],
        },
    )


def theme_weights(themes: List[str], limit: int = 5) -> List[Dict[str, Any]]:
    """Rank-derived weights: the top theme gets ``n``, the last gets 1."""
    top = themes[:limit]
    return [{"theme": t, "weight": len(top) - i} for i, t in enumerate(top)]


def render_trends(result: AnalysisResult, style: ResolvedStyle, limit: int = 5) -> Visual:
    if not result.themes:
        return _visual(VisualKind.TRENDS, style, message="Недостаточно данных для анализа трендов.")

    tags = [
        {"theme": t, "background": hex_to_rgba(style.scheme.primary, 0.2), "color": style.scheme.text_color}
        for t in result.themes
    ]
    weights = theme_weights(result.themes, limit)
    colors = style.chart_colors
    chart = {
        "type": "pie",
        "data": {
            "labels": [w["theme"] for w in weights],
            "datasets": [
                {
                    "label": "Частота тем",
                    "data": [w["weight"] for w in weights],
                    "backgroundColor": _cycle(colors["backgroundColor"], len(weights)),
                    "borderColor": _cycle(colors["borderColor"], len(weights)),
                    "borderWidth": 2,
                }
            ],
        },
        "options": {"plugins": {"legend": {"position": "right"}, "title": {"display": True, "text": "Основные темы"}}},
    }
    return _visual(VisualKind.TRENDS, style, {"tags": tags, "chart": chart})


def render_summary(result: AnalysisResult, style: ResolvedStyle) -> Visual:
    if not result.summary.strip():
        return _visual(VisualKind.SUMMARY, style, message="Недостаточно данных для генерации краткой сводки.")

    return _visual(
        VisualKind.SUMMARY,
        style,
        {"text": result.summary, "background": hex_to_rgba(style.scheme.light_bg, 0.5)},
    )


# -----------------------------
# Registry
# -----------------------------
@dataclass(frozen=True)
class KindInfo:
    title: str
    description: str
    suitable: Callable[[AnalysisResult], bool]
    render: Callable[[AnalysisResult, ResolvedStyle], Visual]


VISUAL_KINDS: Dict[VisualKind, KindInfo] = {
    VisualKind.STATISTICS: KindInfo(
        title="Статистическая инфографика",
        description="Диаграммы и графики с числовыми данными",
        suitable=lambda r: len(r.chart_data.numbers) > 0,
        render=render_statistics,
    ),
    VisualKind.COMPARISON: KindInfo(
        title="Сравнительная таблица",
        description="Сравнение ключевых показателей",
        suitable=lambda r: len(r.statistics) > 2,
        render=render_comparison,
    ),
    VisualKind.TIMELINE: KindInfo(
        title="Временная шкала",
        description="Хронология событий и процессов",
        suitable=lambda r: len(r.chart_data.timeline) > 0,
        render=render_timeline,
    ),
    VisualKind.LIST: KindInfo(
        title="Структурированный список",
        description="Организованное представление информации",
        suitable=lambda r: len(r.key_points) > 2,
        render=render_list,
    ),
    VisualKind.TRENDS: KindInfo(
        title="Анализ трендов",
        description="Тенденции и закономерности",
        suitable=lambda r: len(r.themes) > 3,
        render=render_trends,
    ),
    VisualKind.SUMMARY: KindInfo(
        title="Краткая сводка",
        description="Основные выводы и заключения",
        suitable=lambda r: len(r.summary) > 50,
        render=render_summary,
    ),
}


def parse_kind(kind: str) -> VisualKind:
    try:
        return VisualKind(kind)
    except ValueError:
        raise UnknownVisualKind(f"Неизвестный тип инфографики: {kind}")


def suitable_kinds(result: AnalysisResult) -> List[Dict[str, Any]]:
    return [
        {"id": kind.value, "title": info.title, "description": info.description, "suitable": info.suitable(result)}
        for kind, info in VISUAL_KINDS.items()
    ]


def render(kind: VisualKind | str, result: AnalysisResult, settings: StyleSettings | None = None) -> Visual:
    if not isinstance(kind, VisualKind):
        kind = parse_kind(kind)
    return VISUAL_KINDS[kind].render(result, resolve_style(settings))


def chart_overview(result: AnalysisResult, settings: StyleSettings | None = None) -> Dict[str, Any]:
    """Combined dashboard: numbers bar, themes pie, timeline line, categories."""
    data = result.chart_data
    if data.is_empty:
        return {"empty": True, "message": NO_CHART_DATA, "charts": {}}

    style = resolve_style(settings)
    charts: Dict[str, Any] = {}
    if data.numbers:
        charts["numbers"] = render_statistics(result, style).body
    if result.themes:
        charts["themes"] = render_trends(result, style).body["chart"]
    if data.timeline:
        charts["timeline"] = {
            "type": "line",
            "data": {
                "labels": [t.period for t in data.timeline],
                "datasets": [
                    {
                        "label": "События по времени",
                        "data": [len(t.events) for t in data.timeline],
                        "fill": False,
                        "borderColor": hex_to_rgba(style.scheme.primary, 1),
                        "tension": 0.4,
                    }
                ],
            },
            "events": [{"period": t.period, "events": list(t.events)} for t in data.timeline[:3]],
        }
    if data.categories:
        charts["categories"] = render_list(result, style).body["categories"]
    return {"empty": False, "message": None, "charts": charts}


_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def render_html(visual: Visual) -> str:
    return _env.get_template("infographic.html").render(visual=visual)
