from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from app.schemas.styles import StyleSettings


@dataclass(frozen=True)
class ColorScheme:
    name: str
    primary: str
    secondary: str
    colors: List[str] = field(default_factory=list)
    text_color: str = "#1E40AF"
    light_bg: str = "#EBF8FF"


COLOR_SCHEMES: Dict[str, ColorScheme] = {
    "blue": ColorScheme("Синий", "#3B82F6", "#1E40AF", ["#EBF8FF", "#3B82F6", "#1E40AF"], "#1E40AF", "#EBF8FF"),
    "green": ColorScheme("Зеленый", "#10B981", "#047857", ["#ECFDF5", "#10B981", "#047857"], "#047857", "#ECFDF5"),
    "purple": ColorScheme("Фиолетовый", "#8B5CF6", "#7C3AED", ["#F3E8FF", "#8B5CF6", "#7C3AED"], "#7C3AED", "#F3E8FF"),
    "orange": ColorScheme("Оранжевый", "#F59E0B", "#D97706", ["#FEF3C7", "#F59E0B", "#D97706"], "#D97706", "#FEF3C7"),
    "red": ColorScheme("Красный", "#EF4444", "#DC2626", ["#FEE2E2", "#EF4444", "#DC2626"], "#DC2626", "#FEE2E2"),
    "gray": ColorScheme("Серый", "#6B7280", "#374151", ["#F9FAFB", "#6B7280", "#374151"], "#374151", "#F9FAFB"),
}

FONT_SIZES: Dict[str, Dict[str, str]] = {
    "sm": {"base": "0.875rem", "title": "1.25rem", "subtitle": "1rem", "small": "0.75rem"},
    "base": {"base": "1rem", "title": "1.5rem", "subtitle": "1.125rem", "small": "0.875rem"},
    "lg": {"base": "1.125rem", "title": "1.875rem", "subtitle": "1.25rem", "small": "1rem"},
    "xl": {"base": "1.25rem", "title": "2.25rem", "subtitle": "1.5rem", "small": "1.125rem"},
}

LAYOUTS = {
    "grid": "Сетка",
    "column": "Колонки",
    "flow": "Поток",
}

BACKGROUND_STYLES = {
    "solid": "Сплошной",
    "gradient": "Градиент",
    "pattern": "Узор",
}


def get_color_scheme(scheme_id: str) -> ColorScheme:
    return COLOR_SCHEMES.get(scheme_id) or COLOR_SCHEMES["blue"]


def get_font_sizes(size_id: str) -> Dict[str, str]:
    return FONT_SIZES.get(size_id) or FONT_SIZES["base"]


def get_background_style(background_id: str, scheme: ColorScheme) -> Dict[str, str]:
    if background_id == "solid":
        return {"background-color": "#ffffff"}
    if background_id == "pattern":
        return {
            "background-color": "#ffffff",
            "background-image": f"radial-gradient({scheme.colors[0]} 1px, transparent 1px)",
            "background-size": "20px 20px",
        }
    # gradient is the default
    return {"background": f"linear-gradient(135deg, {scheme.light_bg} 0%, #ffffff 100%)"}


def get_layout(layout_id: str) -> str:
    return layout_id if layout_id in LAYOUTS else "grid"


def hex_to_rgba(hex_color: str, alpha: float = 1) -> str:
    h = hex_color.lstrip("#")
    r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({r}, {g}, {b}, {alpha})"


def chart_colors(scheme: ColorScheme) -> Dict[str, Any]:
    return {
        "backgroundColor": [hex_to_rgba(c, 0.8) for c in scheme.colors],
        "borderColor": list(scheme.colors),
        "primaryColor": scheme.primary,
        "secondaryColor": scheme.secondary,
    }


def css(props: Dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in props.items())


@dataclass(frozen=True)
class ResolvedStyle:
    """Style settings resolved to concrete colors, fonts and background."""

    scheme: ColorScheme
    fonts: Dict[str, str]
    layout: str
    background: Dict[str, str]

    @property
    def chart_colors(self) -> Dict[str, Any]:
        return chart_colors(self.scheme)

    def font_px(self, key: str) -> int:
        # "0.875rem" -> 14
        return int(round(float(self.fonts[key].replace("rem", "")) * 16))


def resolve_style(settings: StyleSettings | None = None) -> ResolvedStyle:
    settings = settings or StyleSettings()
    scheme = get_color_scheme(settings.color_scheme)
    return ResolvedStyle(
        scheme=scheme,
        fonts=get_font_sizes(settings.font_size),
        layout=get_layout(settings.layout),
        background=get_background_style(settings.background_style, scheme),
    )


def style_options() -> Dict[str, Any]:
    return {
        "colorSchemes": [
            {"id": k, "name": v.name, "primary": v.primary, "secondary": v.secondary, "colors": v.colors}
            for k, v in COLOR_SCHEMES.items()
        ],
        "fontSizes": list(FONT_SIZES.keys()),
        "layouts": [{"id": k, "name": v} for k, v in LAYOUTS.items()],
        "backgroundStyles": [{"id": k, "name": v} for k, v in BACKGROUND_STYLES.items()],
    }
