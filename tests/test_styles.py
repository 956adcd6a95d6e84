import pytest

from app.schemas.styles import StyleSettings
from app.services.styles import (
    COLOR_SCHEMES,
    chart_colors,
    get_background_style,
    get_color_scheme,
    get_font_sizes,
    hex_to_rgba,
    resolve_style,
    style_options,
)


def test_unknown_ids_fall_back_to_defaults():
    assert get_color_scheme("nope") is COLOR_SCHEMES["blue"]
    assert get_font_sizes("huge") == get_font_sizes("base")


@pytest.mark.parametrize(
    "hex_color,alpha,expected",
    [
        ("#3B82F6", 0.8, "rgba(59, 130, 246, 0.8)"),
        ("FFFFFF", 1, "rgba(255, 255, 255, 1)"),
        ("#000000", 0.2, "rgba(0, 0, 0, 0.2)"),
    ],
)
def test_hex_to_rgba(hex_color, alpha, expected):
    assert hex_to_rgba(hex_color, alpha) == expected


def test_background_styles():
    scheme = get_color_scheme("purple")

    assert get_background_style("solid", scheme) == {"background-color": "#ffffff"}
    assert "radial-gradient(#F3E8FF" in get_background_style("pattern", scheme)["background-image"]
    assert get_background_style("other", scheme) == get_background_style("gradient", scheme)


def test_chart_colors():
    colors = chart_colors(get_color_scheme("red"))

    assert colors["borderColor"] == ["#FEE2E2", "#EF4444", "#DC2626"]
    assert colors["backgroundColor"][1] == "rgba(239, 68, 68, 0.8)"
    assert colors["primaryColor"] == "#EF4444"


def test_resolve_style_defaults():
    style = resolve_style()

    assert style.scheme is COLOR_SCHEMES["blue"]
    assert style.layout == "grid"
    assert "linear-gradient" in style.background["background"]
    assert style.font_px("small") == 14


def test_resolve_style_unknown_layout():
    style = resolve_style(StyleSettings(layout="spiral", fontSize="xl"))

    assert style.layout == "grid"
    assert style.font_px("title") == 36


def test_style_options_lists_everything():
    options = style_options()

    assert [s["id"] for s in options["colorSchemes"]] == ["blue", "green", "purple", "orange", "red", "gray"]
    assert options["fontSizes"] == ["sm", "base", "lg", "xl"]
    assert len(options["layouts"]) == 3
    assert len(options["backgroundStyles"]) == 3
