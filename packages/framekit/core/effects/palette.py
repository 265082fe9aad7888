"""Color schemes for effects.

Colors are CSS strings so the rendering collaborator can use them directly.
"""

from __future__ import annotations

from enum import Enum


class ColorScheme(str, Enum):
    """Named color schemes.

    Attributes:
        CYAN: Cyan to teal hues.
        WARM: Amber hues.
        SPECTRUM: Full hue wheel across the node set.
    """

    CYAN = "cyan"
    WARM = "warm"
    SPECTRUM = "spectrum"


BACKGROUND_COLOR = "#0a0a0f"

_GLOW_COLORS = {
    ColorScheme.CYAN: "rgba(0, 220, 220, 0.3)",
    ColorScheme.WARM: "rgba(255, 180, 80, 0.3)",
    ColorScheme.SPECTRUM: "rgba(100, 200, 255, 0.2)",
}


def format_number(value: float) -> str:
    """Compact, stable number formatting for CSS strings (170.0 -> '170')."""
    return f"{round(value, 3):g}"


def hsl(hue: float, saturation: float, lightness: float) -> str:
    return f"hsl({format_number(hue)}, {format_number(saturation)}%, {format_number(lightness)}%)"


def hsla(hue: float, saturation: float, lightness: float, alpha: float) -> str:
    return (
        f"hsla({format_number(hue)}, {format_number(saturation)}%, "
        f"{format_number(lightness)}%, {format_number(alpha)})"
    )


def node_color(scheme: ColorScheme, index: int, total: int) -> str:
    """Color of item ``index`` out of ``total`` under ``scheme``.

    Raises:
        ValueError: If total is not positive.
    """
    if total <= 0:
        raise ValueError(f"total must be > 0, got {total}")
    position = index / total
    if scheme is ColorScheme.CYAN:
        return hsl(170 + position * 30, 80, 60)
    if scheme is ColorScheme.WARM:
        return hsl(30 + position * 20, 70, 65)
    return hsl(position * 360, 70, 60)


def glow_color(scheme: ColorScheme) -> str:
    """Background glow color for ``scheme``."""
    return _GLOW_COLORS[scheme]
