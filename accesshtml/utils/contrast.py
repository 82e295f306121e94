"""WCAG 2.1 contrast ratio utilities.

Implements the relative luminance and contrast ratio calculations defined in
WCAG 2.1 Success Criterion 1.4.3 (Contrast, Minimum), plus parsing of CSS
color values as they appear in inline ``style`` attributes.
"""

from __future__ import annotations

from PIL import ImageColor

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

NORMAL_TEXT_MIN_RATIO = 4.5
LARGE_TEXT_MIN_RATIO = 3.0


def _srgb_to_linear(v: float) -> float:
    """Convert an sRGB channel (0-1) to linear light."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """Compute relative luminance for an sRGB color (0-255 per channel).

    Per WCAG 2.1: L = 0.2126*R + 0.7152*G + 0.0722*B
    where R, G, B are linearized sRGB values.
    """
    rl = _srgb_to_linear(r / 255.0)
    gl = _srgb_to_linear(g / 255.0)
    bl = _srgb_to_linear(b / 255.0)
    return 0.2126 * rl + 0.7152 * gl + 0.0722 * bl


def contrast_ratio(color1: RGB, color2: RGB) -> float:
    """Compute the WCAG contrast ratio between two sRGB colors.

    Returns a value between 1.0 (identical) and 21.0 (black on white).
    """
    l1 = relative_luminance(*color1)
    l2 = relative_luminance(*color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def minimum_ratio(*, large_text: bool = False) -> float:
    """Minimum AA contrast ratio: 3:1 for large text, 4.5:1 otherwise."""
    return LARGE_TEXT_MIN_RATIO if large_text else NORMAL_TEXT_MIN_RATIO


def passes_aa(ratio: float, *, large_text: bool = False) -> bool:
    """Check whether a contrast ratio meets WCAG AA."""
    return ratio >= minimum_ratio(large_text=large_text)


def is_transparent(value: str | None) -> bool:
    """True for empty values and the ``transparent`` keyword."""
    if value is None:
        return True
    v = value.strip().lower()
    return v in ("", "transparent", "initial", "inherit", "unset")


def parse_css_color(value: str) -> RGB | None:
    """Convert a CSS color value to an (R, G, B) tuple (0-255).

    Accepts hex (``#rgb``, ``#rrggbb``, with optional alpha), ``rgb()``,
    ``rgba()`` with an integer alpha, ``hsl()`` and the CSS named colors.
    Returns None for transparent colors, including a zero alpha channel.

    Raises ValueError if the value cannot be parsed.
    """
    if is_transparent(value):
        return None
    rgba = ImageColor.getrgb(value.strip())
    if len(rgba) == 4 and rgba[3] == 0:
        return None
    return (rgba[0], rgba[1], rgba[2])


def to_hex(color: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)
