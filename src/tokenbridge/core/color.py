"""
Color parsing and WCAG contrast math.

Pure-Python; parses hex, rgb()/rgba() and hsl()/hsla() strings into 8-bit
RGB channels and computes relative luminance and contrast ratios per
WCAG 2.x.
"""

from __future__ import annotations

import colorsys
import re
from typing import NamedTuple

from .ir import ContrastResult

# WCAG thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_SHORT_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{3}$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(,\s*[\d.]+\s*)?\)$", re.IGNORECASE)
_HSL_RE = re.compile(
    r"^hsla?\(\s*(\d+)\s*,\s*(\d+)%?\s*,\s*(\d+)%?\s*(,\s*[\d.]+\s*)?\)$", re.IGNORECASE
)
_REFERENCE_RE = re.compile(r"^\{.+\}$")

CSS_NAMED_COLORS: frozenset[str] = frozenset(
    {
        "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige", "bisque",
        "black", "blanchedalmond", "blue", "blueviolet", "brown", "burlywood",
        "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk",
        "crimson", "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
        "darkgreen", "darkgrey", "darkkhaki", "darkmagenta", "darkolivegreen",
        "darkorange", "darkorchid", "darkred", "darksalmon", "darkseagreen",
        "darkslateblue", "darkslategray", "darkslategrey", "darkturquoise",
        "darkviolet", "deeppink", "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
        "firebrick", "floralwhite", "forestgreen", "fuchsia", "gainsboro",
        "ghostwhite", "gold", "goldenrod", "gray", "green", "greenyellow", "grey",
        "honeydew", "hotpink", "indianred", "indigo", "ivory", "khaki", "lavender",
        "lavenderblush", "lawngreen", "lemonchiffon", "lightblue", "lightcoral",
        "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
        "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
        "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow", "lime",
        "limegreen", "linen", "magenta", "maroon", "mediumaquamarine", "mediumblue",
        "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
        "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
        "mintcream", "mistyrose", "moccasin", "navajowhite", "navy", "oldlace",
        "olive", "olivedrab", "orange", "orangered", "orchid", "palegoldenrod",
        "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff",
        "peru", "pink", "plum", "powderblue", "purple", "rebeccapurple", "red",
        "rosybrown", "royalblue", "saddlebrown", "salmon", "sandybrown", "seagreen",
        "seashell", "sienna", "silver", "skyblue", "slateblue", "slategray",
        "slategrey", "snow", "springgreen", "steelblue", "tan", "teal", "thistle",
        "tomato", "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
        "yellowgreen",
        # CSS keywords accepted as color values
        "transparent", "currentcolor", "inherit",
    }
)  # fmt: skip


class RGB(NamedTuple):
    """8-bit sRGB channels."""

    r: int
    g: int
    b: int


def normalize_hex(hex_value: str) -> str:
    """Normalize a hex color to ``#RRGGBB`` uppercase (3-digit form expanded)."""
    normalized = hex_value.strip().upper().lstrip("#")
    if len(normalized) == 3:
        normalized = "".join(c + c for c in normalized)
    return f"#{normalized}"


def is_short_hex(value: str) -> bool:
    return bool(_SHORT_HEX_RE.match(value))


def is_valid_color_format(value: str) -> bool:
    """Check a color token value against the accepted color syntaxes.

    Accepts 3/6/8-digit hex, rgb()/rgba() with integer channels,
    hsl()/hsla(), CSS named colors and ``{brace.wrapped}`` references.
    """
    if _HEX_RE.match(value):
        return True
    if _RGB_RE.match(value):
        return True
    if _HSL_RE.match(value):
        return True
    if value.lower() in CSS_NAMED_COLORS:
        return True
    return bool(_REFERENCE_RE.match(value))


def parse_color(color: str) -> RGB | None:
    """Parse a color string into RGB, or None when the syntax is unsupported.

    The alpha channel of 8-digit hex and rgba()/hsla() is ignored.
    """
    color = color.strip()

    hex_match = _HEX_RE.match(color)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) == 3:
            digits = "".join(c + c for c in digits)
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    rgb_match = _RGB_RE.match(color)
    if rgb_match:
        r, g, b = (min(int(rgb_match.group(i)), 255) for i in (1, 2, 3))
        return RGB(r, g, b)

    hsl_match = _HSL_RE.match(color)
    if hsl_match:
        h = (int(hsl_match.group(1)) % 360) / 360
        s = min(int(hsl_match.group(2)), 100) / 100
        lightness = min(int(hsl_match.group(3)), 100) / 100
        r_f, g_f, b_f = colorsys.hls_to_rgb(h, lightness, s)
        return RGB(round(r_f * 255), round(g_f * 255), round(b_f * 255))

    return None


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an sRGB color (0 = black, 1 = white)."""
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(rgb1: RGB, rgb2: RGB) -> float:
    """Contrast ratio between two colors, in [1, 21]."""
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def check_contrast(color1: str, color2: str) -> ContrastResult | None:
    """Compute the WCAG contrast of two color strings.

    Returns None when either color cannot be parsed.
    """
    rgb1 = parse_color(color1)
    rgb2 = parse_color(color2)
    if rgb1 is None or rgb2 is None:
        return None

    ratio = contrast_ratio(rgb1, rgb2)
    return ContrastResult(
        color1=color1,
        color2=color2,
        ratio=ratio,
        passes_aa=ratio >= AA_NORMAL,
        passes_aa_large=ratio >= AA_LARGE,
        passes_aaa=ratio >= AAA_NORMAL,
        passes_aaa_large=ratio >= AAA_LARGE,
    )
