"""
color_space.py — HSL / RGB / hex conversion and WCAG 2.1 contrast math.

Pure functions, no state. HSL arguments use degrees for hue and percent for
saturation / lightness (0–100); RGB channels are ints 0–255; hex strings are
lowercase ``#rrggbb``.
"""

from __future__ import annotations

import colorsys
import math
from typing import Tuple

RGB = Tuple[int, int, int]

# ── HSL → RGB ─────────────────────────────────────────────────────────────────


def _channel(value: float) -> int:
    return int(math.floor(value * 255 + 0.5))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSL (h: 0–360, s: 0–100, l: 0–100) → (r, g, b), each rounded 0–255."""
    h = h / 360
    s = s / 100
    l = l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return _channel(r), _channel(g), _channel(b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{int(v):02x}" for v in (r, g, b))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# ── hex → RGB / HSL ───────────────────────────────────────────────────────────


def hex_to_rgb(hex_str: str) -> RGB:
    """
    Parse ``#rrggbb``, ``rrggbb`` or ``#rgb`` into an RGB triple.

    Raises:
        ValueError: on anything that is not a 3- or 6-digit hex color.
    """
    h = hex_str.strip().lstrip("#")
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    if len(h) != 6:
        raise ValueError(f"Not a hex color: {hex_str!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def hex_to_hsl(hex_str: str) -> Tuple[float, float, float]:
    """hex → (h: 0–360, s: 0–100, l: 0–100)."""
    r, g, b = (v / 255 for v in hex_to_rgb(hex_str))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360, s * 100, l * 100


# ── WCAG 2.1 ──────────────────────────────────────────────────────────────────


def _linearize(v: int) -> float:
    c = v / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_str: str) -> float:
    """Relative luminance of an sRGB color, 0 (black) to 1 (white)."""
    r, g, b = (_linearize(v) for v in hex_to_rgb(hex_str))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """WCAG contrast ratio between two colors, 1.0 to 21.0, order-independent."""
    l1 = relative_luminance(hex_a)
    l2 = relative_luminance(hex_b)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_dark(hex_str: str) -> bool:
    """True if the color's relative luminance is below 0.5."""
    return relative_luminance(hex_str) < 0.5
