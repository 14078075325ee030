"""
palette.py — Generate 11-step shade scales and the full brand color set.

Each scale walks a fixed lightness ladder (50 → 95% … 950 → 5%) and adds a
small seeded wobble to hue and saturation at every stop, so two projects on
the same theme still get their own palette.

Output per scale:
  {"50": "#f4eefb", "100": "#e9dcf7", ..., "900": "#1b0a2b", "950": "#0e0516"}

Usage:
    from atlas.palette import generate_colors, generate_text_colors

    colors = generate_colors(theme, "hackathon")
    colors["primary"]["500"]            # → "#8a1ff0"
    text = generate_text_colors(colors)  # accessible foreground per group
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .color_space import hex_to_hsl, hsl_to_hex
from .contrast import WCAG_AA, ensure_contrast
from .sequence import DeterministicSequence, Seed
from .themes import Theme

logger = logging.getLogger(__name__)

ColorScale = Dict[str, str]
ColorSet = Dict[str, ColorScale]

# ── Shade scale stops ─────────────────────────────────────────────────────────

SHADE_STOPS = [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]

LIGHTNESS_ANCHORS: List[Tuple[str, int]] = [
    ("50", 95),
    ("100", 90),
    ("200", 80),
    ("300", 70),
    ("400", 60),
    ("500", 50),
    ("600", 40),
    ("700", 30),
    ("800", 20),
    ("900", 10),
    ("950", 5),
]

HUE_JITTER = 5
SATURATION_JITTER = 5
NEUTRAL_HUE_JITTER = 10
NEUTRAL_SATURATION = 10

# (group, hue, saturation), generated in this order after the brand scales
SEMANTIC_COLORS: List[Tuple[str, float, float]] = [
    ("success", 140, 60),
    ("warning", 40, 80),
    ("error", 0, 70),
    ("info", 210, 60),
]

COLOR_GROUPS = ["primary", "secondary", "accent", "success", "warning", "error", "info", "neutral"]


def base_saturation_for(theme: Theme) -> float:
    return 80 if theme.contrast_ratio == "high" else 60


def generate_color_scale(
    hue: float,
    base_saturation: float,
    theme: Theme,
    sequence: DeterministicSequence,
) -> ColorScale:
    """
    Generate one 11-stop scale.

    Consumes exactly two draws per stop, hue jitter first, then saturation
    jitter, stops in ladder order. Changing that order changes every palette
    ever generated from an existing seed.
    """
    boost = theme.saturation_boost * 100
    scale: ColorScale = {}

    for stop, lightness in LIGHTNESS_ANCHORS:
        hue_variation = sequence.next_float(-HUE_JITTER, HUE_JITTER)
        actual_hue = (hue + hue_variation + 360) % 360

        sat_variation = sequence.next_float(-SATURATION_JITTER, SATURATION_JITTER)
        actual_sat = max(0.0, min(100.0, base_saturation + boost + sat_variation))

        scale[stop] = hsl_to_hex(actual_hue, actual_sat, lightness)

    return scale


def generate_colors(theme: Theme, seed: Seed) -> ColorSet:
    """
    Build the complete color set for (theme, seed).

    One sequence feeds every scale, in the order primary, secondary, accent,
    success, warning, error, info, then neutral (whose hue takes one extra
    draw before its scale).
    """
    sequence = DeterministicSequence(seed)
    base_saturation = base_saturation_for(theme)

    colors: ColorSet = {
        "primary": generate_color_scale(theme.primary_hue, base_saturation, theme, sequence),
        "secondary": generate_color_scale(theme.secondary_hue, base_saturation, theme, sequence),
        "accent": generate_color_scale(theme.accent_hue, base_saturation, theme, sequence),
    }

    for group, hue, saturation in SEMANTIC_COLORS:
        colors[group] = generate_color_scale(hue, saturation, theme, sequence)

    neutral_hue = theme.primary_hue + sequence.next_float(-NEUTRAL_HUE_JITTER, NEUTRAL_HUE_JITTER)
    colors["neutral"] = generate_color_scale(neutral_hue, NEUTRAL_SATURATION, theme, sequence)

    logger.debug(f"Generated {len(colors)} color scales for seed {seed!r} (state {sequence.current})")
    return colors


def generate_text_colors(
    colors: ColorSet,
    background: Optional[str] = None,
    target: float = WCAG_AA,
) -> Dict[str, str]:
    """
    Pick a readable foreground for every color group.

    Starts from the group's 700 stop and runs it through ``ensure_contrast``
    against ``background`` (the lightest neutral by default). No random draws.
    """
    surface = background or colors["neutral"]["50"]
    text_colors: Dict[str, str] = {}
    for group, scale in colors.items():
        h, s, l = hex_to_hsl(scale["700"])
        adjusted = ensure_contrast(h, s, l, surface, target)
        text_colors[group] = hsl_to_hex(h, s, adjusted)
    return text_colors
