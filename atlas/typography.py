"""
typography.py — Modular type scale, line heights, letter spacing, weights.

The font-size scale is a geometric series around a 16px base; the ratio gets
a tiny seeded nudge (±0.02) so scales differ between projects while staying
on a recognisable musical interval.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .formatting import round_half_up
from .sequence import DeterministicSequence, Seed
from .themes import Theme

logger = logging.getLogger(__name__)

BASE_FONT_SIZE = 16
RATIO_MINOR_THIRD = 1.25
RATIO_PERFECT_FOURTH = 1.333

# ── Font stacks ───────────────────────────────────────────────────────────────

FONT_STACKS: Dict[str, Dict[str, str]] = {
    "geometric": {
        "primary": '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif',
        "heading": '"Space Grotesk", -apple-system, BlinkMacSystemFont, sans-serif',
        "mono": '"JetBrains Mono", "Fira Code", Consolas, Monaco, monospace',
    },
    "sans-serif": {
        "primary": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
        "heading": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif',
        "mono": 'ui-monospace, "Cascadia Code", Menlo, Monaco, monospace',
    },
    "humanist": {
        "primary": '"Open Sans", "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif',
        "heading": '"Merriweather", Georgia, "Times New Roman", serif',
        "mono": '"Source Code Pro", Consolas, Monaco, monospace',
    },
    "rounded": {
        "primary": 'ui-rounded, "SF Pro Rounded", "Nunito", "Helvetica Neue", Arial, sans-serif',
        "heading": 'ui-rounded, "SF Pro Rounded", "Nunito", sans-serif',
        "mono": '"Courier Prime", "Courier New", Courier, monospace',
    },
}

DEFAULT_FONT_STYLE = "sans-serif"

# label → exponent of the ratio
TYPE_SCALE_STEPS: List[Tuple[str, int]] = [
    ("xs", -2),
    ("sm", -1),
    ("base", 0),
    ("lg", 1),
    ("xl", 2),
    ("2xl", 3),
    ("3xl", 4),
    ("4xl", 5),
    ("5xl", 6),
]

BASE_LINE_HEIGHTS: List[Tuple[str, float]] = [
    ("tight", 1.25),
    ("snug", 1.375),
    ("normal", 1.5),
    ("relaxed", 1.625),
    ("loose", 2),
]

LETTER_SPACING: Dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

FONT_WEIGHTS: Dict[str, int] = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}


def font_stack_for(font_style: str) -> Dict[str, str]:
    """Font stack bundle for a theme font style; unknown styles get sans-serif."""
    return dict(FONT_STACKS.get(font_style, FONT_STACKS[DEFAULT_FONT_STYLE]))


def type_ratio_for(theme: Theme) -> float:
    """Minor third by default, perfect fourth for high-contrast themes."""
    return RATIO_PERFECT_FOURTH if theme.contrast_ratio == "high" else RATIO_MINOR_THIRD


def generate_type_scale(base_size: float, ratio: float, sequence: DeterministicSequence) -> Dict[str, float]:
    """
    Font sizes in px for xs … 5xl, each ``base_size * ratio ** k`` to one decimal.

    One draw: the ratio jitter in [-0.02, 0.02). ``base`` is ``base_size`` as given.
    """
    actual_ratio = ratio + sequence.next_float(-0.02, 0.02)

    scale: Dict[str, float] = {}
    for label, exponent in TYPE_SCALE_STEPS:
        if exponent == 0:
            scale[label] = base_size
        elif exponent < 0:
            scale[label] = round_half_up(base_size / actual_ratio ** -exponent, 1)
        else:
            scale[label] = round_half_up(base_size * actual_ratio ** exponent, 1)
    return scale


def generate_line_heights(sequence: DeterministicSequence) -> Dict[str, float]:
    """Unitless line heights sharing one jitter in [-0.05, 0.05); ``none`` stays 1."""
    variation = sequence.next_float(-0.05, 0.05)
    heights: Dict[str, float] = {"none": 1}
    for label, base in BASE_LINE_HEIGHTS:
        heights[label] = round_half_up(base + variation, 2)
    return heights


def generate_typography(theme: Theme, seed: Seed) -> dict:
    """
    Typography tokens for (theme, seed): fonts, fontSize, lineHeight,
    letterSpacing, fontWeight. Draws the type scale, then line heights.
    """
    sequence = DeterministicSequence(seed)

    typography = {
        "fonts": font_stack_for(theme.font_style),
        "fontSize": generate_type_scale(BASE_FONT_SIZE, type_ratio_for(theme), sequence),
        "lineHeight": generate_line_heights(sequence),
        "letterSpacing": dict(LETTER_SPACING),
        "fontWeight": dict(FONT_WEIGHTS),
    }
    logger.debug(f"Typography for {theme.name}: ratio base {type_ratio_for(theme)}")
    return typography
