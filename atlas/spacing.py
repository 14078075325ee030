"""
spacing.py — Spacing, radius, border, shadow, opacity and z-index scales.

Spacing is a rem scale built from one jittered base unit (Tailwind-style step
names, step ``4`` = 1 × base). Radius follows the theme's font style, shadow
strength follows its contrast mood. Opacity, border width and z-index are
fixed tables.

All draws come from a sequence seeded with ``seed + "-spacing"`` so spacing
never shares randomness with colors or typography.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .formatting import format_number, round_half_up
from .sequence import DeterministicSequence, Seed, derive_sequence
from .themes import Theme


SPACING_SALT = "-spacing"
BASE_SPACING_UNIT = 1  # rem

# step name → multiplier of the base unit
SPACING_STEPS: List[Tuple[str, float]] = [
    ("0.5", 0.125),
    ("1", 0.25),
    ("1.5", 0.375),
    ("2", 0.5),
    ("2.5", 0.625),
    ("3", 0.75),
    ("3.5", 0.875),
    ("4", 1),
    ("5", 1.25),
    ("6", 1.5),
    ("7", 1.75),
    ("8", 2),
    ("9", 2.25),
    ("10", 2.5),
    ("11", 2.75),
    ("12", 3),
    ("14", 3.5),
    ("16", 4),
    ("20", 5),
    ("24", 6),
    ("28", 7),
    ("32", 8),
    ("36", 9),
    ("40", 10),
    ("44", 11),
    ("48", 12),
    ("52", 13),
    ("56", 14),
    ("60", 15),
    ("64", 16),
    ("72", 18),
    ("80", 20),
    ("96", 24),
]

RADIUS_STEPS: List[Tuple[str, float]] = [
    ("sm", 0.5),
    ("base", 1),
    ("md", 1.5),
    ("lg", 2),
    ("xl", 3),
    ("2xl", 4),
    ("3xl", 6),
]

RADIUS_BY_FONT_STYLE = {"rounded": 8, "geometric": 2}
DEFAULT_RADIUS = 4

BORDER_WIDTH: Dict[str, str] = {
    "0": "0",
    "default": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

OPACITY: Dict[str, str] = {
    "0": "0",
    "5": "0.05",
    "10": "0.1",
    "20": "0.2",
    "25": "0.25",
    "30": "0.3",
    "40": "0.4",
    "50": "0.5",
    "60": "0.6",
    "70": "0.7",
    "75": "0.75",
    "80": "0.8",
    "90": "0.9",
    "95": "0.95",
    "100": "1",
}

Z_INDEX: Dict[str, str] = {
    "0": "0",
    "10": "10",
    "20": "20",
    "30": "30",
    "40": "40",
    "50": "50",
    "auto": "auto",
}


def _dimension(value: float, unit: str) -> str:
    return f"{format_number(round_half_up(value, 1))}{unit}"


def generate_spacing(base_unit: float, sequence: DeterministicSequence) -> Dict[str, str]:
    """One draw in [-0.5, 0.5) on the base unit, then every step in rem."""
    actual_base = base_unit + sequence.next_float(-0.5, 0.5)

    spacing: Dict[str, str] = {"0": "0", "px": "1px"}
    for step, multiplier in SPACING_STEPS:
        spacing[step] = _dimension(actual_base * multiplier, "rem")
    return spacing


def generate_border_radius(theme: Theme, sequence: DeterministicSequence) -> Dict[str, str]:
    """Radius base 8 (rounded) / 2 (geometric) / 4, one draw in [-1, 1)."""
    base = RADIUS_BY_FONT_STYLE.get(theme.font_style, DEFAULT_RADIUS)
    actual_base = base + sequence.next_float(-1, 1)

    radius: Dict[str, str] = {"none": "0"}
    for step, multiplier in RADIUS_STEPS:
        radius[step] = _dimension(actual_base * multiplier, "px")
    radius["full"] = "9999px"
    return radius


def generate_shadows(theme: Theme, sequence: DeterministicSequence) -> Dict[str, str]:
    """Box shadows driven by one opacity: 0.3 for high contrast, else 0.15, ±0.05."""
    intensity = 0.3 if theme.contrast_ratio == "high" else 0.15
    opacity = intensity + sequence.next_float(-0.05, 0.05)

    def rgba(alpha: float) -> str:
        return f"rgba(0, 0, 0, {format_number(alpha)})"

    return {
        "sm": f"0 1px 2px 0 {rgba(opacity)}",
        "base": f"0 1px 3px 0 {rgba(opacity)}, 0 1px 2px 0 {rgba(opacity * 0.6)}",
        "md": f"0 4px 6px -1px {rgba(opacity)}, 0 2px 4px -1px {rgba(opacity * 0.6)}",
        "lg": f"0 10px 15px -3px {rgba(opacity)}, 0 4px 6px -2px {rgba(opacity * 0.5)}",
        "xl": f"0 20px 25px -5px {rgba(opacity)}, 0 10px 10px -5px {rgba(opacity * 0.4)}",
        "2xl": f"0 25px 50px -12px {rgba(opacity * 1.5)}",
        "inner": f"inset 0 2px 4px 0 {rgba(opacity * 0.6)}",
        "none": "none",
    }


def generate_spacing_and_sizing(theme: Theme, seed: Seed) -> dict:
    """
    Spacing tokens for (theme, seed). Draw order on the salted sequence:
    spacing, border radius, shadows.
    """
    sequence = derive_sequence(seed, SPACING_SALT)

    return {
        "spacing": generate_spacing(BASE_SPACING_UNIT, sequence),
        "borderRadius": generate_border_radius(theme, sequence),
        "borderWidth": dict(BORDER_WIDTH),
        "shadows": generate_shadows(theme, sequence),
        "opacity": dict(OPACITY),
        "zIndex": dict(Z_INDEX),
    }
