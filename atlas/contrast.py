"""
contrast.py — Nudge a color's lightness until it reads against a background.

    l = ensure_contrast(220, 60, 55, "#ffffff")          # → 45-ish
    text = pick_best_contrast_text("#7c3aed", "#fafafa", "#0a0a0a")
"""

from __future__ import annotations

import logging

from .color_space import contrast_ratio, hsl_to_hex, relative_luminance

logger = logging.getLogger(__name__)

WCAG_AA = 4.5          # body text
WCAG_AA_LARGE = 3.0    # large text, UI components
WCAG_AAA = 7.0

MAX_STEPS = 50


def ensure_contrast(
    h: float,
    s: float,
    l: float,
    background: str,
    target: float = WCAG_AA,
) -> float:
    """
    Return a lightness for (h, s, ·) that meets ``target`` against ``background``.

    An already compliant lightness comes back unchanged. Otherwise lightness
    moves one point per step, up on a dark background and down on a light
    one, clamped to [0, 100], for at most 50 steps. If none of them passes,
    the answer is 0 (black) on a light background or 100 (white) on a dark
    one.
    """
    if contrast_ratio(hsl_to_hex(h, s, l), background) >= target:
        return l

    dark_background = relative_luminance(background) < 0.5
    direction = 1 if dark_background else -1

    for i in range(1, MAX_STEPS + 1):
        candidate = max(0, min(100, l + i * direction))
        if contrast_ratio(hsl_to_hex(h, s, candidate), background) >= target:
            return candidate

    fallback = 100 if dark_background else 0
    logger.debug(
        "No lightness within %d steps reaches %.2f:1 on %s, falling back to %d",
        MAX_STEPS, target, background, fallback,
    )
    return fallback


def pick_best_contrast_text(background: str, option_a: str, option_b: str) -> str:
    """Whichever option contrasts more with ``background``; ties go to ``option_a``."""
    ratio_a = contrast_ratio(background, option_a)
    ratio_b = contrast_ratio(background, option_b)
    return option_a if ratio_a >= ratio_b else option_b
