"""
design_system.py — Assemble a complete design system from (theme, seed).

Colors, typography and spacing are generated independently, each from its
own sequence, then bundled with optional component tokens and metadata.
Nothing here touches the filesystem; see ``writers.py`` for that.

Usage:
    from atlas.design_system import build_design_system

    ds = build_design_system("cyberpunk", "hackathon")
    ds.colors["primary"]["500"]
    ds.to_dict()        # JSON-ready
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

from . import __version__
from .components import generate_component_tokens
from .palette import ColorSet, generate_colors, generate_text_colors
from .sequence import Seed
from .spacing import generate_spacing_and_sizing
from .themes import Theme, get_theme, load_custom_theme
from .typography import generate_typography

logger = logging.getLogger(__name__)

GENERATOR_NAME = "Atlas"


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass
class DesignSystem:
    """Everything generated for one (theme, seed) pair."""
    theme: str                     # catalog key, or the custom theme's name
    seed: Seed
    theme_record: Theme
    colors: ColorSet
    typography: dict
    spacing: dict
    text_colors: Dict[str, str] = field(default_factory=dict)
    components: Optional[dict] = None
    meta: Dict[str, str] = field(default_factory=dict)

    def to_dict(self, include_meta: bool = True) -> dict:
        """Serialisable form. ``include_meta=False`` drops the wall-clock metadata."""
        data: dict = {}
        if include_meta:
            data["meta"] = dict(self.meta)
        data.update({
            "theme": self.theme,
            "seed": self.seed,
            "colors": self.colors,
            "textColors": self.text_colors,
            "typography": self.typography,
            "spacing": self.spacing,
        })
        if self.components is not None:
            data["components"] = self.components
        return data


# ── Builders ──────────────────────────────────────────────────────────────────

def generate_design_system(
    theme: Theme,
    seed: Seed,
    *,
    theme_name: Optional[str] = None,
    include_components: bool = True,
    now: Optional[datetime] = None,
) -> DesignSystem:
    """
    Generate a design system for an already-resolved theme.

    Args:
        theme:              Theme record
        seed:               Any string or int; identical seeds give identical tokens
        theme_name:         Label stored on the result (defaults to theme.name)
        include_components: Whether to compose component tokens
        now:                Timestamp for ``meta.generated`` (defaults to utcnow)
    """
    colors = generate_colors(theme, seed)
    typography = generate_typography(theme, seed)
    spacing = generate_spacing_and_sizing(theme, seed)

    generated_at = (now or datetime.now(timezone.utc)).isoformat()
    ds = DesignSystem(
        theme=theme_name or theme.name,
        seed=seed,
        theme_record=theme,
        colors=colors,
        typography=typography,
        spacing=spacing,
        text_colors=generate_text_colors(colors),
        meta={
            "generator": GENERATOR_NAME,
            "version": __version__,
            "generated": generated_at,
        },
    )

    if include_components:
        ds.components = generate_component_tokens(colors, typography, spacing, theme)

    logger.debug(f"Design system ready: theme={ds.theme} seed={seed!r}")
    return ds


def build_design_system(
    theme_name: str,
    seed: Seed,
    custom_theme_path: Optional[Union[str, Path]] = None,
    include_components: bool = True,
    now: Optional[datetime] = None,
) -> DesignSystem:
    """
    Resolve a theme (catalog key or custom JSON file) and generate from it.

    Raises:
        ThemeNotFoundError, ThemeFileError, ThemeValidationError
    """
    if custom_theme_path:
        theme = load_custom_theme(custom_theme_path)
        label = theme.name
    else:
        theme = get_theme(theme_name)
        label = theme_name.strip().lower()

    return generate_design_system(
        theme,
        seed,
        theme_name=label,
        include_components=include_components,
        now=now,
    )
