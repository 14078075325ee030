"""
themes.py — Theme catalog, custom theme loading and theme recommendations.

A theme is the narrative behind a design system: three hues, a saturation
bias, a contrast mood and a font style. The catalog is static data; custom
themes come from a JSON file with the same (camelCase) field names.

Usage:
    from atlas.themes import get_theme, load_custom_theme, recommend_themes

    theme = get_theme("cyberpunk")
    custom = load_custom_theme("brand/theme.json")
    for rec in recommend_themes("fintech dashboard")[:3]:
        print(rec.key, rec.score)
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ThemeFileError, ThemeNotFoundError, ThemeValidationError

logger = logging.getLogger(__name__)

ContrastLevel = Literal["low", "medium", "high", "extreme"]


# ── Models ────────────────────────────────────────────────────────────────────

class Archetype(BaseModel):
    """Style overrides merged into component tokens after composition."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    border_width: Optional[str] = Field(default=None, description="e.g. '4px'")
    border_radius: Optional[str] = Field(default=None, description="Forced radius for every component")
    shadow_type: Optional[Literal["hard", "soft"]] = None
    show_borders: bool = False
    blur: Optional[str] = Field(default=None, description="Backdrop blur, e.g. '10px'")
    opacity: Optional[float] = Field(default=None, ge=0, le=1)


class Theme(BaseModel):
    """Immutable theme record. Never mutated after load."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    name: str
    description: str = ""
    mood: str = ""
    use_case: str = ""
    keywords: Tuple[str, ...] = ()
    primary_hue: float = Field(description="Degrees, 0–360")
    secondary_hue: float
    accent_hue: float
    saturation_boost: float = Field(default=0.0, description="Signed fraction added to base saturation")
    contrast_ratio: ContrastLevel = "medium"
    font_style: str = "sans-serif"
    archetype: Optional[Archetype] = None


# ── Catalog ───────────────────────────────────────────────────────────────────

THEMES: Dict[str, Theme] = {
    "cyberpunk": Theme(
        name="Cyberpunk",
        description="Neon-lit dystopian future with high contrast and electric vibes",
        mood="intense, futuristic, rebellious",
        use_case="Gaming, web3, developer tools, hackathon demos",
        keywords=("cyber", "neon", "gaming", "game", "web3", "crypto", "blockchain", "hacker", "futuristic", "tech"),
        primary_hue=280,      # purple
        secondary_hue=180,    # cyan
        accent_hue=320,       # magenta
        saturation_boost=0.3,
        contrast_ratio="high",
        font_style="geometric",
    ),
    "minimal": Theme(
        name="Minimal",
        description="Clean, spacious, and purposeful with maximum clarity",
        mood="calm, focused, professional",
        use_case="SaaS, productivity, documentation, corporate sites",
        keywords=("minimal", "clean", "saas", "productivity", "corporate", "business", "enterprise", "docs", "professional"),
        primary_hue=220,
        secondary_hue=210,
        accent_hue=200,
        saturation_boost=-0.2,
        contrast_ratio="medium",
        font_style="sans-serif",
    ),
    "nature": Theme(
        name="Nature",
        description="Organic earth tones with warmth and natural harmony",
        mood="warm, grounded, peaceful",
        use_case="Sustainability, wellness, food, outdoor brands",
        keywords=("nature", "eco", "green", "sustainability", "sustainable", "organic", "climate", "food", "wellness", "farm"),
        primary_hue=120,
        secondary_hue=30,
        accent_hue=60,
        saturation_boost=0.0,
        contrast_ratio="medium",
        font_style="humanist",
    ),
    "darkmode": Theme(
        name="Dark Mode",
        description="Low-light optimized with deep backgrounds and glowing accents",
        mood="mysterious, comfortable, modern",
        use_case="Dashboards, developer tools, media apps",
        keywords=("dark", "night", "dashboard", "developer", "media", "streaming", "analytics", "modern"),
        primary_hue=240,
        secondary_hue=260,
        accent_hue=200,
        saturation_boost=0.1,
        contrast_ratio="high",
        font_style="sans-serif",
    ),
    "sunset": Theme(
        name="Sunset",
        description="Warm gradient palette inspired by golden hour",
        mood="energetic, optimistic, vibrant",
        use_case="Social apps, travel, lifestyle, events",
        keywords=("sunset", "warm", "social", "travel", "lifestyle", "events", "music", "community", "vibrant"),
        primary_hue=20,
        secondary_hue=340,
        accent_hue=50,
        saturation_boost=0.2,
        contrast_ratio="medium",
        font_style="rounded",
    ),
    "arctic": Theme(
        name="Arctic",
        description="Cool, crisp palette with icy blues and clean whites",
        mood="pristine, fresh, spacious",
        use_case="Healthcare, fintech, enterprise tools",
        keywords=("arctic", "cool", "health", "healthcare", "medical", "fintech", "finance", "bank", "insurance", "crisp"),
        primary_hue=190,
        secondary_hue=210,
        accent_hue=170,
        saturation_boost=-0.1,
        contrast_ratio="medium",
        font_style="sans-serif",
    ),
    "retrowave": Theme(
        name="Retrowave",
        description="80s inspired with bold colors and nostalgic vibes",
        mood="nostalgic, bold, energetic",
        use_case="Music, entertainment, retro games, creative portfolios",
        keywords=("retro", "80s", "synthwave", "arcade", "nostalgic", "pixel", "music", "entertainment", "vintage"),
        primary_hue=300,
        secondary_hue=180,
        accent_hue=60,
        saturation_boost=0.4,
        contrast_ratio="high",
        font_style="geometric",
    ),
    "forest": Theme(
        name="Forest",
        description="Deep greens with natural textures and organic flow",
        mood="serene, natural, grounded",
        use_case="Outdoor, education, mindfulness, non-profits",
        keywords=("forest", "outdoor", "hiking", "education", "learning", "mindfulness", "meditation", "nonprofit", "calm"),
        primary_hue=140,
        secondary_hue=80,
        accent_hue=40,
        saturation_boost=0.0,
        contrast_ratio="medium",
        font_style="humanist",
    ),
    "neobrutalism": Theme(
        name="Neo-Brutalism",
        description="Vibrant colors, thick borders, and aggressive shadows",
        mood="bold, loud, raw",
        use_case="Indie products, portfolios, marketing pages that need to stand out",
        keywords=("brutalist", "brutalism", "bold", "raw", "loud", "indie", "portfolio", "marketing", "playful", "fun"),
        primary_hue=50,
        secondary_hue=180,
        accent_hue=320,
        saturation_boost=0.5,
        contrast_ratio="high",
        font_style="geometric",
        archetype=Archetype(
            border_width="4px",
            border_radius="0px",
            shadow_type="hard",
            show_borders=True,
        ),
    ),
    "glassmorphism": Theme(
        name="Glassmorphism",
        description="Frosted glass effect with soft glows and minimalism",
        mood="elegant, transparent, layered",
        use_case="Consumer apps, AI products, premium landing pages",
        keywords=("glass", "glassmorphism", "elegant", "premium", "luxury", "ai", "consumer", "layered", "soft"),
        primary_hue=210,
        secondary_hue=280,
        accent_hue=190,
        saturation_boost=0.2,
        contrast_ratio="medium",
        font_style="sans-serif",
        archetype=Archetype(
            blur="10px",
            opacity=0.6,
            border_radius="24px",
            border_width="1px",
            shadow_type="soft",
        ),
    ),
}

DEFAULT_THEME = "cyberpunk"


# ── Lookup ────────────────────────────────────────────────────────────────────

def get_theme(name: str) -> Theme:
    """
    Look up a catalog theme by key, case-insensitively.

    Raises:
        ThemeNotFoundError: listing the valid keys.
    """
    theme = THEMES.get(name.strip().lower())
    if theme is None:
        raise ThemeNotFoundError(name, THEMES.keys())
    return theme


def list_themes() -> List[Tuple[str, Theme]]:
    """All catalog themes as (key, theme) pairs, in catalog order."""
    return list(THEMES.items())


# ── Custom themes ─────────────────────────────────────────────────────────────

REQUIRED_FIELDS = ("primaryHue",)


def _read_field(data: dict, camel: str):
    """Fetch a field by its camelCase or snake_case name."""
    if camel in data:
        return data[camel]
    snake = re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), camel)
    return data.get(snake)


def _keywords(value) -> Tuple[str, ...]:
    """Keywords as a tuple of lowercase words; a string is split on commas and whitespace."""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(_words(value))
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(word for v in value for word in _words(v))
    raise ThemeValidationError(
        "Custom theme keywords must be a string or a list of strings", field="keywords"
    )


def theme_from_dict(data: dict) -> Theme:
    """
    Build a Theme from a loose mapping, filling defaults for optional fields.

    Raises:
        ThemeValidationError: a required field is missing or a value is invalid.
    """
    for required in REQUIRED_FIELDS:
        if _read_field(data, required) is None:
            raise ThemeValidationError(
                f"Custom theme missing required field: {required}", field=required
            )

    primary = _read_field(data, "primaryHue")
    secondary = _read_field(data, "secondaryHue")
    accent = _read_field(data, "accentHue")
    keywords = _keywords(_read_field(data, "keywords"))

    try:
        primary = float(primary)
        record = {
            "name": _read_field(data, "name") or "Custom",
            "description": _read_field(data, "description") or "Custom theme",
            "mood": _read_field(data, "mood") or "custom",
            "use_case": _read_field(data, "useCase") or "",
            "keywords": keywords,
            "primary_hue": primary,
            "secondary_hue": secondary if secondary is not None else (primary + 120) % 360,
            "accent_hue": accent if accent is not None else (primary + 240) % 360,
            "saturation_boost": _read_field(data, "saturationBoost") or 0.0,
            "contrast_ratio": _read_field(data, "contrastRatio") or "medium",
            "font_style": _read_field(data, "fontStyle") or "sans-serif",
            "archetype": _read_field(data, "archetype"),
        }
        return Theme.model_validate(record)
    except (TypeError, ValueError) as exc:
        field_name = ""
        if isinstance(exc, ValidationError) and exc.errors():
            field_name = ".".join(str(p) for p in exc.errors()[0]["loc"])
        raise ThemeValidationError(f"Invalid custom theme: {exc}", field=field_name) from exc


def load_custom_theme(path: Union[str, Path]) -> Theme:
    """
    Load a theme from a JSON file.

    Raises:
        ThemeFileError:       file missing or not valid JSON.
        ThemeValidationError: required field missing or value invalid.
    """
    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        raise ThemeFileError(f"Custom theme file not found: {resolved}")

    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ThemeFileError(f"Custom theme file is not valid JSON: {resolved} ({exc})") from exc

    if not isinstance(data, dict):
        raise ThemeFileError(f"Custom theme file must hold a JSON object: {resolved}")

    theme = theme_from_dict(data)
    logger.info(f"Loaded custom theme '{theme.name}' from {resolved}")
    return theme


# ── Recommendations ───────────────────────────────────────────────────────────

@dataclass
class ThemeRecommendation:
    key: str
    theme: Theme
    score: int


def _words(text: str) -> List[str]:
    return re.findall(r"[a-z0-9]+", text.lower())


def recommend_themes(keywords: str) -> List[ThemeRecommendation]:
    """
    Rank every catalog theme against a free-form project description.

    A word matching one of the theme's keywords scores 3; a word found in its
    mood, description or use case scores 1. Ties keep catalog order.
    """
    words = _words(keywords)
    recommendations = []
    for key, theme in THEMES.items():
        prose = set(_words(f"{theme.mood} {theme.description} {theme.use_case}"))
        score = 0
        for word in words:
            if word in theme.keywords or word == key:
                score += 3
            elif word in prose:
                score += 1
        recommendations.append(ThemeRecommendation(key=key, theme=theme, score=score))

    recommendations.sort(key=lambda rec: -rec.score)
    return recommendations
