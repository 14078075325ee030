"""
Tests for palette generation.

Covers:
- scale shape (11 stops, lowercase hex) and group order
- lightness ordering across every catalog theme
- reproducibility and the normative draw order
- accessible text colors
"""
import re

import pytest

from atlas.color_space import contrast_ratio, hex_to_hsl, hex_to_rgb
from atlas.contrast import WCAG_AA
from atlas.palette import (
    COLOR_GROUPS,
    NEUTRAL_HUE_JITTER,
    NEUTRAL_SATURATION,
    SEMANTIC_COLORS,
    SHADE_STOPS,
    base_saturation_for,
    generate_color_scale,
    generate_colors,
    generate_text_colors,
)
from atlas.sequence import DeterministicSequence
from atlas.themes import THEMES, Theme

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")
STOP_KEYS = [str(stop) for stop in SHADE_STOPS]


class TestColorScale:
    """Tests for generate_color_scale()."""

    def test_eleven_stops_in_order(self, cyberpunk):
        scale = generate_color_scale(280, 80, cyberpunk, DeterministicSequence("abc"))
        assert list(scale) == STOP_KEYS

    def test_all_values_lowercase_hex(self, cyberpunk):
        scale = generate_color_scale(280, 80, cyberpunk, DeterministicSequence("abc"))
        for value in scale.values():
            assert HEX_RE.match(value)

    def test_two_draws_per_stop(self, cyberpunk, midpoint_sequence):
        generate_color_scale(280, 80, cyberpunk, midpoint_sequence)
        assert midpoint_sequence.draws == 2 * len(SHADE_STOPS)

    def test_zero_jitter_anchors(self, minimal, midpoint_sequence):
        """With no jitter the 500 stop sits at exactly 50% lightness."""
        scale = generate_color_scale(220, 60, minimal, midpoint_sequence)
        _, _, lightness = hex_to_hsl(scale["500"])
        assert lightness == pytest.approx(50, abs=0.5)

    def test_negative_boost_clamps_to_gray(self):
        gray = Theme(name="Gray", primary_hue=0, secondary_hue=0, accent_hue=0, saturation_boost=-1.0)
        scale = generate_color_scale(200, 60, gray, DeterministicSequence("gray"))
        for value in scale.values():
            r, g, b = hex_to_rgb(value)
            assert r == g == b


class TestGenerateColors:
    """Tests for generate_colors()."""

    def test_group_order(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        assert list(colors) == COLOR_GROUPS

    def test_every_group_has_full_scale(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        for scale in colors.values():
            assert list(scale) == STOP_KEYS
            assert all(HEX_RE.match(v) for v in scale.values())

    def test_reproducible(self, cyberpunk):
        assert generate_colors(cyberpunk, "hackathon") == generate_colors(cyberpunk, "hackathon")

    def test_seed_changes_palette(self, cyberpunk):
        assert generate_colors(cyberpunk, "hackathon") != generate_colors(cyberpunk, "other-seed")

    def test_theme_changes_primary(self, cyberpunk, minimal):
        a = generate_colors(cyberpunk, "hackathon")["primary"]["500"]
        b = generate_colors(minimal, "hackathon")["primary"]["500"]
        assert a != b

    def test_integer_seed(self, cyberpunk):
        assert generate_colors(cyberpunk, 42) == generate_colors(cyberpunk, 42)

    @pytest.mark.parametrize("theme_key", list(THEMES))
    @pytest.mark.parametrize("seed", ["hackathon", "abc", 7])
    def test_lightness_decreases_along_scale(self, theme_key, seed):
        colors = generate_colors(THEMES[theme_key], seed)
        for scale in colors.values():
            lightness = [hex_to_hsl(scale[key])[2] for key in STOP_KEYS]
            assert lightness == sorted(lightness, reverse=True)

    def test_draw_order(self, cyberpunk):
        """Scales come off one sequence: brand, semantic, then neutral."""
        colors = generate_colors(cyberpunk, "hackathon")
        seq = DeterministicSequence("hackathon")
        base = base_saturation_for(cyberpunk)

        assert generate_color_scale(cyberpunk.primary_hue, base, cyberpunk, seq) == colors["primary"]
        assert generate_color_scale(cyberpunk.secondary_hue, base, cyberpunk, seq) == colors["secondary"]
        assert generate_color_scale(cyberpunk.accent_hue, base, cyberpunk, seq) == colors["accent"]
        for group, hue, saturation in SEMANTIC_COLORS:
            assert generate_color_scale(hue, saturation, cyberpunk, seq) == colors[group]

        neutral_hue = cyberpunk.primary_hue + seq.next_float(-NEUTRAL_HUE_JITTER, NEUTRAL_HUE_JITTER)
        assert generate_color_scale(neutral_hue, NEUTRAL_SATURATION, cyberpunk, seq) == colors["neutral"]

    def test_base_saturation(self, cyberpunk, minimal):
        assert base_saturation_for(cyberpunk) == 80
        assert base_saturation_for(minimal) == 60


class TestTextColors:
    """Tests for generate_text_colors()."""

    def test_one_per_group(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        assert list(generate_text_colors(colors)) == COLOR_GROUPS

    @pytest.mark.parametrize("theme_key", list(THEMES))
    def test_readable_on_lightest_neutral(self, theme_key):
        colors = generate_colors(THEMES[theme_key], "hackathon")
        surface = colors["neutral"]["50"]
        for value in generate_text_colors(colors).values():
            _, _, lightness = hex_to_hsl(value)
            assert (
                contrast_ratio(value, surface) >= WCAG_AA
                or round(lightness) in (0, 100)
            )

    def test_custom_background(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        for value in generate_text_colors(colors, background="#000000").values():
            assert contrast_ratio(value, "#000000") >= WCAG_AA or value == "#ffffff"

    def test_no_random_draws(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        assert generate_text_colors(colors) == generate_text_colors(colors)


class TestKnownPalettes:
    """Pinned hex values for existing (theme, seed) pairs."""

    def test_cyberpunk_hackathon(self, cyberpunk):
        colors = generate_colors(cyberpunk, "hackathon")
        assert colors["primary"]["500"] == "#ab00ff"
        assert colors["primary"]["50"] == "#f7e5ff"
        assert colors["neutral"]["950"] == "#0e0811"

    def test_minimal_hackathon(self, minimal):
        assert generate_colors(minimal, "hackathon")["primary"]["500"] == "#4f6fb0"

    def test_integer_seed(self):
        assert generate_colors(THEMES["nature"], 42)["primary"]["500"] == "#33cc3c"

    def test_empty_seed(self, cyberpunk):
        assert generate_colors(cyberpunk, "")["primary"]["500"] == "#b700ff"
