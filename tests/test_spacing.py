"""
Tests for spacing, radius and shadow tokens.
"""
from atlas.sequence import derive_sequence
from atlas.spacing import (
    BORDER_WIDTH,
    OPACITY,
    SPACING_SALT,
    SPACING_STEPS,
    Z_INDEX,
    generate_border_radius,
    generate_shadows,
    generate_spacing,
    generate_spacing_and_sizing,
)
from atlas.themes import get_theme


class TestSpacingScale:
    """Tests for generate_spacing()."""

    def test_zero_jitter_values(self, midpoint_sequence):
        spacing = generate_spacing(1, midpoint_sequence)
        assert spacing["0"] == "0"
        assert spacing["px"] == "1px"
        assert spacing["4"] == "1rem"
        assert spacing["8"] == "2rem"
        assert spacing["96"] == "24rem"

    def test_one_decimal_half_up(self, midpoint_sequence):
        """0.25rem rounds to 0.3, 0.125rem to 0.1."""
        spacing = generate_spacing(1, midpoint_sequence)
        assert spacing["1"] == "0.3rem"
        assert spacing["0.5"] == "0.1rem"

    def test_all_steps_present(self, midpoint_sequence):
        spacing = generate_spacing(1, midpoint_sequence)
        assert len(spacing) == len(SPACING_STEPS) + 2
        assert list(spacing)[:2] == ["0", "px"]

    def test_single_draw(self, midpoint_sequence):
        generate_spacing(1, midpoint_sequence)
        assert midpoint_sequence.draws == 1


class TestBorderRadius:
    """Tests for generate_border_radius()."""

    def test_geometric_base(self, cyberpunk, midpoint_sequence):
        radius = generate_border_radius(cyberpunk, midpoint_sequence)
        assert radius["none"] == "0"
        assert radius["sm"] == "1px"
        assert radius["base"] == "2px"
        assert radius["md"] == "3px"
        assert radius["full"] == "9999px"

    def test_rounded_base(self, midpoint_sequence):
        radius = generate_border_radius(get_theme("sunset"), midpoint_sequence)
        assert radius["base"] == "8px"
        assert radius["xl"] == "24px"

    def test_default_base(self, minimal, midpoint_sequence):
        radius = generate_border_radius(minimal, midpoint_sequence)
        assert radius["base"] == "4px"
        assert radius["lg"] == "8px"


class TestShadows:
    """Tests for generate_shadows()."""

    def test_high_contrast_opacity(self, cyberpunk, midpoint_sequence):
        shadows = generate_shadows(cyberpunk, midpoint_sequence)
        assert shadows["sm"] == "0 1px 2px 0 rgba(0, 0, 0, 0.3)"

    def test_medium_contrast_opacity(self, minimal, midpoint_sequence):
        shadows = generate_shadows(minimal, midpoint_sequence)
        assert shadows["sm"] == "0 1px 2px 0 rgba(0, 0, 0, 0.15)"

    def test_keys(self, minimal, midpoint_sequence):
        shadows = generate_shadows(minimal, midpoint_sequence)
        assert list(shadows) == ["sm", "base", "md", "lg", "xl", "2xl", "inner", "none"]
        assert shadows["none"] == "none"
        assert shadows["inner"].startswith("inset ")


class TestSpacingAndSizing:
    """Tests for generate_spacing_and_sizing()."""

    def test_keys(self, cyberpunk):
        result = generate_spacing_and_sizing(cyberpunk, "abc")
        assert list(result) == ["spacing", "borderRadius", "borderWidth", "shadows", "opacity", "zIndex"]

    def test_uses_salted_sequence(self, cyberpunk):
        result = generate_spacing_and_sizing(cyberpunk, "abc")
        seq = derive_sequence("abc", SPACING_SALT)
        assert result["spacing"] == generate_spacing(1, seq)
        assert result["borderRadius"] == generate_border_radius(cyberpunk, seq)
        assert result["shadows"] == generate_shadows(cyberpunk, seq)

    def test_reproducible(self, cyberpunk):
        assert generate_spacing_and_sizing(cyberpunk, "abc") == generate_spacing_and_sizing(cyberpunk, "abc")

    def test_static_tables(self, minimal):
        result = generate_spacing_and_sizing(minimal, "abc")
        assert result["borderWidth"] == BORDER_WIDTH
        assert result["opacity"] == OPACITY
        assert result["zIndex"] == Z_INDEX
        assert result["opacity"]["100"] == "1"


class TestKnownSpacing:
    """Pinned spacing tokens for an existing (theme, seed) pair."""

    def test_cyberpunk_hackathon(self, cyberpunk):
        result = generate_spacing_and_sizing(cyberpunk, "hackathon")
        assert result["spacing"]["4"] == "1.2rem"
        assert result["spacing"]["2.5"] == "0.8rem"
        assert result["borderRadius"]["base"] == "1.2px"
        assert result["borderRadius"]["md"] == "1.9px"
        assert result["shadows"]["sm"] == "0 1px 2px 0 rgba(0, 0, 0, 0.3179756508674473)"
