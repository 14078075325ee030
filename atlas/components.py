"""
components.py — Semantic tokens for common UI components.

Component tokens are pure lookups into the generated color, typography and
spacing scales. Theme archetypes (neo-brutalist borders, glass blur, ...) are
applied afterwards as field-by-field overrides.
"""

from __future__ import annotations

from typing import Dict

from .contrast import pick_best_contrast_text
from .themes import Archetype, Theme

ComponentTokens = Dict[str, Dict[str, Dict[str, object]]]

# badges keep their pill shape under a forced radius
_RADIUS_EXEMPT = {"badge"}


def _button(colors: dict, typography: dict, spacing: dict, group: str, light: str, dark: str) -> dict:
    return {
        "bg": colors[group]["500"],
        "bgHover": colors[group]["600"],
        "bgActive": colors[group]["700"],
        "text": pick_best_contrast_text(colors[group]["500"], light, dark),
        "borderRadius": spacing["borderRadius"]["md"],
        "padding": f"{spacing['spacing']['2.5']} {spacing['spacing']['6']}",
        "fontSize": typography["fontSize"]["base"],
        "fontWeight": typography["fontWeight"]["semibold"],
        "shadow": spacing["shadows"]["sm"],
    }


def _badge(colors: dict, typography: dict, spacing: dict, group: str) -> dict:
    return {
        "bg": colors[group]["100"],
        "text": colors[group]["800"],
        "borderRadius": spacing["borderRadius"]["full"],
        "padding": f"{spacing['spacing']['1']} {spacing['spacing']['3']}",
        "fontSize": typography["fontSize"]["sm"],
        "fontWeight": typography["fontWeight"]["semibold"],
    }


def _alert(colors: dict, spacing: dict, group: str) -> dict:
    return {
        "bg": colors[group]["50"],
        "border": f"1px solid {colors[group]['200']}",
        "text": colors[group]["900"],
        "borderRadius": spacing["borderRadius"]["md"],
        "padding": spacing["spacing"]["4"],
    }


def generate_component_tokens(colors: dict, typography: dict, spacing: dict, theme: Theme) -> ComponentTokens:
    """Compose component tokens, then merge the theme's archetype overrides."""
    neutral = colors["neutral"]
    primary = colors["primary"]
    light_text = neutral["50"]
    dark_text = neutral["950"]
    space = spacing["spacing"]
    radius = spacing["borderRadius"]
    shadows = spacing["shadows"]
    sizes = typography["fontSize"]
    weights = typography["fontWeight"]
    z_index = spacing["zIndex"]

    tokens: ComponentTokens = {
        "button": {
            "primary": _button(colors, typography, spacing, "primary", light_text, dark_text),
            "secondary": _button(colors, typography, spacing, "secondary", light_text, dark_text),
            "outline": {
                "bg": "transparent",
                "bgHover": primary["50"],
                "bgActive": primary["100"],
                "text": primary["600"],
                "border": f"2px solid {primary['500']}",
                "borderRadius": radius["md"],
                "padding": f"{space['2.5']} {space['6']}",
                "fontSize": sizes["base"],
                "fontWeight": weights["semibold"],
            },
            "ghost": {
                "bg": "transparent",
                "bgHover": neutral["100"],
                "bgActive": neutral["200"],
                "text": neutral["700"],
                "borderRadius": radius["md"],
                "padding": f"{space['2.5']} {space['6']}",
                "fontSize": sizes["base"],
                "fontWeight": weights["medium"],
            },
        },
        "input": {
            "base": {
                "bg": neutral["50"],
                "bgFocus": neutral["50"],
                "text": neutral["900"],
                "border": f"1px solid {neutral['300']}",
                "borderFocus": f"2px solid {primary['500']}",
                "borderRadius": radius["md"],
                "padding": f"{space['2.5']} {space['4']}",
                "fontSize": sizes["base"],
                "placeholder": neutral["400"],
                "shadow": shadows["sm"],
                "shadowFocus": f"0 0 0 3px {primary['100']}",
            },
            "error": {
                "border": f"2px solid {colors['error']['500']}",
                "shadowFocus": f"0 0 0 3px {colors['error']['100']}",
            },
        },
        "card": {
            "base": {
                "bg": neutral["50"],
                "border": f"1px solid {neutral['200']}",
                "borderRadius": radius["lg"],
                "padding": space["6"],
                "shadow": shadows["md"],
            },
            "elevated": {
                "bg": neutral["50"],
                "borderRadius": radius["lg"],
                "padding": space["6"],
                "shadow": shadows["xl"],
            },
            "outlined": {
                "bg": "transparent",
                "border": f"2px solid {neutral['300']}",
                "borderRadius": radius["lg"],
                "padding": space["6"],
            },
        },
        "badge": {
            group: _badge(colors, typography, spacing, group)
            for group in ("primary", "success", "warning", "error")
        },
        "alert": {
            group: _alert(colors, spacing, group)
            for group in ("info", "success", "warning", "error")
        },
        "navigation": {
            "nav": {
                "bg": neutral["900"],
                "text": neutral["100"],
                "textHover": primary["300"],
                "borderBottom": f"1px solid {neutral['800']}",
                "padding": f"{space['4']} {space['6']}",
                "shadow": shadows["md"],
            },
            "link": {
                "text": primary["600"],
                "textHover": primary["700"],
                "textActive": primary["800"],
                "textVisited": primary["900"],
                "fontSize": sizes["base"],
                "fontWeight": weights["medium"],
            },
        },
        "modal": {
            "overlay": {
                "bg": "rgba(0, 0, 0, 0.5)",
                "zIndex": z_index["50"],
            },
            "container": {
                "bg": neutral["50"],
                "borderRadius": radius["xl"],
                "padding": space["8"],
                "shadow": shadows["2xl"],
                "maxWidth": "32rem",
                "width": "100%",
                "zIndex": z_index["50"],
            },
            "header": {
                "fontSize": sizes["xl"],
                "fontWeight": weights["bold"],
                "text": neutral["900"],
                "borderBottom": f"1px solid {neutral['200']}",
                "paddingBottom": space["4"],
                "marginBottom": space["4"],
            },
            "body": {
                "fontSize": sizes["base"],
                "text": neutral["700"],
            },
            "footer": {
                "borderTop": f"1px solid {neutral['200']}",
                "paddingTop": space["4"],
                "marginTop": space["4"],
                "gap": space["3"],
            },
        },
        "tooltip": {
            "base": {
                "bg": neutral["900"],
                "text": neutral["50"],
                "borderRadius": radius["md"],
                "padding": f"{space['1.5']} {space['3']}",
                "fontSize": sizes["sm"],
                "fontWeight": weights["medium"],
                "shadow": shadows["lg"],
                "zIndex": z_index["40"],
                "maxWidth": "16rem",
            },
            "arrow": {
                "bg": neutral["900"],
                "size": "6px",
            },
            "light": {
                "bg": neutral["50"],
                "text": neutral["900"],
                "border": f"1px solid {neutral['200']}",
                "borderRadius": radius["md"],
                "padding": f"{space['2']} {space['4']}",
                "fontSize": sizes["sm"],
                "shadow": shadows["md"],
            },
        },
        "table": {
            "container": {
                "borderRadius": radius["lg"],
                "border": f"1px solid {neutral['200']}",
                "overflow": "hidden",
            },
            "header": {
                "bg": neutral["100"],
                "text": neutral["700"],
                "fontSize": sizes["sm"],
                "fontWeight": weights["semibold"],
                "padding": f"{space['3']} {space['4']}",
                "borderBottom": f"2px solid {neutral['200']}",
                "textTransform": "uppercase",
                "letterSpacing": "0.05em",
            },
            "cell": {
                "padding": f"{space['3']} {space['4']}",
                "fontSize": sizes["base"],
                "text": neutral["900"],
                "borderBottom": f"1px solid {neutral['100']}",
            },
            "rowHover": {"bg": primary["50"]},
            "rowStriped": {"bg": neutral["50"]},
        },
    }

    if theme.archetype is not None:
        apply_archetype(tokens, theme.archetype, colors)
    return tokens


def apply_archetype(tokens: ComponentTokens, archetype: Archetype, colors: dict) -> ComponentTokens:
    """Merge archetype overrides into ``tokens`` in place and return it."""
    border_color = colors["neutral"]["950"]

    if archetype.show_borders:
        border = f"{archetype.border_width or '1px'} solid {border_color}"
        for component, variant in (
            ("button", "primary"),
            ("button", "secondary"),
            ("card", "base"),
            ("card", "elevated"),
            ("modal", "container"),
            ("table", "container"),
        ):
            tokens[component][variant]["border"] = border

    if archetype.blur:
        bg_opacity = archetype.opacity if archetype.opacity is not None else 1
        for component, variant in (("card", "base"), ("card", "elevated"), ("modal", "container")):
            tokens[component][variant]["backdropBlur"] = archetype.blur
            tokens[component][variant]["bgOpacity"] = bg_opacity

    if archetype.border_radius is not None:
        for component, variants in tokens.items():
            if component in _RADIUS_EXEMPT:
                continue
            for fields in variants.values():
                if "borderRadius" in fields:
                    fields["borderRadius"] = archetype.border_radius

    if archetype.shadow_type == "hard":
        hard = f"4px 4px 0 0 {border_color}"
        for variants in tokens.values():
            for fields in variants.values():
                if fields.get("shadow", "none") != "none":
                    fields["shadow"] = hard

    return tokens
