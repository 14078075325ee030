"""
writers.py — Serialise a DesignSystem to token files.

Formats:
  css       tokens.css            :root custom properties
  scss      _tokens.scss          $variables
  json      tokens.json           full design system (Figma / dev handoff)
  js        tokens.js             CommonJS module
  tailwind  tailwind.config.js    theme.extend block
  png       shades.png            shade-scale swatch sheet
  html      preview.html          self-contained visual preview

README.md is written for every run.

Usage:
    from atlas.writers import write_output_files
    paths = write_output_files(ds, Path("design-system"), ["css", "json"])
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Tuple, Union

from .design_system import DesignSystem
from .errors import UnsupportedFormatError
from .formatting import format_number

logger = logging.getLogger(__name__)

Variables = List[Tuple[str, str]]


# ── Helpers ───────────────────────────────────────────────────────────────────

def _kebab(name: str) -> str:
    return re.sub(r"([A-Z])", r"-\1", name).lower().replace(".", "_")


def normalize_numbers(value):
    """Recursively turn integral floats into ints so ``20.0`` serialises as ``20``."""
    if isinstance(value, dict):
        return {k: normalize_numbers(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_numbers(v) for v in value]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _value(value) -> str:
    return format_number(value) if isinstance(value, (int, float)) else str(value)


def collect_variables(ds: DesignSystem, include_components: bool = True) -> Variables:
    """Flatten the token tree into (name, value) pairs, without a ``--``/``$`` prefix."""
    variables: Variables = []

    for group, scale in ds.colors.items():
        for stop, hex_val in scale.items():
            variables.append((f"color-{group}-{stop}", hex_val))
    for group, hex_val in ds.text_colors.items():
        variables.append((f"color-text-{group}", hex_val))

    typo = ds.typography
    for role, stack in typo["fonts"].items():
        variables.append((f"font-{role}", stack))
    for label, size in typo["fontSize"].items():
        variables.append((f"font-size-{label}", f"{format_number(size)}px"))
    for label, height in typo["lineHeight"].items():
        variables.append((f"line-height-{label}", _value(height)))
    for label, tracking in typo["letterSpacing"].items():
        variables.append((f"letter-spacing-{label}", tracking))
    for label, weight in typo["fontWeight"].items():
        variables.append((f"font-weight-{label}", _value(weight)))

    prefixes = {
        "spacing": "spacing",
        "borderRadius": "radius",
        "borderWidth": "border-width",
        "shadows": "shadow",
        "opacity": "opacity",
        "zIndex": "z",
    }
    for section, prefix in prefixes.items():
        for step, val in ds.spacing[section].items():
            variables.append((f"{prefix}-{_kebab(step)}", val))

    if include_components and ds.components:
        for component, variants in ds.components.items():
            for variant, fields in variants.items():
                for field_name, val in fields.items():
                    # font sizes are stored as px numbers, like the type scale
                    if field_name == "fontSize" and isinstance(val, (int, float)):
                        val = f"{format_number(val)}px"
                    variables.append((f"{component}-{_kebab(variant)}-{_kebab(field_name)}", _value(val)))

    return variables


# ── Renderers ─────────────────────────────────────────────────────────────────

def _header(ds: DesignSystem) -> str:
    return (
        f"Generated by {ds.meta.get('generator', 'Atlas')} {ds.meta.get('version', '')} "
        f"— theme: {ds.theme}, seed: {ds.seed}"
    )


def render_css(ds: DesignSystem, include_components: bool = True) -> str:
    lines = [f"/* {_header(ds)} */", ":root {"]
    for name, val in collect_variables(ds, include_components):
        lines.append(f"  --{name}: {val};")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)


def render_scss(ds: DesignSystem, include_components: bool = True) -> str:
    lines = [f"// {_header(ds)}", ""]
    for name, val in collect_variables(ds, include_components):
        lines.append(f"${name}: {val};")
    lines.append("")
    return "\n".join(lines)


def render_json(ds: DesignSystem, include_components: bool = True) -> str:
    data = ds.to_dict()
    if not include_components:
        data.pop("components", None)
    return json.dumps(normalize_numbers(data), indent=2, ensure_ascii=False) + "\n"


def render_js(ds: DesignSystem, include_components: bool = True) -> str:
    body = render_json(ds, include_components).rstrip("\n")
    return f"// {_header(ds)}\n\nmodule.exports = {body};\n"


def render_tailwind(ds: DesignSystem, include_components: bool = True) -> str:
    """Tailwind ``theme.extend`` config. Components have no Tailwind counterpart."""
    typo = ds.typography
    spacing = ds.spacing

    def rename(table: Dict[str, str], default_key: str) -> Dict[str, str]:
        return {("DEFAULT" if k == default_key else k): v for k, v in table.items()}

    extend = {
        "colors": ds.colors,
        "fontFamily": {role: [stack] for role, stack in typo["fonts"].items()},
        "fontSize": {k: f"{format_number(v)}px" for k, v in typo["fontSize"].items()},
        "lineHeight": {k: _value(v) for k, v in typo["lineHeight"].items()},
        "letterSpacing": typo["letterSpacing"],
        "fontWeight": {k: str(v) for k, v in typo["fontWeight"].items()},
        "spacing": spacing["spacing"],
        "borderRadius": rename(spacing["borderRadius"], "base"),
        "borderWidth": rename(spacing["borderWidth"], "default"),
        "boxShadow": rename(spacing["shadows"], "base"),
        "opacity": spacing["opacity"],
        "zIndex": spacing["zIndex"],
    }
    config = {
        "content": ["./src/**/*.{html,js,jsx,ts,tsx,vue,svelte}"],
        "theme": {"extend": extend},
        "plugins": [],
    }
    body = json.dumps(normalize_numbers(config), indent=2, ensure_ascii=False)
    return f"// {_header(ds)}\n\n/** @type {{import('tailwindcss').Config}} */\nmodule.exports = {body};\n"


def render_readme(ds: DesignSystem, files: Iterable[str]) -> str:
    """Markdown handbook for the generated tokens."""
    theme = ds.theme_record

    color_lines = ["| Group | 50 | 500 | 950 | Text |", "|-------|----|-----|-----|------|"]
    for group, scale in ds.colors.items():
        color_lines.append(
            f"| {group} | `{scale['50']}` | `{scale['500']}` | `{scale['950']}` "
            f"| `{ds.text_colors.get(group, '')}` |"
        )

    type_lines = ["| Token | Size |", "|-------|------|"]
    for label, size in ds.typography["fontSize"].items():
        type_lines.append(f"| `font-size-{label}` | {format_number(size)}px |")

    spacing_lines = ["| Token | Value |", "|-------|-------|"]
    for step, val in list(ds.spacing["spacing"].items())[:12]:
        spacing_lines.append(f"| `spacing-{_kebab(step)}` | {val} |")

    file_lines = "\n".join(f"- `{name}`" for name in files)

    return f"""# {theme.name} Design System

*{theme.description}*

- **Theme**: `{ds.theme}`
- **Seed**: `{ds.seed}`
- **Mood**: {theme.mood}
- **Generated**: {ds.meta.get('generated', '')}

Re-run with the same theme and seed to reproduce these tokens exactly.

---

## Files

{file_lines}

---

## Colors

{chr(10).join(color_lines)}

---

## Typography

- **Primary**: `{ds.typography['fonts']['primary']}`
- **Heading**: `{ds.typography['fonts']['heading']}`
- **Mono**: `{ds.typography['fonts']['mono']}`

{chr(10).join(type_lines)}

---

## Spacing

{chr(10).join(spacing_lines)}

---

## Usage

```css
@import "./tokens.css";

.button {{
  background: var(--color-primary-500);
  color: var(--button-primary-text);
  padding: var(--spacing-2_5) var(--spacing-6);
  border-radius: var(--radius-md);
}}
```

*Generated by {ds.meta.get('generator', 'Atlas')} v{ds.meta.get('version', '')}*
"""


# ── Format registry ───────────────────────────────────────────────────────────

def _write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def _write_png(ds: DesignSystem, path: Path, include_components: bool) -> Path:
    from .shade_renderer import render_shade_sheet
    return render_shade_sheet(ds.colors, path)


def _write_html(ds: DesignSystem, path: Path, include_components: bool) -> Path:
    from .preview import write_preview
    return write_preview(ds, path)


def _text_writer(render: Callable[[DesignSystem, bool], str]):
    def write(ds: DesignSystem, path: Path, include_components: bool) -> Path:
        return _write_text(path, render(ds, include_components))
    return write


FORMATS: Dict[str, Tuple[str, Callable[[DesignSystem, Path, bool], Path]]] = {
    "css": ("tokens.css", _text_writer(render_css)),
    "scss": ("_tokens.scss", _text_writer(render_scss)),
    "json": ("tokens.json", _text_writer(render_json)),
    "js": ("tokens.js", _text_writer(render_js)),
    "tailwind": ("tailwind.config.js", _text_writer(render_tailwind)),
    "png": ("shades.png", _write_png),
    "html": ("preview.html", _write_html),
}


def write_output_files(
    ds: DesignSystem,
    output_dir: Union[str, Path],
    formats: Iterable[str] = ("css", "json"),
    include_components: bool = True,
) -> List[Path]:
    """
    Write the requested formats plus README.md into ``output_dir``.

    Raises:
        UnsupportedFormatError: before anything is written, if a format is unknown.

    Returns:
        Paths of every written file, README last.
    """
    requested: List[str] = []
    for fmt in formats:
        key = fmt.strip().lower()
        if key not in FORMATS:
            raise UnsupportedFormatError(fmt, FORMATS.keys())
        if key not in requested:
            requested.append(key)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for key in requested:
        filename, writer = FORMATS[key]
        path = writer(ds, out / filename, include_components)
        logger.info(f"Wrote {key} → {path}")
        written.append(path)

    readme = _write_text(out / "README.md", render_readme(ds, [p.name for p in written]))
    logger.info(f"Wrote README → {readme}")
    written.append(readme)
    return written
