"""
preview.py — Self-contained HTML preview of a generated design system.

Shows every color scale as swatches, the type scale, the first spacing
steps and a handful of component demos styled from the tokens themselves.
"""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Union

from .contrast import pick_best_contrast_text
from .design_system import DesignSystem
from .formatting import format_number

SPACING_PREVIEW_STEPS = 15
SWATCH_GROUPS = ["primary", "secondary", "accent", "neutral", "error", "success", "warning", "info"]


def _swatches(ds: DesignSystem) -> str:
    blocks = []
    for group in SWATCH_GROUPS:
        scale = ds.colors.get(group)
        if not scale:
            continue
        cells = "\n".join(
            f'    <div class="swatch" style="background:{hex_val};'
            f'color:{pick_best_contrast_text(hex_val, "#ffffff", "#111111")}">'
            f"{escape(stop)}<br>{escape(hex_val)}</div>"
            for stop, hex_val in scale.items()
        )
        blocks.append(
            f'<div class="color-group">\n'
            f'  <div class="color-group-label">{escape(group)}</div>\n'
            f'  <div class="swatches">\n{cells}\n  </div>\n'
            f"</div>"
        )
    return "\n".join(blocks)


def _type_samples(ds: DesignSystem) -> str:
    sizes = ds.typography.get("fontSize") or {}
    if not sizes:
        return "<p>No typography tokens generated.</p>"
    return "\n".join(
        f'<div class="type-sample">\n'
        f'  <span class="type-label">{escape(label)} ({format_number(size)}px)</span>\n'
        f'  <span style="font-size:{format_number(size)}px">The quick brown fox</span>\n'
        f"</div>"
        for label, size in sizes.items()
    )


def _spacing_bars(ds: DesignSystem) -> str:
    bars = []
    for step, value in list(ds.spacing["spacing"].items())[:SPACING_PREVIEW_STEPS]:
        try:
            rem = float(value.rstrip("rempx") or 0)
        except ValueError:
            rem = 0.0
        width_px = rem if value.endswith("px") else rem * 16
        bars.append(
            f'<div class="spacing-bar">\n'
            f'  <span class="spacing-label">{escape(step)}: {escape(value)}</span>\n'
            f'  <div class="spacing-visual" style="width:{format_number(min(width_px, 600.0))}px"></div>\n'
            f"</div>"
        )
    return "\n".join(bars)


def _button_text(buttons: dict, variant: str, background: str, neutral: dict) -> str:
    """Button label color from the component tokens, or computed the same way without them."""
    text = buttons.get(variant, {}).get("text")
    return text or pick_best_contrast_text(background, neutral["50"], neutral["950"])


def render_preview(ds: DesignSystem) -> str:
    """Return the preview page as an HTML string."""
    c = ds.colors
    n = c["neutral"]
    p = c["primary"]
    fonts = ds.typography["fonts"]
    radius = ds.spacing["borderRadius"]
    shadows = ds.spacing["shadows"]
    buttons = (ds.components or {}).get("button", {})
    primary_text = _button_text(buttons, "primary", p["500"], n)
    secondary_text = _button_text(buttons, "secondary", c["secondary"]["500"], n)
    title = escape(ds.theme_record.name)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title} - Preview</title>
<style>
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{
    font-family: {fonts['primary']};
    background: {n['50']};
    color: {n['900']};
    padding: 2rem;
    line-height: 1.6;
  }}
  h1, h2, h3 {{ font-family: {fonts['heading']}; }}
  h1 {{ font-size: 2rem; margin-bottom: 0.5rem; }}
  h2 {{ font-size: 1.5rem; margin: 2rem 0 1rem; border-bottom: 2px solid {p['500']}; padding-bottom: 0.5rem; }}
  h3 {{ font-size: 1.1rem; margin: 1rem 0 0.5rem; }}
  .meta {{ color: {n['600']}; margin-bottom: 2rem; }}
  .section {{ margin-bottom: 2rem; }}
  .color-group {{ margin-bottom: 1.5rem; }}
  .color-group-label {{ font-weight: 600; margin-bottom: 0.5rem; text-transform: capitalize; }}
  .swatches {{ display: flex; flex-wrap: wrap; gap: 4px; }}
  .swatch {{ width: 72px; height: 72px; border-radius: 8px; display: flex; align-items: flex-end; justify-content: center; font-size: 0.6rem; padding: 4px; text-align: center; border: 1px solid rgba(0,0,0,0.1); }}
  .type-sample {{ margin-bottom: 0.75rem; display: flex; align-items: baseline; gap: 1rem; }}
  .type-label {{ min-width: 110px; font-size: 0.75rem; color: {n['600']}; }}
  .spacing-bar {{ display: flex; align-items: center; gap: 0.75rem; margin-bottom: 0.25rem; }}
  .spacing-label {{ min-width: 110px; font-size: 0.75rem; color: {n['600']}; text-align: right; }}
  .spacing-visual {{ height: 16px; background: {p['400']}; border-radius: 4px; }}
  .component-row {{ display: flex; flex-wrap: wrap; gap: 1rem; margin-bottom: 1rem; align-items: center; }}
  .btn {{ padding: 10px 24px; border-radius: {radius['md']}; font-weight: 600; font-size: 0.95rem; border: 2px solid transparent; cursor: pointer; }}
  .btn-primary {{ background: {p['500']}; color: {primary_text}; box-shadow: {shadows['sm']}; }}
  .btn-secondary {{ background: {c['secondary']['500']}; color: {secondary_text}; }}
  .btn-outline {{ background: transparent; border-color: {p['500']}; color: {p['600']}; }}
  .btn-ghost {{ background: transparent; color: {n['700']}; }}
  .input-demo {{ padding: 10px 14px; border: 1px solid {n['300']}; border-radius: {radius['md']}; font-size: 0.95rem; width: 260px; }}
  .input-demo:focus {{ outline: none; border: 2px solid {p['500']}; }}
  .card-demo {{ background: {n['50']}; border: 1px solid {n['200']}; border-radius: {radius['lg']}; padding: 1.5rem; box-shadow: {shadows['md']}; max-width: 300px; }}
  .badge {{ display: inline-block; padding: 2px 10px; border-radius: 9999px; font-size: 0.8rem; font-weight: 600; background: {p['100']}; color: {p['800']}; }}
  .alert-demo {{ padding: 12px 16px; border-radius: {radius['md']}; font-size: 0.9rem; margin-bottom: 0.5rem; max-width: 500px; }}
  .alert-info {{ background: {c['info']['50']}; border: 1px solid {c['info']['200']}; color: {c['info']['900']}; }}
  .alert-success {{ background: {c['success']['50']}; border: 1px solid {c['success']['200']}; color: {c['success']['900']}; }}
  .alert-warning {{ background: {c['warning']['50']}; border: 1px solid {c['warning']['200']}; color: {c['warning']['900']}; }}
  .alert-error {{ background: {c['error']['50']}; border: 1px solid {c['error']['200']}; color: {c['error']['900']}; }}
  .tooltip-wrap {{ position: relative; display: inline-block; margin-top: 2.5rem; }}
  .tooltip-demo {{ position: absolute; bottom: 110%; left: 50%; transform: translateX(-50%); background: {n['900']}; color: {n['50']}; padding: 4px 10px; border-radius: {radius['md']}; font-size: 0.78rem; white-space: nowrap; pointer-events: none; box-shadow: {shadows['lg']}; }}
  .tooltip-demo::after {{ content: ''; position: absolute; top: 100%; left: 50%; transform: translateX(-50%); border: 5px solid transparent; border-top-color: {n['900']}; }}
  .modal-demo {{ background: {n['50']}; border-radius: {radius['xl']}; padding: 1.5rem; box-shadow: {shadows['2xl']}; max-width: 340px; border: 1px solid {n['200']}; }}
  .modal-demo-header {{ font-weight: 700; font-size: 1.1rem; color: {n['900']}; border-bottom: 1px solid {n['200']}; padding-bottom: 0.75rem; margin-bottom: 0.75rem; }}
  .modal-demo-body {{ font-size: 0.9rem; color: {n['700']}; margin-bottom: 0.75rem; }}
  .modal-demo-footer {{ border-top: 1px solid {n['200']}; padding-top: 0.75rem; display: flex; gap: 0.5rem; justify-content: flex-end; }}
  .table-demo {{ border-collapse: collapse; width: 100%; max-width: 500px; border: 1px solid {n['200']}; }}
  .table-demo th {{ background: {n['100']}; color: {n['700']}; font-size: 0.8rem; text-transform: uppercase; letter-spacing: 0.05em; padding: 10px 14px; text-align: left; }}
  .table-demo td {{ padding: 10px 14px; font-size: 0.9rem; border-bottom: 1px solid {n['100']}; }}
  .table-demo tr:hover td {{ background: {p['50']}; }}
</style>
</head>
<body>
<h1>{title} Preview</h1>
<p class="meta">Theme: {escape(str(ds.theme))} | Seed: {escape(str(ds.seed))} | Generated: {escape(ds.meta.get('generated', ''))}</p>

<h2>Colors</h2>
<div class="section">
{_swatches(ds)}
</div>

<h2>Typography</h2>
<div class="section">
{_type_samples(ds)}
</div>

<h2>Spacing Scale</h2>
<div class="section">
{_spacing_bars(ds)}
</div>

<h2>Components</h2>
<div class="section">
<h3>Buttons</h3>
<div class="component-row">
  <button class="btn btn-primary">Primary</button>
  <button class="btn btn-secondary">Secondary</button>
  <button class="btn btn-outline">Outline</button>
  <button class="btn btn-ghost">Ghost</button>
</div>

<h3>Input</h3>
<div class="component-row">
  <input class="input-demo" type="text" placeholder="Type something..." />
</div>

<h3>Card</h3>
<div class="component-row">
  <div class="card-demo">
    <h4>Card Title</h4>
    <p>A sample card component using the generated design tokens.</p>
    <br/>
    <span class="badge">Badge</span>
  </div>
</div>

<h3>Alerts</h3>
<div class="alert-demo alert-info">This is an informational alert message.</div>
<div class="alert-demo alert-success">Operation completed successfully.</div>
<div class="alert-demo alert-warning">Please review before proceeding.</div>
<div class="alert-demo alert-error">Something went wrong. Please try again.</div>

<h3>Tooltip</h3>
<div class="component-row">
  <div class="tooltip-wrap">
    <button class="btn btn-primary">Hover me</button>
    <div class="tooltip-demo">Tooltip text</div>
  </div>
</div>

<h3>Modal</h3>
<div class="component-row">
  <div class="modal-demo">
    <div class="modal-demo-header">Confirm Action</div>
    <div class="modal-demo-body">Are you sure you want to proceed? This action cannot be undone.</div>
    <div class="modal-demo-footer">
      <button class="btn btn-ghost" style="padding:6px 16px;font-size:0.85rem">Cancel</button>
      <button class="btn btn-primary" style="padding:6px 16px;font-size:0.85rem">Confirm</button>
    </div>
  </div>
</div>

<h3>Table</h3>
<table class="table-demo">
  <thead><tr><th>Name</th><th>Role</th><th>Status</th></tr></thead>
  <tbody>
    <tr><td>Alice</td><td>Engineer</td><td><span class="badge">Active</span></td></tr>
    <tr><td>Bob</td><td>Designer</td><td><span class="badge">Active</span></td></tr>
    <tr><td>Charlie</td><td>Manager</td><td><span class="badge" style="background:{c['warning']['100']};color:{c['warning']['800']}">Away</span></td></tr>
  </tbody>
</table>
</div>
</body>
</html>
"""


def write_preview(ds: DesignSystem, output_path: Union[str, Path]) -> Path:
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_preview(ds), encoding="utf-8")
    return out
