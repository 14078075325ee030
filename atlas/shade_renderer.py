"""
shade_renderer.py — Render a color set as a shade-scale swatch sheet (PNG).

Layout:
  - One row per color group (primary, secondary, ..., neutral)
  - 11 columns (50 → 950) + a name column on the left
  - Stop labels in a header row, hex value at the bottom of each swatch
  - Base stop (500) outlined

Usage:
    from atlas.shade_renderer import render_shade_sheet
    render_shade_sheet(ds.colors, "design-system/shades.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from PIL import Image, ImageDraw, ImageFont

from .color_space import hex_to_rgb, is_dark
from .palette import SHADE_STOPS

# ── Fonts ─────────────────────────────────────────────────────────────────────

_FONT_CANDIDATES = [
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
]

_FONT_BOLD_CANDIDATES = [
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
]


def _load_font(size: int, bold: bool = False):
    for path in _FONT_BOLD_CANDIDATES if bold else _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return right - left


# ── Renderer ──────────────────────────────────────────────────────────────────

def render_shade_image(
    colors: Dict[str, Dict[str, str]],
    width: int = 2400,
    row_height: int = 120,
    header_height: int = 56,
) -> Image.Image:
    """
    Render every color scale as one row of 11 swatches.

    Args:
        colors:        ColorSet, {group: {"50": "#hex", ...}}
        width:         Total image width
        row_height:    Height of each shade row
        header_height: Height of the stop-label header row

    Returns:
        PIL Image (RGB)
    """
    n_rows = len(colors)
    n_stops = len(SHADE_STOPS)
    name_col = 160
    gap = 2
    background = (12, 12, 16)
    total_h = header_height + n_rows * (row_height + gap)

    img = Image.new("RGB", (width, total_h), background)
    draw = ImageDraw.Draw(img)

    swatch_w = (width - name_col - (n_stops - 1) * gap) // n_stops
    remainder = width - name_col - (n_stops - 1) * gap - swatch_w * n_stops

    font_hdr = _load_font(18, bold=True)
    font_stop = _load_font(15)
    font_hex = _load_font(13)
    font_name = _load_font(15, bold=True)

    # header: stop labels
    draw.text((8, 16), "SHADE SCALE", fill=(70, 70, 85), font=font_hdr)
    for si, stop in enumerate(SHADE_STOPS):
        sw = swatch_w + (remainder if si == n_stops - 1 else 0)
        sx = name_col + si * (swatch_w + gap)
        label = str(stop)
        draw.text(
            (sx + (sw - _text_width(draw, label, font_stop)) // 2, (header_height - 20) // 2),
            label,
            fill=(80, 80, 95),
            font=font_stop,
        )

    for row_i, (group, scale) in enumerate(colors.items()):
        row_y = header_height + row_i * (row_height + gap)

        draw.rectangle([0, row_y, name_col - 1, row_y + row_height - 1], fill=(20, 20, 26))
        draw.text((10, row_y + row_height // 2 - 10), group.upper(), fill=(200, 200, 210), font=font_name)

        for si, stop in enumerate(SHADE_STOPS):
            hex_val = scale[str(stop)]
            sw = swatch_w + (remainder if si == n_stops - 1 else 0)
            sx = name_col + si * (swatch_w + gap)
            dark = is_dark(hex_val)

            draw.rectangle([sx, row_y, sx + sw - 1, row_y + row_height - 1], fill=hex_to_rgb(hex_val))

            if stop == 500:
                draw.rectangle(
                    [sx + 2, row_y + 2, sx + sw - 3, row_y + row_height - 3],
                    outline=(255, 255, 255) if dark else (0, 0, 0),
                    width=2,
                )

            label = hex_val.upper()
            draw.text(
                (sx + (sw - _text_width(draw, label, font_hex)) // 2, row_y + row_height - 22),
                label,
                fill=(255, 255, 255) if dark else (20, 20, 20),
                font=font_hex,
            )

    return img


def render_shade_sheet(
    colors: Dict[str, Dict[str, str]],
    output_path: Union[str, Path],
    width: int = 2400,
) -> Path:
    """Render the swatch sheet and save it as PNG. Returns the saved path."""
    img = render_shade_image(colors, width=width)
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(out), "PNG")
    return out
