"""Identicon rendering.

This module provides `generate_identicon`, which draws the 19-dot icon for
a seed into a Pillow RGBA image, and `identicon_png` for the encoded bytes.
"""
import io
import logging

from PIL import Image, ImageDraw

from .colors import BACKGROUND
from .generator import derive_identicon_colors
from .layout import LAYOUT_SIZE, circle_positions, dot_radius
from .settings import get_settings

logger = logging.getLogger(__name__)


def generate_identicon(seed, size: int | None = None) -> Image.Image:
    """Render the identicon for `seed` as a square RGBA image.

    The icon is always drawn at one canonical base size (the layout size
    times the configured supersample factor) and then resampled to `size`.
    That keeps the pattern identical at every size: a small sidebar avatar
    is the same picture as a large profile one, just scaled.

    Args:
        seed: Seed string or bytes (e.g. public key bytes)
        size: Final output size (square) in pixels, defaults to settings.render_size

    Returns:
        A PIL RGBA Image with a transparent background outside the outer circle.
    """
    settings = get_settings()
    if size is None:
        size = settings.render_size
    if size < 1:
        raise ValueError(f"Identicon size must be positive, got {size}.")

    icon = derive_identicon_colors(seed)

    base_size = LAYOUT_SIZE * max(1, settings.supersample)
    base_img = Image.new("RGBA", (base_size, base_size), BACKGROUND.rgba)
    draw = ImageDraw.Draw(base_img)

    # Outer circle
    draw.ellipse((0, 0, base_size - 1, base_size - 1), fill=icon.foreground.rgba)

    radius = dot_radius(base_size)
    for (x, y), color in zip(circle_positions(base_size), icon.colors):
        draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color.rgba)

    if base_size != size:
        logger.debug("resampling identicon %dpx -> %dpx", base_size, size)
        base_img = base_img.resize((size, size), Image.Resampling.LANCZOS)

    return base_img


def identicon_png(seed, size: int | None = None) -> bytes:
    buf = io.BytesIO()
    generate_identicon(seed, size).save(buf, format="PNG")
    return buf.getvalue()
