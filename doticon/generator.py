"""Seed -> 19 dot colours.

`derive_identicon_colors` is the whole pipeline: hash the seed and the zero
buffer, subtract the digests into the id vector, build the saturation and
palette, pick a scheme and read the 19 colours out of the palette with the
scheme's rotation applied.
"""
import logging
from dataclasses import dataclass

from .colors import FOREGROUND, Color, build_palette, compute_saturation
from .crypto import id_vector, public_key_seed
from .schemes import DOT_COUNT, SCHEME_TABLE, SchemeElement, select_scheme

logger = logging.getLogger(__name__)

# Dots 0..17 form the rotating ring, dot 18 is the centre
RING_SIZE = DOT_COUNT - 1
CENTER = DOT_COUNT - 1


@dataclass(frozen=True)
class IdenticonColors:
    foreground: Color
    colors: tuple


@dataclass(frozen=True)
class IdenticonDerivation:
    """Every intermediate of one derivation, mainly for debugging."""
    id_bytes: bytes
    saturation: float
    palette: tuple
    scheme: SchemeElement
    rotation: int
    result: IdenticonColors


def rotation(id_bytes: bytes) -> int:
    """Ring offset from id byte 28: one of 0, 3, 6, 9, 12, 15."""
    return (id_bytes[28] % 6) * 3


def pick_colors(id_bytes: bytes, scheme: SchemeElement, palette) -> tuple:
    rot = rotation(id_bytes)
    colors = []
    for i in range(DOT_COUNT):
        num_color = (i + rot) % RING_SIZE if i < RING_SIZE else CENTER
        colors.append(palette[scheme.colors[num_color]])
    return tuple(colors)


def explain(seed, table=SCHEME_TABLE) -> IdenticonDerivation:
    id_bytes = id_vector(seed)
    saturation = compute_saturation(id_bytes)
    palette = build_palette(id_bytes, saturation)
    scheme = select_scheme(id_bytes, table)
    rot = rotation(id_bytes)
    logger.debug("identicon scheme=%s rotation=%d saturation=%.2f", scheme.name, rot, saturation)
    result = IdenticonColors(FOREGROUND, pick_colors(id_bytes, scheme, palette))
    return IdenticonDerivation(id_bytes, saturation, palette, scheme, rot, result)


def derive_identicon_colors(seed) -> IdenticonColors:
    """Foreground plus the 19 dot colours for `seed` (str or bytes-like)."""
    return explain(seed).result


def derive_key_colors(key) -> IdenticonColors:
    """Colours for a public key (PyNaCl key object, raw bytes or hex)."""
    return derive_identicon_colors(public_key_seed(key))
