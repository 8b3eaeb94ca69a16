"""Colours of the dot identicon.

Holds the RGBA `Color` type, the fixed foreground/background colours and
the two id-vector driven steps: the saturation and the 64-entry palette.
"""
from dataclasses import dataclass

PALETTE_SIZE = 64

# Lightness per quarter of the byte range, indexed by b // 64
LIGHTNESS = (0.53, 0.15, 0.35, 0.75)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _pack_channel(value: float) -> int:
    # round half up, then saturate into a byte (saturation > 1.0 overshoots)
    return min(255, max(0, int(value * 255 + 0.5)))


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: int = 255

    @property
    def rgba(self) -> tuple:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        """Standard HSL -> RGB with hue in degrees, alpha fixed at 255."""
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        h = hue / 360
        return cls(
            _pack_channel(_hue_to_channel(p, q, h + 1 / 3)),
            _pack_channel(_hue_to_channel(p, q, h)),
            _pack_channel(_hue_to_channel(p, q, h - 1 / 3)),
            255,
        )

    @classmethod
    def derive(cls, b: int, saturation: float) -> "Color":
        """Palette colour for byte `b`.

        The low six bits pick one of 64 hue steps, the top two bits one of
        the four lightness bands.
        """
        hue = (b % 64) * 360 // 64
        return cls.from_hsl(hue, saturation, LIGHTNESS[b // 64])


FOREGROUND = Color(238, 238, 238, 255)
BACKGROUND = Color(255, 255, 255, 0)
SENTINEL = Color(4, 4, 4, 255)


# -------------------------
# --- Id vector steps -----
# -------------------------
def compute_saturation(id_bytes: bytes) -> float:
    """Saturation fraction from id byte 29, in [0.30, 1.09] and not clamped."""
    sat = ((id_bytes[29] * 70 // 256 + 26) % 80) + 30
    return sat / 100


def build_palette(id_bytes: bytes, saturation: float) -> tuple:
    palette = []
    for i in range(PALETTE_SIZE):
        b = (id_bytes[i] + (i % 28) * 58 % 256) % 256
        if b in (0, 255):
            palette.append(SENTINEL)
        else:
            palette.append(Color.derive(b, saturation))
    return tuple(palette)
