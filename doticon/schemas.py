from typing import List

from pydantic import BaseModel

from .colors import Color
from .generator import IdenticonColors


class ColorModel(BaseModel):
    red: int
    green: int
    blue: int
    alpha: int
    hex: str

    @classmethod
    def from_color(cls, color: Color) -> "ColorModel":
        return cls(red=color.red, green=color.green, blue=color.blue, alpha=color.alpha, hex=color.hex)


class IdenticonResponse(BaseModel):
    seed: str
    scheme: str | None = None
    foreground: ColorModel
    colors: List[ColorModel]

    @classmethod
    def build(cls, seed: str, icon: IdenticonColors, scheme: str | None = None) -> "IdenticonResponse":
        return cls(
            seed=seed,
            scheme=scheme,
            foreground=ColorModel.from_color(icon.foreground),
            colors=[ColorModel.from_color(c) for c in icon.colors],
        )
