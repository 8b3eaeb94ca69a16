"""The seven fixed coloring schemes and the weighted pick between them."""
from dataclasses import dataclass

from .colors import PALETTE_SIZE

DOT_COUNT = 19


class SchemeSelectionError(RuntimeError):
    """Selection ran past the end of the scheme table."""


@dataclass(frozen=True)
class SchemeElement:
    name: str
    freq: int
    colors: tuple

    def __post_init__(self):
        if self.freq < 1:
            raise ValueError(f"Scheme '{self.name}' needs a positive frequency.")
        if len(self.colors) != DOT_COUNT:
            raise ValueError(f"Scheme '{self.name}' must list {DOT_COUNT} palette indices.")
        if any(not 0 <= c < PALETTE_SIZE for c in self.colors):
            raise ValueError(f"Scheme '{self.name}' references a palette index out of range.")


# Declaration order is the selection order
SCHEME_TABLE = (
    SchemeElement("target", 1, (0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 1)),
    SchemeElement("cube", 20, (0, 1, 3, 2, 4, 3, 0, 1, 3, 2, 4, 3, 0, 1, 3, 2, 4, 3, 5)),
    SchemeElement("quazar", 16, (1, 2, 3, 1, 2, 4, 5, 5, 4, 1, 2, 3, 1, 2, 4, 5, 5, 4, 0)),
    SchemeElement("flower", 32, (0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 3)),
    SchemeElement("cyclic", 32, (0, 1, 2, 3, 4, 5, 0, 1, 2, 3, 4, 5, 0, 1, 2, 3, 4, 5, 6)),
    SchemeElement("vmirror", 128, (0, 1, 2, 3, 4, 5, 3, 4, 2, 0, 1, 6, 7, 8, 9, 7, 8, 6, 10)),
    SchemeElement("hmirror", 128, (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 8, 6, 7, 5, 3, 4, 2, 11)),
)


def total_frequency(table=SCHEME_TABLE) -> int:
    return sum(scheme.freq for scheme in table)


def scheme_value(id_bytes: bytes, table=SCHEME_TABLE) -> int:
    """Little-endian 16-bit value of id bytes 30-31, reduced by the total frequency."""
    return (id_bytes[30] + id_bytes[31] * 256) % total_frequency(table)


def scheme_for_value(d: int, table=SCHEME_TABLE) -> SchemeElement:
    cumulative = 0
    for scheme in table:
        cumulative += scheme.freq
        if d < cumulative:
            return scheme
    raise SchemeSelectionError(f"Value {d} is outside the scheme table (total {cumulative}).")


def select_scheme(id_bytes: bytes, table=SCHEME_TABLE) -> SchemeElement:
    return scheme_for_value(scheme_value(id_bytes, table), table)
