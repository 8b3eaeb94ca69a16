import math

LAYOUT_SIZE = 64
DOT_RADIUS = 5


def circle_positions(size: float = LAYOUT_SIZE) -> list:
    """Centres of the 19 dots in colour order, for an icon `size` units wide.

    Eighteen dots sit on a hex grid around the centre, the last one is the
    centre itself.
    """
    c = size / 2
    r = c / 4 * 3
    r_root3_2 = r * math.sqrt(3) / 2
    r_root3_4 = r * math.sqrt(3) / 4
    r_2 = r / 2
    r_4 = r / 4
    r3_4 = r * 3 / 4
    return [
        (c, c - r),
        (c, c - r_2),
        (c - r_root3_4, c - r3_4),
        (c - r_root3_2, c - r_2),
        (c - r_root3_4, c - r_4),
        (c - r_root3_2, c),
        (c - r_root3_2, c + r_2),
        (c - r_root3_4, c + r_4),
        (c - r_root3_4, c + r3_4),
        (c, c + r),
        (c, c + r_2),
        (c + r_root3_4, c + r3_4),
        (c + r_root3_2, c + r_2),
        (c + r_root3_4, c + r_4),
        (c + r_root3_2, c),
        (c + r_root3_2, c - r_2),
        (c + r_root3_4, c - r_4),
        (c + r_root3_4, c - r3_4),
        (c, c),
    ]


def dot_radius(size: float = LAYOUT_SIZE) -> float:
    return DOT_RADIUS * size / LAYOUT_SIZE
