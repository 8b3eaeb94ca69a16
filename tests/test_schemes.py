import pytest

from doticon.schemes import (
    DOT_COUNT,
    SCHEME_TABLE,
    SchemeElement,
    SchemeSelectionError,
    scheme_for_value,
    scheme_value,
    select_scheme,
    total_frequency,
)

EXPECTED_RANGES = {
    "target": (0, 0),
    "cube": (1, 20),
    "quazar": (21, 36),
    "flower": (37, 68),
    "cyclic": (69, 100),
    "vmirror": (101, 228),
    "hmirror": (229, 356),
}


def _id_with_selector(low: int, high: int) -> bytes:
    data = bytearray(64)
    data[30] = low
    data[31] = high
    return bytes(data)


def test_table_shape():
    assert [s.name for s in SCHEME_TABLE] == list(EXPECTED_RANGES)
    assert all(len(s.colors) == DOT_COUNT for s in SCHEME_TABLE)
    assert total_frequency() == 357


def test_every_value_selects_exactly_one_contiguous_scheme():
    seen = {}
    for d in range(total_frequency()):
        scheme = scheme_for_value(d)
        seen.setdefault(scheme.name, []).append(d)
    for name, values in seen.items():
        low, high = EXPECTED_RANGES[name]
        assert values == list(range(low, high + 1))
    assert set(seen) == set(EXPECTED_RANGES)


def test_value_past_table_is_internal_error():
    with pytest.raises(SchemeSelectionError):
        scheme_for_value(total_frequency())
    assert issubclass(SchemeSelectionError, RuntimeError)


def test_scheme_value_is_little_endian_and_reduced():
    assert scheme_value(_id_with_selector(1, 0)) == 1
    assert scheme_value(_id_with_selector(0, 1)) == 256
    assert scheme_value(_id_with_selector(255, 255)) == 65535 % 357


def test_select_scheme_by_id_bytes():
    assert select_scheme(_id_with_selector(0, 0)).name == "target"
    assert select_scheme(_id_with_selector(20, 0)).name == "cube"
    assert select_scheme(_id_with_selector(101, 0)).name == "vmirror"
    # 357 wraps to 0
    assert select_scheme(_id_with_selector(357 - 256, 1)).name == "target"


def test_total_follows_table_edits():
    table = SCHEME_TABLE[:2]
    assert total_frequency(table) == 21
    assert select_scheme(_id_with_selector(21, 0), table).name == "target"


@pytest.mark.parametrize("freq, colors", [
    (0, tuple(range(19))),
    (1, tuple(range(18))),
    (1, tuple(range(18)) + (64,)),
])
def test_invalid_scheme_definitions(freq, colors):
    with pytest.raises(ValueError):
        SchemeElement("broken", freq, colors)
