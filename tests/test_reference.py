import pytest

from sheetcalc.reference import coordinate, is_reference, resolve


@pytest.mark.parametrize("token, expected", [
    ("A12", (11, 0)),
    ("D5", (4, 3)),
    ("A1", (0, 0)),
    ("Z99", (98, 25)),
])
def test_resolve_single_letter(token, expected):
    assert resolve(token) == expected


def test_resolve_multi_letter_column():
    assert resolve("AA1") == (0, 26)
    assert resolve("AB3") == (2, 27)


def test_resolve_row_zero_is_negative():
    # bounds are the caller's job
    assert resolve("B0") == (-1, 1)


def test_resolve_rejects_non_reference():
    with pytest.raises(ValueError):
        resolve("12")


@pytest.mark.parametrize("token", ["A1", "D5", "Z99", "AB12"])
def test_is_reference(token):
    assert is_reference(token)


@pytest.mark.parametrize("token", ["a1", "A100", "A", "1", "$A$1", "A1B", "###a32432", ""])
def test_is_not_reference(token):
    assert not is_reference(token)


def test_coordinate_inverts_resolve():
    assert coordinate(4, 3) == "D5"
    assert coordinate(0, 26) == "AA1"
    assert resolve(coordinate(11, 0)) == (11, 0)


def test_columns_past_zzz():
    assert resolve("ZZZ1") == (0, 18277)
    assert resolve("AAAA1") == (0, 18278)
    assert resolve("ABCD1")[1] > 18277
    assert coordinate(0, 18278) == "AAAA1"


@pytest.mark.parametrize("token", ["A١", "٣", "B１"])
def test_non_ascii_digits_are_not_references(token):
    assert not is_reference(token)
    with pytest.raises(ValueError):
        resolve(token)
