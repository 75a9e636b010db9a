import pytest

from utils.cells import cell_value, parse_int, is_valid_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ""),
        ({"v": None}, ""),
        ({"v": 4.0, "f": "4"}, "4"),
        ("  Cardiología  ", "Cardiología"),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
        (True, "true"),
    ],
)
def test_cell_value_normalizes(raw, expected):
    assert cell_value(raw) == expected


def test_cell_value_stringifies_other_types():
    class Custom:
        def __str__(self):
            return "  custom "

    assert cell_value(Custom()) == "custom"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", 3),
        ("3 campos", 3),
        (" 12", 12),
        ("4.7", 4),
        ("-2", -2),
        ("abc", 0),
        ("", 0),
    ],
)
def test_parse_int_degrades_to_zero(value, expected):
    assert parse_int(value) == expected


def test_valid_name_examples():
    assert is_valid_name("MES") is False
    assert is_valid_name("LUZ") is True
    assert is_valid_name("AB") is False
    assert is_valid_name("Juan Perez") is True


def test_valid_name_rejects_headers_and_months():
    assert is_valid_name("setiembre") is False
    assert is_valid_name(" Septiembre ") is False
    assert is_valid_name("N°") is False
    assert is_valid_name("Residente") is False
    assert is_valid_name("") is False


def test_valid_name_rejects_non_strings():
    assert is_valid_name(None) is False
    assert is_valid_name(12345) is False
