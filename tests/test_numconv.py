import pytest

from minishell.numconv import (
    DIGITS,
    HEXALOW,
    OCTAL,
    atof,
    atoi,
    ftoa_rnd,
    itoa,
    ullitoa_base,
)


@pytest.mark.parametrize("value", [0, 1, -1, 42, -987, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_zero():
    assert itoa(0) == "0"


def test_atoi_skips_whitespace_and_stops_at_garbage():
    assert atoi("  \t-42xyz") == -42
    assert atoi("+17") == 17


def test_atoi_wraps_to_thirty_two_bits():
    assert atoi(str(2**31)) == atoi(str(-(2**31)))
    assert atoi(str(2**32 + 5)) == atoi("5")


@pytest.mark.parametrize("base", [DIGITS, HEXALOW, OCTAL, "01"])
@pytest.mark.parametrize("value", [0, 1, 7, 255, 123456789, 2**64 - 1])
def test_ullitoa_base_round_trip(base, value):
    assert int(ullitoa_base(value, base), len(base)) == value


def test_ullitoa_base_wraps_negative_values():
    assert ullitoa_base(-1, HEXALOW) == ullitoa_base(2**64 - 1, HEXALOW)


def test_ullitoa_base_rejects_short_base():
    with pytest.raises(ValueError):
        ullitoa_base(5, "x")


def test_ftoa_truncating_case():
    assert ftoa_rnd(3.14159, 2, 5) == "3.14"


def test_ftoa_rounding_carries_into_integer_part():
    assert ftoa_rnd(0.996, 2, 5) == "1.00"


@pytest.mark.parametrize("value", [0.5, 2.25, 123.456, 7.0, 0.125])
def test_ftoa_atof_round_trip(value):
    assert atof(ftoa_rnd(value, 6, 5)) == pytest.approx(value, abs=1e-6)


@pytest.mark.parametrize("dec_len", [1, 2, 3, 6])
def test_ftoa_has_requested_decimals(dec_len):
    text = ftoa_rnd(12.3456, dec_len, 5)
    assert len(text.split(".")[1]) == dec_len


def test_ftoa_without_decimals_has_no_point():
    assert "." not in ftoa_rnd(2.7, 0, 5)


def test_ftoa_ignores_sign():
    assert ftoa_rnd(-2.25, 3, 5) == ftoa_rnd(2.25, 3, 5)


def test_atof_parses_sign_and_fraction():
    assert atof("-3.5") == -3.5
    assert atof("12abc") == 12.0
    assert atof("+0.25") == pytest.approx(0.25)