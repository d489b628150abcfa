import io

import pytest

from minishell.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_char():
    out = io.StringIO()
    putchar_fd("z", out)
    putchar_fd("!", out)
    assert out.getvalue() == "z!"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_writes_text():
    out = io.StringIO()
    putstr_fd("hello", out)
    assert out.getvalue() == "hello"


def test_putstr_none_writes_nothing():
    out = io.StringIO()
    putstr_fd(None, out)
    assert out.getvalue() == ""


def test_putendl_appends_newline():
    out = io.StringIO()
    putendl_fd("line", out)
    assert out.getvalue() == "line\n"


def test_putendl_none_writes_nothing():
    out = io.StringIO()
    putendl_fd(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("number", [0, 7, 42, -42, 2147483647, -2147483648])
def test_putnbr_round_trip(number):
    out = io.StringIO()
    putnbr_fd(number, out)
    assert int(out.getvalue()) == number


def test_putnbr_negative_has_single_minus():
    out = io.StringIO()
    putnbr_fd(-5, out)
    assert out.getvalue() == "-5"


def test_putnbr_rejects_float():
    with pytest.raises(TypeError):
        putnbr_fd(1.5, io.StringIO())