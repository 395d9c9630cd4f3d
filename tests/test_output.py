import io

import pytest

from pushswap.output import put_char, put_endl, put_number, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("a", out)
    assert out.getvalue() == "a"


def test_put_char_code():
    out = io.StringIO()
    put_char(ord("z"), out)
    assert out.getvalue() == "z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    out = io.StringIO()
    put_str("Hello", out)
    put_str("", out)
    assert out.getvalue() == "Hello"


def test_put_endl():
    out = io.StringIO()
    put_endl("Hello", out)
    assert out.getvalue() == "Hello\n"


def test_put_number_min():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -1000])
def test_put_number_round_trip(number):
    out = io.StringIO()
    put_number(number, out)
    assert int(out.getvalue()) == number


def test_default_stream_is_stdout(capsys):
    put_endl("Hello")
    assert capsys.readouterr().out == "Hello\n"