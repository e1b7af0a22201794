import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.lib.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    put_str(" world", out)
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("Error", out)
    assert out.getvalue() == "Error\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_number_int_min():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_number_zero():
    out = io.StringIO()
    put_number(0, out)
    assert out.getvalue() == "0"


def test_default_stream_is_stdout(capsys):
    put_endl("pa")
    assert capsys.readouterr().out == "pa\n"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_number_round_trip(n):
    out = io.StringIO()
    put_number(n, out)
    assert int(out.getvalue()) == n


@given(st.text())
def test_put_str_round_trip(s):
    out = io.StringIO()
    put_str(s, out)
    assert out.getvalue() == s