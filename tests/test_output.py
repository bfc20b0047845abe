import io

import pytest

from printfmt.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("k")
    assert capsys.readouterr().out == "k"


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_only_newline():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == "\n"


def test_put_endl_defaults_to_stdout(capsys):
    put_endl("abc")
    assert capsys.readouterr().out == "abc\n"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_put_nbr_matches_decimal_text(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)
    assert int(buf.getvalue()) == n


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("5", io.StringIO())
    with pytest.raises(TypeError):
        put_nbr(True, io.StringIO())


def test_mixed_writes_accumulate():
    buf = io.StringIO()
    put_str("n=", buf)
    put_nbr(-54, buf)
    put_endl(None, buf)
    assert buf.getvalue() == "n=-54\n"