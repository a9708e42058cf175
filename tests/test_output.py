import io

import pytest

from solong.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_char():
    stream = io.StringIO()
    putchar_fd("a", stream)
    assert stream.getvalue() == "a"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putchar_no_stream():
    assert putchar_fd("a", None) is None


def test_putstr_writes_string():
    stream = io.StringIO()
    putstr_fd("putasevilla", stream)
    assert stream.getvalue() == "putasevilla"


def test_putendl_appends_newline():
    stream = io.StringIO()
    putendl_fd("putasevilla", stream)
    assert stream.getvalue() == "putasevilla\n"


def test_putnbr_negative_source_example():
    stream = io.StringIO()
    putnbr_fd(-48, stream)
    assert stream.getvalue() == "-48"


def test_putnbr_zero():
    stream = io.StringIO()
    putnbr_fd(0, stream)
    assert stream.getvalue() == "0"


def test_putnbr_int_min():
    stream = io.StringIO()
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_wraps_to_32_bits():
    stream = io.StringIO()
    putnbr_fd(2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_round_trip():
    for value in (7, 10, 12345, -99999, 2147483647):
        stream = io.StringIO()
        putnbr_fd(value, stream)
        assert int(stream.getvalue()) == value


def test_sequential_writes_accumulate():
    stream = io.StringIO()
    putstr_fd("n=", stream)
    putnbr_fd(42, stream)
    putchar_fd("!", stream)
    assert stream.getvalue() == "n=42!"