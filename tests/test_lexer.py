from io import BytesIO, StringIO

import numpy as np
import pytest

from errors import (
    InvalidStringCharacter,
    MalformedSyntax,
    StreamReadError,
    StringTooLong,
    UnexpectedEndOfInput,
    UnsupportedEscape,
)
from lexer import Cursor


def cursor_for(text):
    return Cursor(StringIO(text))


# --- Character reading ---

def test_next_char_tracks_lines():
    cursor = cursor_for("a\nb\n")
    assert cursor.line == 1
    assert cursor.next_char() == "a"
    assert cursor.next_char() == "\n"
    assert cursor.line == 2
    assert cursor.next_char() == "b"
    assert cursor.next_char() == "\n"
    assert cursor.line == 3


def test_next_char_at_end_of_input():
    cursor = cursor_for("x")
    cursor.next_char()
    with pytest.raises(UnexpectedEndOfInput) as excinfo:
        cursor.next_char()
    assert excinfo.value.line == 1


def test_unread_newline_restores_line():
    cursor = cursor_for("\nz")
    c = cursor.next_char()
    assert cursor.line == 2
    cursor.unread_char(c)
    assert cursor.line == 1
    assert cursor.next_char() == "\n"
    assert cursor.next_char() == "z"


def test_binary_stream_is_decoded():
    cursor = Cursor(BytesIO(b'["ok"'))
    cursor.expect_char("[")
    assert cursor.next_string() == "ok"


def test_read_failure_becomes_stream_read_error():
    class Broken:
        def read(self, size):
            raise OSError("disk on fire")

    with pytest.raises(StreamReadError):
        Cursor(Broken()).next_char()


def test_expect_char_mismatch_reports_line():
    cursor = cursor_for("\n\n{")
    cursor.skip_whitespace()
    with pytest.raises(MalformedSyntax) as excinfo:
        cursor.expect_char("[")
    assert excinfo.value.line == 3
    assert "line 3" in str(excinfo.value)


def test_skip_whitespace_stops_before_token():
    cursor = cursor_for(" \t\r\n\v\f  x")
    cursor.skip_whitespace()
    assert cursor.line == 2
    assert cursor.next_char() == "x"


def test_skip_whitespace_does_not_treat_nbsp_as_space():
    cursor = cursor_for("\xa0x")
    cursor.skip_whitespace()
    assert cursor.next_char() == "\xa0"


def test_at_end():
    assert cursor_for("  \n ").at_end()
    cursor = cursor_for("  ]")
    assert not cursor.at_end()
    assert cursor.next_char() == "]"


# --- Strings ---

def test_next_string():
    assert cursor_for('"sphere" rest').next_string() == "sphere"


def test_next_string_empty():
    assert cursor_for('""').next_string() == ""


def test_next_string_requires_quote():
    with pytest.raises(MalformedSyntax):
        cursor_for("type").next_string()


def test_next_string_rejects_escape():
    with pytest.raises(UnsupportedEscape):
        cursor_for(r'"a\"b"').next_string()


def test_next_string_rejects_non_ascii():
    with pytest.raises(InvalidStringCharacter):
        cursor_for('"caf\xe9"').next_string()
    with pytest.raises(MalformedSyntax):
        cursor_for('"tab\there"').next_string()


def test_next_string_length_limit():
    ok = "a" * 128
    assert cursor_for(f'"{ok}"').next_string() == ok
    with pytest.raises(StringTooLong):
        cursor_for(f'"{ok}b"').next_string()


def test_next_string_unterminated():
    with pytest.raises(UnexpectedEndOfInput):
        cursor_for('"abc').next_string()


# --- Numbers ---

@pytest.mark.parametrize("text, expected", [
    ("42,", 42.0),
    ("-3.5 ", -3.5),
    ("+0.25]", 0.25),
    ("1e3}", 1000.0),
    ("2.5E-2,", 0.025),
    ("  7,", 7.0),
])
def test_next_number(text, expected):
    assert cursor_for(text).next_number() == expected


def test_next_number_leaves_terminator():
    cursor = cursor_for("12,")
    cursor.next_number()
    assert cursor.next_char() == ","


def test_next_number_rejects_garbage():
    with pytest.raises(MalformedSyntax):
        cursor_for("abc").next_number()
    with pytest.raises(MalformedSyntax):
        cursor_for("1-2,").next_number()


@pytest.mark.parametrize("text", ["1e999,", "-1e400]"])
def test_next_number_rejects_overflow(text):
    with pytest.raises(MalformedSyntax):
        cursor_for(text).next_number()


def test_next_number_at_end_of_input():
    with pytest.raises(UnexpectedEndOfInput):
        cursor_for("12").next_number()


# --- Vectors ---

def test_next_vector3():
    v = cursor_for("[ 1, -2.5 ,3e1 ]").next_vector3()
    assert v.dtype == np.float64
    np.testing.assert_array_equal(v, [1.0, -2.5, 30.0])


def test_next_vector3_multiline():
    cursor = cursor_for("[1,\n 2,\n 3]")
    np.testing.assert_array_equal(cursor.next_vector3(), [1.0, 2.0, 3.0])
    assert cursor.line == 3


@pytest.mark.parametrize("text", [
    "(1, 2, 3)",
    "[1, 2]",
    "[1; 2; 3]",
    "[1, 2, 3, 4]",
])
def test_next_vector3_malformed(text):
    with pytest.raises(MalformedSyntax):
        cursor_for(text).next_vector3()
