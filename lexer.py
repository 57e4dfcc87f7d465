import numpy as np

from constants import (
    MAX_PRINTABLE,
    MAX_STRING_LENGTH,
    MIN_PRINTABLE,
    NUMBER_CHARS,
    WHITESPACE,
)
from errors import (
    InvalidStringCharacter,
    MalformedSyntax,
    StreamReadError,
    StringTooLong,
    UnexpectedEndOfInput,
    UnsupportedEscape,
)


class Cursor:
    """
    Character reader over a scene stream with line tracking.

    Works on text or binary streams; bytes are decoded as Latin-1 so that
    each byte of the file becomes exactly one character.
    """

    def __init__(self, stream):
        self.stream = stream
        self.line = 1
        self._pushback = []

    def _read(self):
        """Return the next character, or '' when the stream is exhausted."""
        if self._pushback:
            c = self._pushback.pop()
        else:
            try:
                c = self.stream.read(1)
            except (OSError, UnicodeDecodeError) as e:
                raise StreamReadError(f"Error reading file: {e}", self.line) from e
            if isinstance(c, bytes):
                c = c.decode("latin-1")

        if c == "\n":
            self.line += 1
        return c

    def next_char(self):
        c = self._read()
        if c == "":
            raise UnexpectedEndOfInput("Unexpected end of file", self.line)
        return c

    def unread_char(self, c):
        if c == "\n":
            self.line -= 1
        self._pushback.append(c)

    def expect_char(self, d):
        c = self.next_char()
        if c != d:
            raise MalformedSyntax(f"Expected '{d}' but found {c!r}", self.line)

    def skip_whitespace(self):
        c = self.next_char()
        while c in WHITESPACE:
            c = self.next_char()
        self.unread_char(c)

    def at_end(self):
        """Skip whitespace; True if nothing but whitespace was left."""
        c = self._read()
        while c != "" and c in WHITESPACE:
            c = self._read()
        if c == "":
            return True
        self.unread_char(c)
        return False

    def next_string(self):
        c = self.next_char()
        if c != '"':
            raise MalformedSyntax(f"Expected string but found {c!r}", self.line)

        chars = []
        c = self.next_char()
        while c != '"':
            if len(chars) >= MAX_STRING_LENGTH:
                raise StringTooLong(
                    f"Strings longer than {MAX_STRING_LENGTH} characters in length are not supported",
                    self.line,
                )
            if c == "\\":
                raise UnsupportedEscape("Strings with escape codes are not supported", self.line)
            if not MIN_PRINTABLE <= ord(c) <= MAX_PRINTABLE:
                raise InvalidStringCharacter("Strings may contain only ascii characters", self.line)
            chars.append(c)
            c = self.next_char()

        return "".join(chars)

    def next_number(self):
        self.skip_whitespace()

        chars = []
        c = self.next_char()
        while c in NUMBER_CHARS:
            chars.append(c)
            c = self.next_char()
        self.unread_char(c)

        token = "".join(chars)
        if not token:
            raise MalformedSyntax(f"Expected number but found {c!r}", self.line)
        try:
            value = float(token)
        except ValueError:
            raise MalformedSyntax(f"Invalid number '{token}'", self.line) from None
        if not np.isfinite(value):
            raise MalformedSyntax(f"Number '{token}' is out of range", self.line)
        return value

    def next_vector3(self):
        self.expect_char("[")
        self.skip_whitespace()

        v = np.empty(3, dtype=np.float64)
        for i in range(3):
            if i > 0:
                self.expect_char(",")
                self.skip_whitespace()
            v[i] = self.next_number()
            self.skip_whitespace()

        self.expect_char("]")
        return v
