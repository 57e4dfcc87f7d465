"""Scene loading exceptions.

Every error raised while reading a scene file derives from SceneError and
carries the line number the reader was on, when one is known.
"""


class SceneError(Exception):
    """Base exception for scene loading."""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line})"


class UnexpectedEndOfInput(SceneError):
    """The stream ended in the middle of the scene."""


class StreamReadError(SceneError):
    """The underlying file could not be opened or read."""


class MalformedSyntax(SceneError):
    """Wrong punctuation or an unexpected character."""


class InvalidStringCharacter(MalformedSyntax):
    """A string contains a character outside printable ASCII."""


class UnsupportedEscape(SceneError):
    """A string contains a backslash."""


class StringTooLong(SceneError):
    """A string is longer than MAX_STRING_LENGTH characters."""


class UnknownType(SceneError):
    def __init__(self, type_name, line=None):
        super().__init__(f'Unknown type, "{type_name}"', line)
        self.type_name = type_name


class UnknownProperty(SceneError):
    def __init__(self, kind, name, line=None):
        super().__init__(f'Unknown {kind} property, "{name}"', line)
        self.kind = kind
        self.name = name


class DuplicateField(SceneError):
    def __init__(self, kind, field, line=None):
        super().__init__(f"{kind.capitalize()} {field} has already been set", line)
        self.kind = kind
        self.field = field


class MissingRequiredField(SceneError):
    def __init__(self, kind, fields, line=None):
        fields = tuple(fields)
        super().__init__(f"{kind.capitalize()} is missing required field(s): {', '.join(fields)}", line)
        self.kind = kind
        self.fields = fields


class ValueOutOfRange(SceneError):
    def __init__(self, field, value, expected, line=None):
        super().__init__(f"{field} value {value} is invalid, expected {expected}", line)
        self.field = field
        self.value = value


class EmptySceneRejected(SceneError):
    """The scene array has no objects."""


class SceneCapacityExceeded(SceneError):
    def __init__(self, limit, line=None):
        super().__init__(f"Scene holds at most {limit} objects", line)
        self.limit = limit


class DuplicateCamera(SceneError):
    """A second camera object was defined."""
