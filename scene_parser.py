"""
Recursive-descent reader for scene files.

A scene file is a JSON-like array of objects. Every object starts with its
"type" key, followed by the fields that type recognizes:

    [
      { "type": "camera", "width": 2.0, "height": 2.0 },
      { "type": "sphere", "color": [255, 0, 0], "position": [0, 1, -5], "radius": 2 },
      { "type": "plane", "color": [0, 0, 255], "position": [0, 0, -10], "normal": [0, 0, 1] },
      { "type": "light", "color": [255, 255, 255], "position": [1, 3, 2], "radial-a2": 1.0 }
    ]

Strings are plain printable ASCII without escapes. Any error aborts the whole
parse; a partially built scene is never returned.
"""
import io
import logging
from collections import namedtuple

import numpy as np

from camera import Camera
from constants import COLOR_MAX, COLOR_MIN, MAX_OBJECTS, MAX_THETA, MIN_DIMENSION, MIN_RADIUS
from errors import (
    DuplicateField,
    EmptySceneRejected,
    MalformedSyntax,
    MissingRequiredField,
    StreamReadError,
    UnknownProperty,
    UnknownType,
    ValueOutOfRange,
)
from lexer import Cursor
from light import Light
from scene import Scene
from surfaces.plane import Plane
from surfaces.sphere import Sphere


logger = logging.getLogger(__name__)


# =============================================================================
# Field tables
# =============================================================================

# slot: constructor argument the value is stored under
Field = namedtuple("Field", ["slot", "read", "check"])

# dependent: {slot: other slot required once this one is set and non-zero}
ObjectType = namedtuple("ObjectType", ["factory", "fields", "required", "dependent"])


def _at_least(minimum):
    def check(name, value, line):
        if value < minimum:
            raise ValueOutOfRange(name, value, f"a value >= {minimum:g}", line)
    return check


def _check_color(name, value, line):
    if np.any(value < COLOR_MIN) or np.any(value > COLOR_MAX):
        raise ValueOutOfRange(name, value.tolist(),
                              f"channels between {COLOR_MIN:g} and {COLOR_MAX:g}", line)


def _check_theta(name, value, line):
    if not 0.0 <= value <= MAX_THETA:
        raise ValueOutOfRange(name, value, f"an angle between 0 and {MAX_THETA:g} degrees", line)


_number = Cursor.next_number
_vector = Cursor.next_vector3
_non_negative = _at_least(0.0)

OBJECT_TYPES = {
    "camera": ObjectType(
        factory=Camera,
        fields={
            "width": Field("width", _number, _at_least(MIN_DIMENSION)),
            "height": Field("height", _number, _at_least(MIN_DIMENSION)),
        },
        required=("width", "height"),
        dependent={},
    ),
    "sphere": ObjectType(
        factory=Sphere,
        fields={
            "color": Field("color", _vector, _check_color),
            "position": Field("position", _vector, None),
            "radius": Field("radius", _number, _at_least(MIN_RADIUS)),
        },
        required=("position", "color", "radius"),
        dependent={},
    ),
    "plane": ObjectType(
        factory=Plane,
        fields={
            "color": Field("color", _vector, _check_color),
            "position": Field("position", _vector, None),
            "normal": Field("normal", _vector, None),
        },
        required=("position", "color", "normal"),
        dependent={},
    ),
    "light": ObjectType(
        factory=Light,
        fields={
            "color": Field("color", _vector, _check_color),
            "position": Field("position", _vector, None),
            "direction": Field("direction", _vector, None),
            # Older scene files spell the spotlight direction "normal"
            "normal": Field("direction", _vector, None),
            "radial-a0": Field("radial_a0", _number, _non_negative),
            "radial-a1": Field("radial_a1", _number, _non_negative),
            "radial-a2": Field("radial_a2", _number, _non_negative),
            "theta": Field("theta", _number, _check_theta),
            "angular-a0": Field("angular_a0", _number, _non_negative),
        },
        required=("position", "color"),
        dependent={"theta": "direction"},
    ),
}


def _missing_fields(object_type, values):
    missing = [slot for slot in object_type.required if slot not in values]
    for slot, needed in object_type.dependent.items():
        if values.get(slot) and needed not in values:
            missing.append(needed)
    return missing


# =============================================================================
# Parser
# =============================================================================

class SceneParser:
    def __init__(self, cursor, max_objects=MAX_OBJECTS):
        self.cursor = cursor
        self.max_objects = max_objects

    def parse(self):
        """Read the whole scene array and return the Scene."""
        cursor = self.cursor
        scene = Scene(self.max_objects)

        # Find the beginning of the list
        cursor.skip_whitespace()
        cursor.expect_char("[")
        cursor.skip_whitespace()

        c = cursor.next_char()
        if c == "]":
            raise EmptySceneRejected("Scene file contains no objects", cursor.line)
        cursor.unread_char(c)

        while True:
            cursor.expect_char("{")
            line = cursor.line
            obj = self._parse_object()
            scene.add(obj, line)
            logger.debug("Parsed %s on line %d", obj.kind, line)

            cursor.skip_whitespace()
            c = cursor.next_char()
            if c == "]":
                break
            if c != ",":
                raise MalformedSyntax(f"Expected ',' or ']' but found {c!r}", cursor.line)
            cursor.skip_whitespace()

        if not cursor.at_end():
            raise MalformedSyntax("Unexpected content after the end of the scene", cursor.line)

        return scene

    def _parse_object(self):
        cursor = self.cursor

        cursor.skip_whitespace()
        key = cursor.next_string()
        if key != "type":
            raise MalformedSyntax(f'Expected "type" key but found "{key}"', cursor.line)

        cursor.skip_whitespace()
        cursor.expect_char(":")
        cursor.skip_whitespace()

        kind = cursor.next_string()
        object_type = OBJECT_TYPES.get(kind)
        if object_type is None:
            raise UnknownType(kind, cursor.line)

        values = {}
        while True:
            cursor.skip_whitespace()
            c = cursor.next_char()
            if c == "}":
                # stop parsing this object
                break
            if c != ",":
                raise UnknownProperty(kind, c, cursor.line)

            # read another field
            cursor.skip_whitespace()
            key = cursor.next_string()
            cursor.skip_whitespace()
            cursor.expect_char(":")
            cursor.skip_whitespace()
            self._parse_field(kind, object_type, key, values)

        missing = _missing_fields(object_type, values)
        if missing:
            raise MissingRequiredField(kind, missing, cursor.line)

        return object_type.factory(**values)

    def _parse_field(self, kind, object_type, key, values):
        cursor = self.cursor

        field = object_type.fields.get(key)
        if field is None:
            raise UnknownProperty(kind, key, cursor.line)
        if field.slot in values:
            raise DuplicateField(kind, key, cursor.line)

        value = field.read(cursor)
        if field.check is not None:
            field.check(key, value, cursor.line)
        values[field.slot] = value


def parse_scene_string(text, max_objects=MAX_OBJECTS):
    """Parse a scene held in memory."""
    scene = SceneParser(Cursor(io.StringIO(text)), max_objects).parse()
    logger.info("Loaded %d objects", len(scene))
    return scene


def load_scene(path, max_objects=MAX_OBJECTS):
    """
    Load the scene file at `path`.

    Raises a SceneError subclass describing the first problem found.
    """
    try:
        scene_file = open(path, "r", encoding="latin-1")
    except OSError as e:
        raise StreamReadError(f'Could not open file "{path}": {e.strerror}') from e

    with scene_file:
        scene = SceneParser(Cursor(scene_file), max_objects).parse()

    logger.info("Loaded %d objects from %s", len(scene), path)
    return scene
