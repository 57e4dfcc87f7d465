"""Serialize a Scene back into the scene file grammar."""
from camera import Camera
from light import Light
from surfaces.plane import Plane
from surfaces.sphere import Sphere


# (file key, attribute) in the order they are written
_LIGHT_OPTIONAL = (
    ("direction", "direction"),
    ("radial-a0", "radial_a0"),
    ("radial-a1", "radial_a1"),
    ("radial-a2", "radial_a2"),
    ("theta", "theta"),
    ("angular-a0", "angular_a0"),
)


def _number(value):
    # repr round-trips a float exactly
    return repr(float(value))


def _vector(v):
    return "[" + ", ".join(_number(x) for x in v) + "]"


def _fields(obj):
    if isinstance(obj, Camera):
        return [("width", _number(obj.width)), ("height", _number(obj.height))]
    if isinstance(obj, Sphere):
        return [("color", _vector(obj.color)), ("position", _vector(obj.position)),
                ("radius", _number(obj.radius))]
    if isinstance(obj, Plane):
        return [("color", _vector(obj.color)), ("position", _vector(obj.position)),
                ("normal", _vector(obj.normal))]
    if isinstance(obj, Light):
        fields = [("color", _vector(obj.color)), ("position", _vector(obj.position))]
        for key, attr in _LIGHT_OPTIONAL:
            value = getattr(obj, attr)
            if value is None:
                continue
            fields.append((key, _vector(value) if attr == "direction" else _number(value)))
        return fields
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def dump_object(obj):
    parts = [f'"type": "{obj.kind}"']
    parts.extend(f'"{key}": {value}' for key, value in _fields(obj))
    return "{ " + ", ".join(parts) + " }"


def dump_scene(scene):
    lines = ",\n".join("  " + dump_object(obj) for obj in scene)
    return "[\n" + lines + "\n]\n"


def write_scene(scene, path):
    with open(path, "w", encoding="ascii") as f:
        f.write(dump_scene(scene))
