import argparse
import logging
import sys

from constants import MAX_OBJECTS
from errors import SceneError
from intersections import Ray
from log import setup_logging
from scene_parser import load_scene


def describe_scene(scene):
    """One-line summary of what a scene contains."""
    counts = {}
    for obj in scene:
        counts[obj.kind] = counts.get(obj.kind, 0) + 1
    parts = [f"{counts.get(kind, 0)} {kind}(s)" for kind in ("camera", "sphere", "plane", "light")]
    return f"Scene loaded: {len(scene)} objects ({', '.join(parts)})"


def probe(scene, origin, direction):
    """Cast a single ray into the scene and report the nearest hit."""
    ray = Ray(origin, direction)
    t, surface = scene.find_nearest_intersection(ray)
    if surface is None:
        return "No intersection"
    hit_point = ray.at(t)
    return f"Hit {surface.kind} at t={t:.6g}, point={hit_point.tolist()}"


def main(argv=None):
    parser = argparse.ArgumentParser(description='Scene loader and ray caster')
    parser.add_argument('scene_file', type=str, help='Path to the scene file')
    parser.add_argument('--max-objects', type=int, default=MAX_OBJECTS,
                        help=f'Maximum number of objects in the scene (default: {MAX_OBJECTS})')
    parser.add_argument('--ray', type=float, nargs=6, default=None,
                        metavar=('OX', 'OY', 'OZ', 'DX', 'DY', 'DZ'),
                        help='Cast one ray from (OX, OY, OZ) along (DX, DY, DZ)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logger = setup_logging(logging.DEBUG if args.verbose else None)
    logger.info("Loading scene %s (max objects: %s)", args.scene_file, args.max_objects)

    # Parse the scene file
    try:
        scene = load_scene(args.scene_file, max_objects=args.max_objects)
    except SceneError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(describe_scene(scene))
    if scene.camera is not None:
        print(f"Camera: {scene.camera.width:g}x{scene.camera.height:g}")

    if args.ray is not None:
        logger.debug("Casting ray from %s along %s", args.ray[:3], args.ray[3:])
        print(probe(scene, args.ray[:3], args.ray[3:]))

    return 0


if __name__ == '__main__':
    sys.exit(main())
