"""
Closed-form ray/primitive intersection.

The JIT kernels report a miss as NO_HIT (infinity); the public functions turn
that into None so callers never compare against a magic number.
"""
import numpy as np
from numba import njit

from constants import EPSILON, NO_HIT
from vectors import dot


class Ray:
    def __init__(self, origin, direction):
        self.origin = np.array(origin, dtype=np.float64)
        self.direction = np.array(direction, dtype=np.float64)

    def at(self, t):
        """Point reached after travelling t along the direction."""
        return self.origin + t * self.direction

    def __repr__(self):
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"


# =============================================================================
# Numba JIT-compiled kernels
# =============================================================================

@njit(cache=True)
def _plane_distance(origin, direction, position, normal):
    a = dot(normal, direction)

    # Ray parallel to the plane
    if abs(a) < EPSILON:
        return NO_HIT

    d = ((position[0] - origin[0]) * normal[0] +
         (position[1] - origin[1]) * normal[1] +
         (position[2] - origin[2]) * normal[2])
    t = d / a

    if t >= 0.0:
        return t
    return NO_HIT


@njit(cache=True)
def _sphere_distance(origin, direction, center, radius):
    # Vector from sphere center to ray origin
    oc_x = origin[0] - center[0]
    oc_y = origin[1] - center[1]
    oc_z = origin[2] - center[2]

    dx = direction[0]
    dy = direction[1]
    dz = direction[2]

    # Quadratic coefficients
    a = dx*dx + dy*dy + dz*dz
    # Zero-length direction
    if a == 0.0:
        return NO_HIT
    b = 2.0 * (oc_x*dx + oc_y*dy + oc_z*dz)
    c = oc_x*oc_x + oc_y*oc_y + oc_z*oc_z - radius*radius

    discriminant = b*b - 4.0*a*c
    if discriminant < 0.0:
        return NO_HIT

    sqrt_disc = np.sqrt(discriminant)
    t0 = (-b - sqrt_disc) / (2.0*a)
    if t0 > 0.0:
        return t0

    t1 = (-b + sqrt_disc) / (2.0*a)
    if t1 > 0.0:
        return t1

    return NO_HIT


@njit(cache=True)
def sphere_intersect_batch(ray_origins, ray_directions, center, radius):
    """
    Vectorized sphere intersection (JIT-compiled for speed).

    Returns an (N,) array of distances, inf where the ray misses.
    """
    N = ray_origins.shape[0]
    t_values = np.full(N, NO_HIT)
    for i in range(N):
        t_values[i] = _sphere_distance(ray_origins[i], ray_directions[i], center, radius)
    return t_values


@njit(cache=True)
def plane_intersect_batch(ray_origins, ray_directions, position, normal):
    """
    Vectorized plane intersection (JIT-compiled for speed).

    Returns an (N,) array of distances, inf where the ray misses.
    """
    N = ray_origins.shape[0]
    t_values = np.full(N, NO_HIT)
    for i in range(N):
        t_values[i] = _plane_distance(ray_origins[i], ray_directions[i], position, normal)
    return t_values


# =============================================================================
# Public API
# =============================================================================

def _as_array(v):
    return np.asarray(v, dtype=np.float64)


def _hit_or_none(t):
    if t == NO_HIT:
        return None
    return float(t)


def plane_intersection(origin, direction, position, normal):
    """
    Distance along the ray to the plane through `position` with `normal`.

    Returns None when the ray is parallel to the plane or the plane is
    behind the origin. Neither vector needs to be normalized.
    """
    t = _plane_distance(_as_array(origin), _as_array(direction),
                        _as_array(position), _as_array(normal))
    return _hit_or_none(t)


def sphere_intersection(origin, direction, center, radius):
    """
    Distance along the ray to the nearest visible point of the sphere.

    The nearer root is preferred; when the origin is inside the sphere the
    far root is returned. None if both roots lie behind the origin.
    """
    t = _sphere_distance(_as_array(origin), _as_array(direction),
                         _as_array(center), float(radius))
    return _hit_or_none(t)


def intersect_plane(ray, plane):
    return plane_intersection(ray.origin, ray.direction, plane.position, plane.normal)


def intersect_sphere(ray, sphere):
    return sphere_intersection(ray.origin, ray.direction, sphere.position, sphere.radius)
