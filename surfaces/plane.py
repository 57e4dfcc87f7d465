import numpy as np

from intersections import plane_intersect_batch, plane_intersection
from vectors import as_vector, normalize


class Plane:
    """Infinite plane through `position`. The normal is kept as written in the scene."""

    kind = "plane"

    def __init__(self, position, normal, color):
        self.position = as_vector(position)
        self.normal = as_vector(normal)
        self.color = as_vector(color)

    def intersect(self, ray):
        """Compute ray-plane intersection. Plane equation: (P - position) . N = 0"""
        return plane_intersection(ray.origin, ray.direction, self.position, self.normal)

    def intersect_batch(self, ray_origins, ray_directions):
        """Vectorized ray-plane intersection for N rays."""
        return plane_intersect_batch(
            np.ascontiguousarray(ray_origins, dtype=np.float64),
            np.ascontiguousarray(ray_directions, dtype=np.float64),
            self.position, self.normal,
        )

    def normal_at(self, point):
        return normalize(self.normal)

    def normal_at_batch(self, points):
        points = np.asarray(points, dtype=np.float64)
        return np.broadcast_to(normalize(self.normal), points.shape).copy()

    def __repr__(self):
        return (f"Plane(position={self.position.tolist()}, normal={self.normal.tolist()}, "
                f"color={self.color.tolist()})")
