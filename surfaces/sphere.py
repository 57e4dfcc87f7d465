import numpy as np

from intersections import sphere_intersect_batch, sphere_intersection
from vectors import as_vector, normalize_batch


class Sphere:
    kind = "sphere"

    def __init__(self, position, radius, color):
        self.position = as_vector(position)
        self.radius = float(radius)
        self.color = as_vector(color)

    def intersect(self, ray):
        """Compute ray-sphere intersection using the quadratic formula."""
        return sphere_intersection(ray.origin, ray.direction, self.position, self.radius)

    def intersect_batch(self, ray_origins, ray_directions):
        """Vectorized ray-sphere intersection for N rays."""
        return sphere_intersect_batch(
            np.ascontiguousarray(ray_origins, dtype=np.float64),
            np.ascontiguousarray(ray_directions, dtype=np.float64),
            self.position, self.radius,
        )

    def normal_at(self, point):
        return (np.asarray(point, dtype=np.float64) - self.position) / self.radius

    def normal_at_batch(self, points):
        return normalize_batch(np.asarray(points, dtype=np.float64) - self.position)

    def __repr__(self):
        return (f"Sphere(position={self.position.tolist()}, radius={self.radius}, "
                f"color={self.color.tolist()})")
