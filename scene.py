import numpy as np

from camera import Camera
from constants import MAX_OBJECTS
from errors import DuplicateCamera, SceneCapacityExceeded
from light import Light
from surfaces.plane import Plane
from surfaces.sphere import Sphere


class Scene:
    """Objects of a scene file, in file order."""

    def __init__(self, max_objects=MAX_OBJECTS):
        self.max_objects = max_objects
        self.camera = None
        self._objects = []

    def add(self, obj, line=None):
        if self.max_objects is not None and len(self._objects) >= self.max_objects:
            raise SceneCapacityExceeded(self.max_objects, line)
        if isinstance(obj, Camera):
            if self.camera is not None:
                raise DuplicateCamera("Only one camera may be defined", line)
            self.camera = obj
        self._objects.append(obj)

    @property
    def objects(self):
        return tuple(self._objects)

    @property
    def surfaces(self):
        return [obj for obj in self._objects if isinstance(obj, (Sphere, Plane))]

    @property
    def lights(self):
        return [obj for obj in self._objects if isinstance(obj, Light)]

    def __len__(self):
        return len(self._objects)

    def __iter__(self):
        return iter(self._objects)

    def __getitem__(self, index):
        return self._objects[index]

    def find_nearest_intersection(self, ray, max_t=np.inf):
        """
        Find the nearest surface intersection along the ray.

        Returns:
            (t, surface) if intersection found
            (None, None) if no intersection
        """
        nearest_t = max_t
        nearest_surface = None

        for surface in self.surfaces:
            t = surface.intersect(ray)
            if t is not None and t < nearest_t:
                nearest_t = t
                nearest_surface = surface

        if nearest_surface is None:
            return None, None

        return nearest_t, nearest_surface

    def find_nearest_intersection_batch(self, ray_origins, ray_directions, max_t=np.inf):
        """
        Find the nearest surface intersection for a batch of rays.

        Args:
            ray_origins: (N, 3) array of ray origins
            ray_directions: (N, 3) array of ray directions
            max_t: maximum t value to consider

        Returns:
            t_values: (N,) array of intersection distances (np.inf where no hit)
            surface_indices: (N,) indices into `surfaces` (-1 where no hit)
            normals: (N, 3) unit surface normals (zero where no hit)
        """
        ray_origins = np.asarray(ray_origins, dtype=np.float64)
        ray_directions = np.asarray(ray_directions, dtype=np.float64)
        N = ray_origins.shape[0]

        best_t = np.full(N, max_t, dtype=np.float64)
        best_surface_idx = np.full(N, -1, dtype=np.int32)
        best_normals = np.zeros((N, 3))

        for surf_idx, surface in enumerate(self.surfaces):
            t_values = surface.intersect_batch(ray_origins, ray_directions)

            # Update where this surface is closer
            closer = t_values < best_t
            if not np.any(closer):
                continue
            best_t[closer] = t_values[closer]
            best_surface_idx[closer] = surf_idx
            hit_points = ray_origins[closer] + t_values[closer, None] * ray_directions[closer]
            best_normals[closer] = surface.normal_at_batch(hit_points)

        best_t[best_surface_idx < 0] = np.inf
        return best_t, best_surface_idx, best_normals
