import numpy as np
from numba import njit

from constants import EPSILON


def as_vector(values):
    """Copy a 3-component value into a read-only float64 array."""
    v = np.array(values, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {v.shape}")
    v.flags.writeable = False
    return v


@njit(cache=True)
def dot(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


@njit(cache=True)
def cross(a, b):
    return np.array([
        a[1]*b[2] - a[2]*b[1],
        a[2]*b[0] - a[0]*b[2],
        a[0]*b[1] - a[1]*b[0],
    ])


@njit(cache=True)
def length(v):
    return np.sqrt(dot(v, v))


def normalize(v):
    """Normalize a vector."""
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm < EPSILON:
        return v
    return v / norm


def normalize_batch(v):
    """Normalize an array of vectors (N, 3)."""
    norms = np.linalg.norm(v, axis=1, keepdims=True)
    norms = np.maximum(norms, EPSILON)  # Avoid division by zero
    return v / norms
