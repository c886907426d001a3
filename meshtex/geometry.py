"""
Vector helpers for texture coordinate generation.

Coordinate System:
- Right-handed, Y-up
- The horizontal plane is X/Z
- Azimuths are measured from the +Z axis towards +X, in [0, 2*pi)

All helpers accept any (x, y, z) sequence and return numpy arrays or floats.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np

from meshtex.errors import InvalidInputShapeError

Vec3 = Sequence[float]

UP = np.array([0.0, 1.0, 0.0])


def as_vertex_array(vertices: Sequence[Vec3]) -> np.ndarray:
    """
    Convert a vertex list to an (n, 3) float array.

    Raises:
        InvalidInputShapeError: If any vertex is not a 3-component position
    """
    if len(vertices) == 0:
        return np.zeros((0, 3), dtype=float)
    try:
        array = np.asarray(vertices, dtype=float)
    except ValueError as e:
        raise InvalidInputShapeError(f"vertices are not 3D positions: {e}") from e
    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidInputShapeError(
            f"vertices must have shape (n, 3), got {array.shape}"
        )
    return array


def triangle_normal(v0: Vec3, v1: Vec3, v2: Vec3) -> np.ndarray:
    """Unit normal of a counterclockwise triangle (zero vector if degenerate)."""
    a = np.asarray(v0, dtype=float)
    normal = np.cross(np.asarray(v1, dtype=float) - a, np.asarray(v2, dtype=float) - a)
    length = np.linalg.norm(normal)
    if length == 0:
        return normal
    return normal / length


def xz_angle(x: float, z: float) -> float:
    """Clockwise angle of the horizontal vector (x, z) from the +Z axis."""
    angle = math.atan2(x, z)
    if angle < 0:
        angle += 2 * math.pi
    return angle


def rotate_y(v: Vec3, angle: float) -> np.ndarray:
    """
    Rotate a vector about the vertical axis.

    Uses the same handedness as xz_angle: rotating (0, 0, 1) by
    xz_angle(x, z) yields the direction (x, 0, z).
    """
    x, y, z = v
    sin = math.sin(angle)
    cos = math.cos(angle)
    return np.array([cos * x + sin * z, y, -sin * x + cos * z])


def distance_xz(a: Vec3, b: Vec3) -> float:
    """Distance between two positions projected onto the horizontal plane."""
    return math.hypot(a[0] - b[0], a[2] - b[2])


def distance(a: Vec3, b: Vec3) -> float:
    """Euclidean distance between two 3D positions."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def face_normal(loop: np.ndarray) -> np.ndarray:
    """
    Unit normal of a planar vertex loop, using Newell's method.

    Robust against collinear leading vertices and an optional closing vertex
    that repeats the first one.
    """
    current = loop
    following = np.roll(loop, -1, axis=0)
    normal = np.array([
        np.sum((current[:, 1] - following[:, 1]) * (current[:, 2] + following[:, 2])),
        np.sum((current[:, 2] - following[:, 2]) * (current[:, 0] + following[:, 0])),
        np.sum((current[:, 0] - following[:, 0]) * (current[:, 1] + following[:, 1])),
    ])
    length = np.linalg.norm(normal)
    if length == 0:
        raise InvalidInputShapeError("face loop has no area")
    return normal / length


def face_plane_basis(normal: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthonormal in-plane axes (u, w) for a face with the given unit normal.

    Horizontal faces keep the world X and Z axes. Other faces use the
    horizontal direction along the face as u, so walls map to (along, up).
    """
    u = np.cross(UP, normal)
    length = np.linalg.norm(u)
    if length < 1e-9:
        return np.array([1.0, 0.0, 0.0]), np.array([0.0, 0.0, 1.0])
    u = u / length
    w = np.cross(normal, u)
    return u, w


def project_to_face_plane(loop: Sequence[Vec3]) -> np.ndarray:
    """
    Project a planar vertex loop into its own plane.

    Returns:
        (n, 2) array of in-plane coordinates, one row per input vertex
    """
    points = as_vertex_array(loop)
    if len(points) < 3:
        raise InvalidInputShapeError(
            f"a face loop needs at least 3 vertices, got {len(points)}"
        )
    u, w = face_plane_basis(face_normal(points))
    return np.column_stack((points @ u, points @ w))


def span(values: List[float]) -> float:
    """Difference between the largest and smallest value."""
    if not values:
        return 0.0
    return max(values) - min(values)
