"""
Slope-aligned projection for individual triangles.

Each triangle gets the texture rotated so that its t axis follows the
triangle's downward slope. Triangles of the same (non-planar) face would
otherwise end up with slightly different rotations and visible seams, so
azimuths that are close to an earlier one in the same call reuse it.
"""

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from meshtex import config
from meshtex.errors import InvalidInputShapeError
from meshtex.geometry import Vec3, as_vertex_array, rotate_y, triangle_normal, xz_angle

if TYPE_CHECKING:
    from meshtex.schema.texture import TextureDescriptor

logger = logging.getLogger(__name__)


def snap_to_known_angle(angle: float, known_angles: List[float], threshold: float) -> float:
    """
    Return the first known angle within threshold, or record angle as new.

    This is a greedy linear scan in insertion order, not a global clustering:
    the result depends on triangle order. known_angles is extended in place.
    """
    for known_angle in known_angles:
        if abs(angle - known_angle) < threshold:
            return known_angle
    known_angles.append(angle)
    return angle


def slope_angles(vertices: Sequence[Vec3], threshold: Optional[float] = None) -> List[float]:
    """
    Downward slope azimuth of each triangle, after snapping.

    Flat triangles (vertical normal) get 0 and do not take part in snapping.

    Raises:
        InvalidInputShapeError: If the vertex count is not a multiple of 3
    """
    vs = as_vertex_array(vertices)
    if len(vs) % 3 != 0:
        raise InvalidInputShapeError(f"not a set of triangles: {len(vs)} vertices")
    if threshold is None:
        threshold = config.ANGLE_CLUSTER_THRESHOLD

    known_angles: List[float] = []
    angles = []
    for i in range(0, len(vs), 3):
        normal = triangle_normal(vs[i], vs[i + 1], vs[i + 2])
        down_angle = 0.0
        if math.hypot(normal[0], normal[2]) > config.NORMAL_EPSILON:
            down_angle = xz_angle(normal[0], normal[2])
            down_angle = snap_to_known_angle(down_angle, known_angles, threshold)
        angles.append(down_angle)

    logger.debug(f"Sloped {len(angles)} triangles using {len(known_angles)} distinct angles")
    return angles


def sloped_triangles(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """
    Texture coordinates for consecutive triangles, oriented along each slope.

    Args:
        vertices: Triangle vertices, 3 per triangle
        texture: Descriptor providing the tile width and height

    Returns:
        One (s, t) per vertex
    """
    vs = as_vertex_array(vertices)
    angles = slope_angles(vs)

    result = []
    for index, down_angle in enumerate(angles):
        for v in vs[3 * index:3 * index + 3]:
            base = rotate_y(v, -down_angle)
            result.append((float(-base[0] / texture.width), float(-base[2] / texture.height)))
    return result
