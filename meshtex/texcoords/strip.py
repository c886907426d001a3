"""
Texture coordinates for triangle strips that unroll a wall.

A strip alternates between an upper and a lower vertex:

    0   2   4   6      <- upper rail
    |\  |\  |\  |
    | \ | \ | \ |
    1   3   5   7      <- lower rail

s follows the horizontal length along the wall, measured between successive
upper vertices. t depends on the mode:
- wall: vertex height above its lower partner, in tile heights
- fit_height: 1 on the upper rail, 0 on the lower rail
- fit: like fit_height, and the texture is stretched once along the length
"""

import logging
from typing import TYPE_CHECKING, List, Literal, Sequence, Tuple

import numpy as np

from meshtex.errors import InvalidInputShapeError, UnsupportedModeError
from meshtex.geometry import Vec3, as_vertex_array, distance, distance_xz, span
from meshtex.texcoords.entities import effective_tile_size

if TYPE_CHECKING:
    from meshtex.schema.texture import TextureDescriptor

logger = logging.getLogger(__name__)

StripMode = Literal['wall', 'fit_height', 'fit']
STRIP_MODES = ('wall', 'fit_height', 'fit')


def strip_length(vertices: np.ndarray) -> float:
    """Horizontal length of a strip, summed between same-rail vertices."""
    return sum(distance_xz(vertices[i], vertices[i - 2]) for i in range(2, len(vertices), 2))


def _ratio(value: float, size: float) -> float:
    # zero-length strips have a zero effective size
    if size <= 0:
        return 0.0
    return float(value / size)


def strip_tex_coords(
    vertices: Sequence[Vec3],
    texture: "TextureDescriptor",
    mode: StripMode
) -> List[Tuple[float, float]]:
    """
    Texture coordinates for a wall strip.

    Args:
        vertices: Even-length vertex list alternating upper/lower
        texture: Descriptor with tile sizes and optional entity sizes
        mode: 'wall', 'fit_height' or 'fit'

    Raises:
        InvalidInputShapeError: If the vertex count is odd
        UnsupportedModeError: If mode is not a strip mode
    """
    if mode not in STRIP_MODES:
        raise UnsupportedModeError(f"Unsupported strip mode {mode!r}")

    vs = as_vertex_array(vertices)
    if len(vs) % 2 == 1:
        raise InvalidInputShapeError(f"not a triangle strip wall: {len(vs)} vertices")

    total_length = strip_length(vs)

    if mode == 'fit':
        width = total_length
    elif texture.width_per_entity is not None:
        width = effective_tile_size(total_length, texture.width, texture.width_per_entity)
    else:
        width = texture.width

    if texture.height_per_entity is not None:
        total_height = span([float(v[1]) for v in vs])
        height = effective_tile_size(total_height, texture.height, texture.height_per_entity)
    else:
        height = texture.height

    logger.debug(f"Strip ({mode}): length={total_length:.3f}, tile={width:.3f}x{height:.3f}")

    result = []
    accumulated_length = 0.0

    for i, v in enumerate(vs):
        # advance once per rung
        if i > 0 and i % 2 == 0:
            accumulated_length += distance_xz(v, vs[i - 2])

        s = _ratio(accumulated_length, width)

        if mode == 'wall':
            t = _ratio(distance(v, vs[i + 1]), height) if i % 2 == 0 else 0.0
        else:
            t = 1.0 if i % 2 == 0 else 0.0

        result.append((s, t))

    return result


def strip_wall(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """Strip coordinates with t based on the height of each rung."""
    return strip_tex_coords(vertices, texture, 'wall')


def strip_fit_height(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """Strip coordinates with t alternating between 1 and 0."""
    return strip_tex_coords(vertices, texture, 'fit_height')


def strip_fit(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """Stretch the texture exactly once over the strip."""
    return strip_tex_coords(vertices, texture, 'fit')
