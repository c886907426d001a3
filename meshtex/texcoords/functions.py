"""
Named texture coordinate functions.

A texture descriptor references one of these by name; the mesh builder then
calls apply() with the vertices of a surface. Every function maps N vertices
to exactly N (s, t) coordinates in the same order, or raises.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Sequence, Tuple

from meshtex.errors import UnsupportedModeError
from meshtex.geometry import Vec3
from meshtex.texcoords.face import face_fit
from meshtex.texcoords.planar import global_x_y, global_x_z
from meshtex.texcoords.slope import sloped_triangles
from meshtex.texcoords.strip import strip_fit, strip_fit_height, strip_wall

if TYPE_CHECKING:
    from meshtex.schema.texture import TextureDescriptor

logger = logging.getLogger(__name__)

TexCoords = List[Tuple[float, float]]


class TexCoordFunction(str, Enum):
    """
    Closed set of texture coordinate functions.

    GLOBAL_X_Z: x and z divided by the tile size. Works for all geometry,
        steep surfaces look smeared.
    GLOBAL_X_Y: like GLOBAL_X_Z, using y instead of z.
    SLOPED_TRIANGLES: per-triangle orientation along the downward slope.
        Vertex count must be a multiple of 3.
    STRIP_WALL: triangle strip (upper/lower alternating), s from the length
        along the wall, t from the vertex height.
    STRIP_FIT_HEIGHT: like STRIP_WALL, t alternates between 1 and 0.
    STRIP_FIT: stretches the texture exactly once onto a triangle strip.
    FACE_FIT: stretches the texture over the bounding box of a flat polygon.
    """
    GLOBAL_X_Z = "global_x_z"
    GLOBAL_X_Y = "global_x_y"
    SLOPED_TRIANGLES = "sloped_triangles"
    STRIP_WALL = "strip_wall"
    STRIP_FIT_HEIGHT = "strip_fit_height"
    STRIP_FIT = "strip_fit"
    FACE_FIT = "face_fit"

    @classmethod
    def from_name(cls, name: str) -> "TexCoordFunction":
        """Look up a function by name, ignoring case ('STRIP_WALL', 'strip_wall')."""
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unknown texture coordinate function: {name}. "
            f"Supported: {', '.join(m.value for m in cls)}"
        )

    def apply(self, vertices: Sequence[Vec3], texture: "TextureDescriptor") -> TexCoords:
        """Calculate one texture coordinate per vertex."""
        return apply_tex_coord_function(self, vertices, texture)


_IMPLEMENTATIONS: Dict[TexCoordFunction, Callable[..., TexCoords]] = {
    TexCoordFunction.GLOBAL_X_Z: global_x_z,
    TexCoordFunction.GLOBAL_X_Y: global_x_y,
    TexCoordFunction.SLOPED_TRIANGLES: sloped_triangles,
    TexCoordFunction.STRIP_WALL: strip_wall,
    TexCoordFunction.STRIP_FIT_HEIGHT: strip_fit_height,
    TexCoordFunction.STRIP_FIT: strip_fit,
    TexCoordFunction.FACE_FIT: face_fit,
}


def apply_tex_coord_function(
    function: TexCoordFunction,
    vertices: Sequence[Vec3],
    texture: "TextureDescriptor"
) -> TexCoords:
    """
    Dispatch to the implementation of a texture coordinate function.

    Raises:
        InvalidInputShapeError: If the vertices don't suit the function
        UnsupportedModeError: If the function has no implementation
    """
    implementation = _IMPLEMENTATIONS.get(function)
    if implementation is None:
        raise UnsupportedModeError(f"unimplemented texture coordinate function {function!r}")

    logger.debug(f"Applying {function.value} to {len(vertices)} vertices")
    return implementation(vertices, texture)
