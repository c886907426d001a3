"""Planar projections along world axes."""

from typing import TYPE_CHECKING, List, Sequence, Tuple

from meshtex.geometry import Vec3, as_vertex_array

if TYPE_CHECKING:
    from meshtex.schema.texture import TextureDescriptor


def global_x_z(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """
    Place the texture using the horizontal x and z coordinates.

    Works for any geometry, but steep inclines and vertical walls look
    smeared because the surface orientation is ignored.
    """
    return [(float(x / texture.width), float(z / texture.height))
            for x, _, z in as_vertex_array(vertices)]


def global_x_y(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """Like global_x_z, but uses the vertical y coordinate. Suits some walls."""
    return [(float(x / texture.width), float(y / texture.height))
            for x, y, _ in as_vertex_array(vertices)]
