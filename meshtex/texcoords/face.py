"""Fit a texture onto a flat polygon."""

from typing import TYPE_CHECKING, List, Sequence, Tuple

import numpy as np

from meshtex.errors import InvalidInputShapeError
from meshtex.geometry import Vec3, project_to_face_plane

if TYPE_CHECKING:
    from meshtex.schema.texture import TextureDescriptor


def face_fit(vertices: Sequence[Vec3], texture: "TextureDescriptor") -> List[Tuple[float, float]]:
    """
    Stretch the texture over the bounding rectangle of a face.

    The vertices are the loop of a planar polygon. They are projected into
    the polygon's own plane; the texture's nominal size is not used.

    Raises:
        InvalidInputShapeError: For fewer than 3 vertices or a face without area
    """
    projected = project_to_face_plane(vertices)

    box_min = projected.min(axis=0)
    box_size = projected.max(axis=0) - box_min
    if np.any(box_size <= 0):
        raise InvalidInputShapeError("face loop has a degenerate bounding box")

    relative = (projected - box_min) / box_size
    return [(float(s), float(t)) for s, t in relative]
