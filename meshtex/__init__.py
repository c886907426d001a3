"""
meshtex - Texture coordinates and texture composition for generated 3D meshes

Computes per-vertex texture coordinates for surfaces built from geographic
vector data (walls, roofs, terrain triangles, flat faces) and combines
texture layers into single rasters.
"""

from meshtex.errors import MeshTexError, InvalidInputShapeError, UnsupportedModeError
from meshtex.schema.texture import TextureDescriptor, Resolution, Wrap, load_descriptor
from meshtex.texcoords.functions import TexCoordFunction, apply_tex_coord_function
from meshtex.texturing.sources import TextureSource, ImageTexture, BlankTexture
from meshtex.texturing.composite import CompositeMode, CompositeTexture, stack_of

__version__ = "0.1.0"
__all__ = [
    "MeshTexError",
    "InvalidInputShapeError",
    "UnsupportedModeError",
    "TextureDescriptor",
    "Resolution",
    "Wrap",
    "load_descriptor",
    "TexCoordFunction",
    "apply_tex_coord_function",
    "TextureSource",
    "ImageTexture",
    "BlankTexture",
    "CompositeMode",
    "CompositeTexture",
    "stack_of",
]
