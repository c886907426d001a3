"""
Texture coordinate generation.

Maps an ordered list of 3D vertices plus a texture descriptor to one (s, t)
coordinate per vertex.
"""
from .functions import TexCoordFunction, apply_tex_coord_function
from .entities import entity_count, intrinsic_repeats, effective_tile_size
from .slope import slope_angles

__all__ = [
    'TexCoordFunction',
    'apply_tex_coord_function',
    'entity_count',
    'intrinsic_repeats',
    'effective_tile_size',
    'slope_angles',
]
