"""
Texture composition.

Combines texture sources into single rasters (stacking, alpha transplant)
with resampling or tiling to bring sources to a common size.
"""
from .sources import TextureSource, ImageTexture, BlankTexture
from .composite import CompositeMode, CompositeTexture, stack_of
from .tiling import tile_to_size

__all__ = [
    'TextureSource',
    'ImageTexture',
    'BlankTexture',
    'CompositeMode',
    'CompositeTexture',
    'stack_of',
    'tile_to_size',
]
