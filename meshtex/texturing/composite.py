"""
Composite textures.

Two texture sources combined into one raster, either by drawing one on top
of the other (STACKED) or by taking the alpha channel from one and the color
from the other (ALPHA_FROM_A). The raster is produced on every request.

Sizing:
    rescale=True   both sources are resampled to the element-wise maximum
                   of their natural resolutions
    rescale=False  the smaller source is tiled (repeated without stretching)
                   until it covers the larger one
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from meshtex.errors import UnsupportedModeError
from meshtex.schema.texture import Resolution, TextureDescriptor
from meshtex.texturing.sources import BlankTexture, TextureSource
from meshtex.texturing.tiling import legacy_tile, resample, tile_to_size, to_rgba

logger = logging.getLogger(__name__)


class CompositeMode(str, Enum):
    """How the two sources of a composite texture are combined."""
    # texture A's alpha channel with texture B's RGB channels
    ALPHA_FROM_A = "alpha_from_a"
    # texture A, then texture B drawn on top
    STACKED = "stacked"


def _stacked(image_a: Image.Image, image_b: Image.Image, size: Tuple[int, int]) -> Image.Image:
    result = Image.new('RGBA', size, (0, 0, 0, 0))
    result.alpha_composite(image_a)
    result.alpha_composite(image_b)
    return result


def _alpha_from_a(image_a: Image.Image, image_b: Image.Image, size: Tuple[int, int]) -> Image.Image:
    width, height = size
    pixels_a = np.asarray(image_a, dtype=np.uint8)[:height, :width]
    pixels_b = np.asarray(image_b, dtype=np.uint8)[:height, :width]
    combined = pixels_b.copy()
    combined[..., 3] = pixels_a[..., 3]
    return Image.fromarray(combined)


_COMBINERS = {
    CompositeMode.STACKED: _stacked,
    CompositeMode.ALPHA_FROM_A: _alpha_from_a,
}


@dataclass(frozen=True, eq=False, repr=False)
class CompositeTexture(TextureSource):
    """
    Two textures combined with each other.

    The composite uses texture A's descriptor (tile size, wrap, coordinate
    function), so it can replace A in a material.

    Attributes:
        mode: How the sources are combined
        rescale: Resample both sources to a common size instead of tiling
        texture_a: Bottom layer / alpha source
        texture_b: Top layer / color source
        legacy_tiling: Reproduce the historical non-rescaled sizing, which
            draws texture A where texture B should be tiled
    """
    mode: CompositeMode
    rescale: bool
    texture_a: TextureSource
    texture_b: TextureSource
    legacy_tiling: bool = False

    def __post_init__(self):
        if not isinstance(self.mode, CompositeMode):
            try:
                object.__setattr__(self, "mode", CompositeMode(str(self.mode).lower()))
            except ValueError:
                # left as-is so get_image() reports it
                pass

    @property
    def descriptor(self) -> TextureDescriptor:
        return self.texture_a.descriptor

    def get_image(self, resolution: Optional[Resolution] = None) -> Image.Image:
        """
        Combine the two sources into a new RGBA raster.

        Args:
            resolution: Requested output size. The sources are combined at
                their common size first, then resampled if this differs.

        Raises:
            UnsupportedModeError: If the mode has no combination rule
        """
        combine = _COMBINERS.get(self.mode)
        if combine is None:
            raise UnsupportedModeError(f"Unsupported mode {self.mode!r}")

        image_a = self.texture_a.get_image()
        image_b = self.texture_b.get_image()

        if self.rescale:
            output_res = Resolution.of(image_a).max(Resolution.of(image_b))
            logger.debug(f"{self!r}: rescaling sources to {output_res.width}x{output_res.height}")
            if image_a.size != output_res.as_tuple():
                image_a = self.texture_a.get_image(output_res)
            if image_b.size != output_res.as_tuple():
                image_b = self.texture_b.get_image(output_res)
            size = output_res.as_tuple()
        elif self.legacy_tiling:
            size = image_a.size
            image_b = legacy_tile(image_a, image_b)
        else:
            size = (max(image_a.width, image_b.width), max(image_a.height, image_b.height))
            logger.debug(f"{self!r}: tiling sources to {size[0]}x{size[1]}")
            image_a = tile_to_size(image_a, *size)
            image_b = tile_to_size(image_b, *size)

        result = combine(to_rgba(image_a), to_rgba(image_b), size)

        if resolution is not None:
            result = resample(result, resolution)
        return result

    def __repr__(self) -> str:
        return f"CompositeTexture [{getattr(self.mode, 'name', self.mode)}, {self.texture_a!r} + {self.texture_b!r}]"


def stack_of(textures: Sequence[TextureSource]) -> TextureSource:
    """
    Stack any number of textures (compare CompositeMode.STACKED).

    Args:
        textures: Textures ordered bottom to top

    Returns:
        BlankTexture for an empty list, the texture itself for a single one,
        otherwise a rescaling STACKED composite of the first texture and the
        stack of the rest
    """
    if len(textures) == 0:
        return BlankTexture()
    if len(textures) == 1:
        return textures[0]
    return CompositeTexture(CompositeMode.STACKED, True, textures[0], stack_of(textures[1:]))
