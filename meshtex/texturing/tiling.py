"""
Raster sizing helpers for texture composition.

Sources of different sizes are brought to a common size either by
resampling (stretching) or by tiling (repeating without stretching).
"""

import logging

from PIL import Image

from meshtex import config
from meshtex.schema.texture import Resolution

logger = logging.getLogger(__name__)


def to_rgba(image: Image.Image) -> Image.Image:
    """Return an RGBA copy of an image."""
    if image.mode != 'RGBA':
        return image.convert('RGBA')
    return image.copy()


def resample(image: Image.Image, resolution: Resolution) -> Image.Image:
    """
    Stretch an image to a resolution.

    The filter comes from MESHTEX_RESAMPLE (see meshtex.config).
    Returns an RGBA copy even if no resampling is needed.
    """
    image = to_rgba(image)
    if image.size == resolution.as_tuple():
        return image
    logger.debug(f"Resampling {image.size[0]}x{image.size[1]} to {resolution.width}x{resolution.height}")
    return image.resize(resolution.as_tuple(), config.get_resample_filter())


def tile_to_size(source: Image.Image, target_w: int, target_h: int) -> Image.Image:
    """
    Create an image of target size by tiling/cropping the source.

    Keeps the source's pixel size (no stretching):
    - Tiles if the target is larger than the source
    - Crops if the target is smaller than the source

    Args:
        source: Source image (any size)
        target_w: Target width in pixels
        target_h: Target height in pixels

    Returns:
        New RGBA image of exactly target_w x target_h
    """
    source = to_rgba(source)
    src_w, src_h = source.size

    if (src_w, src_h) == (target_w, target_h):
        return source

    result = Image.new('RGBA', (target_w, target_h), (0, 0, 0, 0))

    for y in range(0, target_h, src_h):
        for x in range(0, target_w, src_w):
            paste_w = min(src_w, target_w - x)
            paste_h = min(src_h, target_h - y)

            if paste_w < src_w or paste_h < src_h:
                result.paste(source.crop((0, 0, paste_w, paste_h)), (x, y))
            else:
                result.paste(source, (x, y))

    return result


def legacy_tile(image_a: Image.Image, image_b: Image.Image) -> Image.Image:
    """
    Reproduce the historical non-rescaled sizing of composite textures.

    If B is smaller than A in either dimension, B is replaced by an A-sized
    canvas onto which copies of A are drawn. The repeat counts use integer
    division of the two sizes, so a B narrower than A yields a fully
    transparent canvas. Otherwise B is returned unchanged.
    """
    image_a = to_rgba(image_a)
    image_b = to_rgba(image_b)
    image_w, image_h = image_a.size

    if image_b.height >= image_h and image_b.width >= image_w:
        return image_b

    logger.warning("Using legacy composite tiling; output does not contain texture B")

    tiled = Image.new('RGBA', (image_w, image_h), (0, 0, 0, 0))
    for repeat_x in range(image_b.width // image_w):
        for repeat_y in range(image_h // image_b.height):
            tiled.paste(image_a, (image_w * repeat_x, image_h * repeat_y))
    return tiled
