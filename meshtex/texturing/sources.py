"""
Raster texture sources.

A source pairs a texture descriptor with a way to obtain its raster. Image
decoding and caching belong to the caller: ImageTexture wraps an image that
is already decoded and never stores derived rasters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from meshtex.schema.texture import Resolution, TextureDescriptor
from meshtex.texturing.tiling import resample, to_rgba


class TextureSource(ABC):
    """Something that can be drawn as an RGBA raster."""

    descriptor: TextureDescriptor

    @abstractmethod
    def get_image(self, resolution: Optional[Resolution] = None) -> Image.Image:
        """
        Produce a fresh RGBA raster.

        Args:
            resolution: Requested size. If None, the natural size is used.
        """

    def tex_coords(self, vertices):
        """Texture coordinates for vertices using this texture's descriptor."""
        return self.descriptor.tex_coords(vertices)


@dataclass(frozen=True, eq=False, repr=False)
class ImageTexture(TextureSource):
    """A texture backed by a decoded Pillow image."""
    descriptor: TextureDescriptor
    image: Image.Image
    name: Optional[str] = None

    def get_image(self, resolution: Optional[Resolution] = None) -> Image.Image:
        if resolution is None:
            return to_rgba(self.image)
        return resample(self.image, resolution)

    def __repr__(self) -> str:
        width, height = self.image.size
        label = self.name or "image"
        return f"ImageTexture [{label}, {width}x{height}]"


@dataclass(frozen=True, eq=False, repr=False)
class BlankTexture(TextureSource):
    """Fully transparent placeholder texture (1x1 pixel unless asked otherwise)."""
    descriptor: TextureDescriptor = field(
        default_factory=lambda: TextureDescriptor(width=1.0, height=1.0)
    )

    def get_image(self, resolution: Optional[Resolution] = None) -> Image.Image:
        size = resolution.as_tuple() if resolution is not None else (1, 1)
        return Image.new('RGBA', size, (0, 0, 0, 0))

    def __repr__(self) -> str:
        return "BlankTexture"
