"""
Tests for the public texturing and texcoords modules.
"""
import pytest
from PIL import Image

from meshtex.texturing import ImageTexture, tile_to_size
from meshtex.schema import Resolution, TextureDescriptor


def test_imports():
    """Verify that the public API can be imported correctly."""
    from meshtex import (
        TexCoordFunction,
        TextureDescriptor,
        CompositeTexture,
        CompositeMode,
        stack_of,
        InvalidInputShapeError,
        UnsupportedModeError,
    )
    assert TexCoordFunction is not None
    assert TextureDescriptor is not None
    assert CompositeTexture is not None
    assert CompositeMode is not None
    assert stack_of is not None
    assert issubclass(InvalidInputShapeError, ValueError)
    assert not issubclass(UnsupportedModeError, ValueError)


def test_image_texture_returns_rgba_copy():
    """Test that an image texture never hands out its own image."""
    source = Image.new('RGB', (2, 2), (10, 20, 30))
    texture = ImageTexture(descriptor=TextureDescriptor(width=1, height=1), image=source)

    image = texture.get_image()
    assert image.mode == 'RGBA'
    assert image is not source
    assert image.getpixel((0, 0)) == (10, 20, 30, 255)


def test_image_texture_resamples(monkeypatch):
    """Test drawing an image texture at a requested resolution."""
    monkeypatch.setenv("MESHTEX_RESAMPLE", "nearest")
    texture = ImageTexture(
        descriptor=TextureDescriptor(width=1, height=1),
        image=Image.new('RGBA', (2, 2), (1, 2, 3, 4)),
    )
    image = texture.get_image(Resolution(width=6, height=3))
    assert image.size == (6, 3)
    assert image.getpixel((5, 2)) == (1, 2, 3, 4)
    assert texture.image.size == (2, 2)


def test_tile_texture_to_size():
    """Test that tiling keeps the source's pixel size."""
    source = Image.new('RGBA', (2, 1), (0, 0, 0, 0))
    source.putpixel((0, 0), (255, 255, 255, 255))
    tiled = tile_to_size(source, 5, 2)
    assert tiled.size == (5, 2)
    assert [tiled.getpixel((x, 1))[0] for x in range(5)] == [255, 0, 255, 0, 255]


def test_tex_coords_through_texture():
    """Test that a texture source exposes its descriptor's coordinate function."""
    texture = ImageTexture(
        descriptor=TextureDescriptor(width=2, height=2, coord_function="global_x_y"),
        image=Image.new('RGBA', (1, 1)),
    )
    assert texture.tex_coords([(2, 4, 6)]) == [(1.0, 2.0)]
