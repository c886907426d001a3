"""Texture descriptor schema definitions."""
from .texture import (
    TextureDescriptor,
    Resolution,
    Wrap,
    load_descriptor,
)

__all__ = [
    "TextureDescriptor",
    "Resolution",
    "Wrap",
    "load_descriptor",
]
