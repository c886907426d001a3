"""
Texture descriptor schema.

A descriptor is the immutable metadata of a texture, created once when a
material is loaded and shared by every surface that uses it.

UNITS:
- width/height: world units (meters) covered by one repeat of the texture
- width_per_entity/height_per_entity: world size of one discrete element
  shown by the texture (a plank, a brick row). When set, coordinate functions
  that support it stretch the tile so a whole number of elements fits.

MATERIAL DOCUMENTS:
Descriptors can be loaded from JSON, e.g.

    {
        "width": 2.0,
        "height": 1.0,
        "width_per_entity": 0.5,
        "wrap": "repeat",
        "coord_function": "STRIP_WALL"
    }

Function names are matched case-insensitively.
"""

from __future__ import annotations

import json
import os
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meshtex.texcoords.functions import TexCoordFunction


class Wrap(str, Enum):
    """How a renderer should treat coordinates outside [0, 1]."""
    REPEAT = "repeat"
    CLAMP = "clamp"


class Resolution(BaseModel):
    """Raster size in pixels."""
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1, description="Width in pixels.")
    height: int = Field(..., ge=1, description="Height in pixels.")

    @classmethod
    def of(cls, image) -> Resolution:
        """Resolution of a Pillow image."""
        width, height = image.size
        return cls(width=width, height=height)

    def max(self, other: Resolution) -> Resolution:
        """Element-wise maximum of two resolutions."""
        return Resolution(width=max(self.width, other.width), height=max(self.height, other.height))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


class TextureDescriptor(BaseModel):
    """Immutable tiling metadata of a texture."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    width: float = Field(..., gt=0, description="World width of one texture repeat.")
    height: float = Field(..., gt=0, description="World height of one texture repeat.")
    width_per_entity: Optional[float] = Field(None, gt=0, description="World width of one discrete element.")
    height_per_entity: Optional[float] = Field(None, gt=0, description="World height of one discrete element.")
    wrap: Wrap = Field(Wrap.REPEAT, description="Wrap behavior outside [0, 1].")
    coord_function: TexCoordFunction = Field(
        TexCoordFunction.GLOBAL_X_Z,
        description="Texture coordinate function used for surfaces with this texture."
    )

    @field_validator('coord_function', mode='before')
    @classmethod
    def parse_coord_function(cls, v):
        if isinstance(v, str) and not isinstance(v, TexCoordFunction):
            return TexCoordFunction.from_name(v)
        return v

    @field_validator('wrap', mode='before')
    @classmethod
    def parse_wrap(cls, v):
        if isinstance(v, str) and not isinstance(v, Wrap):
            return v.strip().lower()
        return v

    def tex_coords(self, vertices):
        """Apply this texture's coordinate function to a vertex list."""
        return self.coord_function.apply(vertices, self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TextureDescriptor:
        """Validate a material document."""
        return cls.model_validate(data)


def load_descriptor(path: str) -> TextureDescriptor:
    """
    Load a texture descriptor from a JSON material file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the document is not a valid descriptor
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Material file not found: {path}")
    with open(path, 'r') as f:
        return TextureDescriptor.from_dict(json.load(f))
