"""
Tests for texture descriptor schema and configuration
"""
import json

import pytest
from PIL import Image
from pydantic import ValidationError

from meshtex import config
from meshtex.schema import TextureDescriptor, Resolution, Wrap, load_descriptor
from meshtex.texcoords import TexCoordFunction


class TestTextureDescriptor:
    """Test descriptor validation"""

    def test_defaults(self):
        """Test default wrap, function and entity sizes"""
        tex = TextureDescriptor(width=2, height=1)
        assert tex.wrap == Wrap.REPEAT
        assert tex.coord_function == TexCoordFunction.GLOBAL_X_Z
        assert tex.width_per_entity is None
        assert tex.height_per_entity is None

    def test_sizes_must_be_positive(self):
        """Test that zero or negative sizes are rejected"""
        with pytest.raises(ValidationError):
            TextureDescriptor(width=0, height=1)
        with pytest.raises(ValidationError):
            TextureDescriptor(width=1, height=1, width_per_entity=-0.5)

    def test_immutable(self):
        """Test that descriptors can't be changed after construction"""
        tex = TextureDescriptor(width=2, height=1)
        with pytest.raises(ValidationError):
            tex.width = 3

    def test_unknown_fields_rejected(self):
        """Test that typos in material documents are caught"""
        with pytest.raises(ValidationError):
            TextureDescriptor.from_dict({"width": 1, "height": 1, "widht_per_entity": 1})

    def test_from_dict_parses_names(self):
        """Test that function and wrap names are case-insensitive"""
        tex = TextureDescriptor.from_dict({
            "width": 2,
            "height": 1,
            "wrap": "CLAMP",
            "coord_function": "STRIP_WALL",
        })
        assert tex.wrap == Wrap.CLAMP
        assert tex.coord_function is TexCoordFunction.STRIP_WALL

    def test_unknown_function_rejected(self):
        """Test that unknown coordinate functions fail validation"""
        with pytest.raises(ValidationError):
            TextureDescriptor(width=1, height=1, coord_function="cylindrical")

    def test_load_descriptor(self, tmp_path):
        """Test loading a material file"""
        path = tmp_path / "planks.json"
        path.write_text(json.dumps({
            "width": 2.0,
            "height": 1.0,
            "width_per_entity": 0.5,
            "coord_function": "strip_wall",
        }))
        tex = load_descriptor(str(path))
        assert tex.width_per_entity == 0.5
        assert tex.coord_function is TexCoordFunction.STRIP_WALL

    def test_load_missing_descriptor(self, tmp_path):
        """Test that a missing material file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            load_descriptor(str(tmp_path / "missing.json"))


class TestResolution:
    """Test raster resolutions"""

    def test_of_image(self):
        assert Resolution.of(Image.new('RGBA', (3, 5))) == Resolution(width=3, height=5)

    def test_max(self):
        """Test element-wise maximum"""
        res = Resolution(width=4, height=1).max(Resolution(width=2, height=8))
        assert res.as_tuple() == (4, 8)

    def test_positive(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=1)


class TestConfig:
    """Test resampling configuration"""

    def test_named_filter(self):
        assert config.get_resample_filter("nearest") == Image.NEAREST
        assert config.get_resample_filter("LANCZOS") == Image.LANCZOS

    def test_environment_override(self, monkeypatch):
        """Test that MESHTEX_RESAMPLE selects the default filter"""
        monkeypatch.setenv("MESHTEX_RESAMPLE", "bicubic")
        assert config.get_resample_filter() == Image.BICUBIC

    def test_default_filter(self, monkeypatch):
        monkeypatch.delenv("MESHTEX_RESAMPLE", raising=False)
        assert config.get_resample_filter() == Image.BILINEAR

    def test_unknown_filter(self):
        with pytest.raises(ValueError):
            config.get_resample_filter("box-blur")
