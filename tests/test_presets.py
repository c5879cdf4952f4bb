import pytest
from PIL import Image

from imgedit.imaging.errors import ImageEditError
from imgedit.imaging.presets import default_quality_for, validate_quality, validate_size
from imgedit.models.enums import EditErrorKind, ImageFormat
from imgedit.models.settings import EditSettings

def test_default_quality():
    s = EditSettings()
    assert default_quality_for(ImageFormat.JPEG, s) == 75
    assert default_quality_for(ImageFormat.PNG, s) == 0
    assert s.thumbnail_size == 250
    assert s.contrast_level == 202

def test_default_quality_unsupported():
    with pytest.raises(ValueError):
        default_quality_for(ImageFormat.UNSUPPORTED, EditSettings())

def test_quality_ranges():
    assert validate_quality(ImageFormat.JPEG, 100) == 100
    assert validate_quality(ImageFormat.PNG, 9) == 9
    with pytest.raises(ImageEditError) as exc:
        validate_quality(ImageFormat.PNG, 10)
    assert exc.value.kind is EditErrorKind.INVALID_OPTION
    with pytest.raises(ImageEditError):
        validate_quality(ImageFormat.JPEG, -1)

def test_size_must_be_positive():
    assert validate_size(1) == 1
    for bad in (0, -5, 2.5, True):
        with pytest.raises(ImageEditError):
            validate_size(bad)

def test_settings_from_mapping():
    s = EditSettings.from_mapping({"thumbnail_size": 128, "resample": "lanczos", "unknown": 1})
    assert s.thumbnail_size == 128
    assert s.resample is Image.Resampling.LANCZOS
    assert s.jpeg_quality == 75
