from __future__ import annotations
from typing import Dict, Tuple
from imgedit.imaging.errors import ImageEditError
from imgedit.models.enums import EditErrorKind, ImageFormat
from imgedit.models.settings import EditSettings

# JPEG: quality, worst to best. PNG: zlib compression level, best to worst.
QUALITY_RANGE: Dict[ImageFormat, Tuple[int, int]] = {
    ImageFormat.JPEG: (0, 100),
    ImageFormat.PNG: (0, 9),
}

def default_quality_for(fmt: ImageFormat, settings: EditSettings) -> int:
    if fmt is ImageFormat.JPEG:
        return settings.jpeg_quality
    if fmt is ImageFormat.PNG:
        return settings.png_compression
    raise ValueError(f"No quality preset for format: {fmt.value}")

def validate_quality(fmt: ImageFormat, value: int) -> int:
    lo, hi = QUALITY_RANGE[fmt]
    if isinstance(value, bool) or not isinstance(value, int) or not lo <= value <= hi:
        raise ImageEditError(
            EditErrorKind.INVALID_OPTION,
            f"{fmt.value} quality must be an integer in {lo}-{hi}, got {value!r}",
        )
    return value

def validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ImageEditError(
            EditErrorKind.INVALID_OPTION,
            f"Thumbnail size must be a positive integer, got {size!r}",
        )
    return size
