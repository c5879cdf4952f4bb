from __future__ import annotations
import os
from typing import FrozenSet, Optional, Union
from imgedit.models.enums import ImageFormat

SUPPORTED_FORMATS: FrozenSet[str] = frozenset({"jpg", "jpeg", "png"})

_EXTENSION_TO_FORMAT = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
}

def file_extension(path: Union[str, os.PathLike]) -> Optional[str]:
    # Splits the whole path string, not just the final component.
    parts = os.fspath(path).split(".")
    if len(parts) > 1:
        return parts[-1]
    return None

def is_supported(ext: Optional[str]) -> bool:
    return ext is not None and ext.lower() in SUPPORTED_FORMATS

def classify_extension(ext: Optional[str]) -> ImageFormat:
    if ext is None:
        return ImageFormat.UNSUPPORTED
    return _EXTENSION_TO_FORMAT.get(ext.lower(), ImageFormat.UNSUPPORTED)

def classify_path(path: Union[str, os.PathLike]) -> ImageFormat:
    return classify_extension(file_extension(path))
