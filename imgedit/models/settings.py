from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping
from PIL import Image

@dataclass(frozen=True)
class EditSettings:
    thumbnail_size: int = 250
    jpeg_quality: int = 75           # 0-100, worst to best
    png_compression: int = 0         # 0-9, none to max
    contrast_level: int = 202        # GD contrast scale
    grayscale_jpeg_quality: int = 75
    grayscale_png_compression: int = 6
    resample: Image.Resampling = Image.Resampling.BILINEAR

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EditSettings":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in mapping.items() if k in known}
        if "resample" in values and isinstance(values["resample"], str):
            values["resample"] = Image.Resampling[values["resample"].upper()]
        return cls(**values)
