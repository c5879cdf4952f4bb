# imgedit/imaging/filters.py
# Purpose: Pixel-level building blocks for the editor.
# - Top-left square crop geometry + resample into a size x size canvas
# - Grayscale followed by a GD-scale contrast boost
# - Alpha band carried through untouched

from __future__ import annotations

from typing import List, Tuple

from PIL import Image

ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


def square_box(width: int, height: int) -> Tuple[int, int, int, int]:
    """
    Source region for a thumbnail: a square of the smaller side, anchored at
    the top-left corner (0, 0). Not centered.
    """
    side = min(width, height)
    return (0, 0, side, side)


def crop_to_square(image: Image.Image, size: int,
                   resample: Image.Resampling = Image.Resampling.BILINEAR) -> Image.Image:
    return image.resize((size, size), resample=resample, box=square_box(*image.size))


def contrast_lut(level: int) -> List[int]:
    """
    Lookup table matching the GD contrast filter. Level L scales each value's
    distance from mid-gray by ((100 - L) / 100) ** 2, so 202 is a mild boost
    (x1.0404) and 100 collapses everything to gray. Truncated like GD.
    """
    factor = ((100.0 - level) / 100.0) ** 2
    lut = []
    for v in range(256):
        x = ((v / 255.0 - 0.5) * factor + 0.5) * 255.0
        lut.append(int(max(0.0, min(255.0, x))))
    return lut


def has_alpha(image: Image.Image) -> bool:
    return image.mode in ALPHA_MODES or "transparency" in image.info


def to_8bit(image: Image.Image) -> Image.Image:
    """
    Integer-mode images (16-bit grayscale PNGs open as "I;16") scaled down to
    8-bit "L". Pillow's own I -> L conversion clips everything above 255.
    Other modes are returned unchanged.
    """
    if not image.mode.startswith("I"):
        return image
    wide = image if image.mode == "I" else image.convert("I")
    try:
        scaled = wide.point(lambda v: v * (1 / 256))
    finally:
        if wide is not image:
            wide.close()
    try:
        return scaled.convert("L")
    finally:
        scaled.close()


def to_rgba(image: Image.Image) -> Image.Image:
    # always a new image, safe to close independently of the source
    deep = to_8bit(image)
    try:
        return deep.convert("RGBA")
    finally:
        if deep is not image:
            deep.close()


def grayscale(image: Image.Image, contrast_level: int) -> Image.Image:
    """
    Equal-channel grayscale with contrast applied to luminance. Returns RGBA
    when the source carries any transparency, RGB otherwise.
    """
    lut = contrast_lut(contrast_level)
    src = to_8bit(image)
    try:
        if has_alpha(src):
            rgba = src.convert("RGBA")
            try:
                alpha = rgba.getchannel("A")
                lum = rgba.convert("L").point(lut)
                return Image.merge("RGBA", (lum, lum, lum, alpha))
            finally:
                rgba.close()

        rgb = src if src.mode == "RGB" else src.convert("RGB")
        try:
            lum = rgb.convert("L").point(lut)
            return Image.merge("RGB", (lum, lum, lum))
        finally:
            if rgb is not src:
                rgb.close()
    finally:
        if src is not image:
            src.close()
