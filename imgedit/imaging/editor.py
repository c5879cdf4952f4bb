# imgedit/imaging/editor.py
# Purpose: Square thumbnail crops and grayscale copies of JPEG/PNG files.
# - Format classified from the filename extension (jpg/jpeg/png)
# - Output always in the same format as the input
# - Failures come back as a falsy EditResult carrying an error kind

from __future__ import annotations

import logging
import os
from contextlib import closing, contextmanager
from pathlib import Path
from typing import FrozenSet, Iterator, Optional, Tuple, Union

from PIL import Image

from imgedit.imaging.errors import ImageEditError
from imgedit.imaging.filters import crop_to_square, grayscale, to_rgba
from imgedit.imaging.formats import (
    SUPPORTED_FORMATS,
    classify_extension,
    file_extension,
    is_supported,
)
from imgedit.imaging.presets import default_quality_for, validate_quality, validate_size
from imgedit.models.enums import EditErrorKind, ImageFormat
from imgedit.models.result import EditResult
from imgedit.models.settings import EditSettings
from imgedit.utils.logging_utils import log_section

log = logging.getLogger("imgedit.editor")

PathLike = Union[str, os.PathLike]


@contextmanager
def _codec_errors(action: str) -> Iterator[None]:
    """Turn Pillow decode/encode errors into a CODEC_FAILURE."""
    try:
        yield
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageEditError(EditErrorKind.CODEC_FAILURE, f"{action} failed: {e}") from e


class ImageEditor:
    """
    Wraps one source image path. Construct per image, call crop() and/or
    to_grayscale() any number of times, then discard.

    Nothing is raised for an unsupported extension, a missing source or a
    codec error; check the returned EditResult (it is falsy on failure).
    """

    SUPPORTED_FORMATS: FrozenSet[str] = SUPPORTED_FORMATS

    def __init__(self, source: PathLike, settings: Optional[EditSettings] = None):
        self.source = os.fspath(source)
        self.settings = settings or EditSettings()

    def __repr__(self) -> str:
        return f"ImageEditor({self.source!r})"

    def get_supported_formats(self) -> FrozenSet[str]:
        return self.SUPPORTED_FORMATS

    def get_file_extension(self) -> Optional[str]:
        return file_extension(self.source)

    @property
    def image_format(self) -> ImageFormat:
        return classify_extension(self.get_file_extension())

    # ---------------------------- public API ----------------------------
    def crop(self, destination: PathLike, size: Optional[int] = None,
             quality: Optional[int] = None) -> EditResult:
        """
        Top-left square crop of the smaller side, resampled to size x size.

        quality: 0-100 (worst to best) for JPEG; 0-9 compression level
        (best to worst) for PNG. Defaults come from the editor settings.
        """
        dest = os.fspath(destination)
        with log_section(f"CROP {self.source} -> {dest}", log):
            try:
                fmt = self._require_supported()
                size = validate_size(self.settings.thumbnail_size if size is None else size)
                if quality is None:
                    quality = default_quality_for(fmt, self.settings)
                quality = validate_quality(fmt, quality)
                self._require_source()

                if fmt is ImageFormat.JPEG:
                    out_size = self._crop_jpeg(dest, size, quality)
                elif fmt is ImageFormat.PNG:
                    out_size = self._crop_png(dest, size, quality)
                else:
                    raise ImageEditError(EditErrorKind.UNSUPPORTED_FORMAT,
                                         f"No crop path for format: {fmt.value}")
            except ImageEditError as e:
                return self._failed("Crop", e, dest)

        log.info("Cropped %s -> %s (%dx%d, quality=%d)", self.source, dest, out_size[0], out_size[1], quality)
        return EditResult.success(dest)

    def to_grayscale(self, destination: PathLike) -> EditResult:
        """Grayscale + contrast boost, written in the source's own format."""
        dest = os.fspath(destination)
        with log_section(f"GRAYSCALE {self.source} -> {dest}", log):
            try:
                fmt = self._require_supported()
                self._require_source()

                if fmt is ImageFormat.JPEG:
                    self._grayscale_jpeg(dest)
                elif fmt is ImageFormat.PNG:
                    self._grayscale_png(dest)
                else:
                    raise ImageEditError(EditErrorKind.UNSUPPORTED_FORMAT,
                                         f"No grayscale path for format: {fmt.value}")
            except ImageEditError as e:
                return self._failed("Grayscale", e, dest)

        log.info("Grayscale %s -> %s", self.source, dest)
        return EditResult.success(dest)

    black_and_white = to_grayscale

    # ---------------------------- checks ----------------------------
    def _require_supported(self) -> ImageFormat:
        ext = self.get_file_extension()
        if not is_supported(ext):
            raise ImageEditError(
                EditErrorKind.UNSUPPORTED_FORMAT,
                f"Unsupported file type {ext!r} for {self.source} "
                f"(expected one of: {', '.join(sorted(self.SUPPORTED_FORMATS))})",
            )
        return classify_extension(ext)

    def _require_source(self) -> None:
        if not Path(self.source).is_file():
            raise ImageEditError(EditErrorKind.SOURCE_NOT_FOUND, f"Input image not found: {self.source}")

    def _failed(self, op: str, err: ImageEditError, dest: str) -> EditResult:
        log.warning("%s failed [%s]: %s", op, err.kind.value, err.message)
        return EditResult.failure(err.kind, err.message, dest)

    # ---------------------------- format paths ----------------------------
    def _crop_jpeg(self, dest: str, size: int, quality: int) -> Tuple[int, int]:
        with _codec_errors(f"JPEG crop of {self.source}"):
            with Image.open(self.source, formats=["JPEG"]) as im, \
                    closing(im.convert("RGB")) as rgb, \
                    closing(crop_to_square(rgb, size, self.settings.resample)) as thumb:
                thumb.save(dest, format="JPEG", quality=quality)
                return thumb.size

    def _crop_png(self, dest: str, size: int, compression: int) -> Tuple[int, int]:
        # RGBA canvas: alpha is resampled along with colour, never flattened.
        # 16-bit grayscale is scaled to 8 bits first.
        with _codec_errors(f"PNG crop of {self.source}"):
            with Image.open(self.source, formats=["PNG"]) as im, \
                    closing(to_rgba(im)) as rgba, \
                    closing(crop_to_square(rgba, size, self.settings.resample)) as thumb:
                thumb.save(dest, format="PNG", compress_level=compression)
                return thumb.size

    def _grayscale_jpeg(self, dest: str) -> None:
        with _codec_errors(f"JPEG grayscale of {self.source}"):
            with Image.open(self.source, formats=["JPEG"]) as im, \
                    closing(grayscale(im, self.settings.contrast_level)) as gray:
                gray.save(dest, format="JPEG", quality=self.settings.grayscale_jpeg_quality)

    def _grayscale_png(self, dest: str) -> None:
        with _codec_errors(f"PNG grayscale of {self.source}"):
            with Image.open(self.source, formats=["PNG"]) as im, \
                    closing(grayscale(im, self.settings.contrast_level)) as gray:
                gray.save(dest, format="PNG", compress_level=self.settings.grayscale_png_compression)
