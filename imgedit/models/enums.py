from enum import Enum

class ImageFormat(Enum):
    JPEG = "JPEG"
    PNG = "PNG"
    UNSUPPORTED = "Unsupported"

class EditErrorKind(Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"  # missing or unknown extension
    SOURCE_NOT_FOUND = "source_not_found"
    INVALID_OPTION = "invalid_option"          # size/quality out of range
    CODEC_FAILURE = "codec_failure"            # Pillow decode/encode error
