from __future__ import annotations
from imgedit.models.enums import EditErrorKind


class ImageEditError(RuntimeError):
    """Raised inside the editor; converted to a failed EditResult at the public boundary."""

    def __init__(self, kind: EditErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
