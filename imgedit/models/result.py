from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from .enums import EditErrorKind

@dataclass(frozen=True)
class EditResult:
    destination: str
    error: Optional[EditErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, destination: str) -> "EditResult":
        return cls(destination=destination)

    @classmethod
    def failure(cls, kind: EditErrorKind, message: str, destination: str) -> "EditResult":
        return cls(destination=destination, error=kind, message=message)
