"""An incoming file payload attached to a product creation request."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:

    filename: str
    content: bytes

    @property
    def is_empty(self) -> bool:
        return len(self.content) == 0
