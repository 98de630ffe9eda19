"""Abstract file storage consumed by the product service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileStorage(ABC):

    @abstractmethod
    def store(self, content: bytes, filename: str) -> str:
        """Persist the bytes and return an opaque reference (URL or path).

        Implementations raise StorageError on any write failure.
        """
