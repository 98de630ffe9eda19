"""Filesystem-backed implementation of FileStorage."""

from __future__ import annotations

import re
import uuid
from pathlib import Path

import structlog

from catalog.domain.exceptions import StorageError
from catalog.domain.storage import FileStorage

logger = structlog.get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class LocalFileStorage(FileStorage):
    """Writes each file into ``directory`` under a unique name.

    The returned reference is ``<base_url>/<stored name>``, the URL a
    file server mounted on ``directory`` would serve it from.
    """

    def __init__(self, directory: Path, base_url: str) -> None:
        self._directory = directory
        self._base_url = base_url.rstrip("/")

    def store(self, content: bytes, filename: str) -> str:
        if not content:
            raise StorageError(f"Failed to store empty file '{filename}'")
        if ".." in filename or "/" in filename or "\\" in filename:
            raise StorageError(
                f"Cannot store file with relative path outside current directory: '{filename}'"
            )

        stored_name = f"{uuid.uuid4().hex}_{self._sanitise(filename)}"
        target = self._directory / stored_name
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            logger.error("storage.write_failed", path=str(target))
            raise StorageError(f"Failed to store file '{filename}': {exc}") from exc

        logger.debug("storage.stored", path=str(target), size=len(content))
        return f"{self._base_url}/{stored_name}"

    @staticmethod
    def _sanitise(filename: str) -> str:
        cleaned = _UNSAFE_CHARS.sub("_", filename.strip())
        return cleaned or "file"
