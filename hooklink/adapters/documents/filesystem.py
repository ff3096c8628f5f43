"""Filesystem document source.

Implements DocumentSourcePort by reading documents from local paths.
Contents are returned as raw bytes; no parsing or validation happens here.
"""

import asyncio
import logging
from pathlib import Path

from hooklink.core.errors import DocumentReadError
from hooklink.core.ports import DocumentSourcePort

logger = logging.getLogger(__name__)


class FileDocumentSource(DocumentSourcePort):
    """Reads JSON documents from the local filesystem."""

    def __init__(self, base_dir: str | None = None):
        """Initialize the document source.

        Args:
            base_dir: Directory relative paths are resolved against.
                Defaults to the current working directory.
        """
        self.base_dir = Path(base_dir) if base_dir else None

    def _resolve(self, path: str) -> Path:
        resolved = Path(path).expanduser()
        if self.base_dir is not None and not resolved.is_absolute():
            resolved = self.base_dir / resolved
        return resolved

    async def read(self, path: str) -> bytes:
        """Return the raw bytes of the file at ``path``."""
        resolved = self._resolve(path)
        try:
            content = await asyncio.to_thread(resolved.read_bytes)
        except OSError as e:
            logger.debug(f"Failed to read document {resolved}: {e}")
            raise DocumentReadError(path, e.strerror or str(e)) from e

        logger.debug(f"Read {len(content)} bytes from {resolved}")
        return content
