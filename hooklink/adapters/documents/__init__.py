"""Document source adapters."""

from .filesystem import FileDocumentSource

__all__ = ["FileDocumentSource"]
