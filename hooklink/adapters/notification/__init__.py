"""Progress reporting adapters."""

from .stdout import StdoutProgressAdapter

__all__ = ["StdoutProgressAdapter"]
