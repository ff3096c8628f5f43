"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakePlatformPort: Canned platform responses, captured request bodies
- FakeDocumentSource: In-memory documents keyed by path
- FakeProgressPort: Captured progress reports for assertion
"""

from .documents import FakeDocumentSource
from .platform import FakePlatformPort
from .progress import FakeProgressPort

__all__ = [
    "FakeDocumentSource",
    "FakePlatformPort",
    "FakeProgressPort",
]
