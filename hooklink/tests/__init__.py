"""Test suite for hooklink.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - HTTP behavior tested against httpx.MockTransport
   - Validates adapter behavior and error translation

3. fakes/: Port implementations for testing
   - In-memory implementations of PlatformPort, DocumentSourcePort, etc.
   - Used by core unit tests
"""
