"""External adapters for hooklink.

This package contains all external dependencies (the Coralogix API, the
filesystem, the terminal) and provides implementations of the core port
interfaces.

Adapter Organization:

- platform/: Observability platform management APIs (Coralogix)
- documents/: Sources of webhook and alert definition documents
- notification/: Progress reporting to the operator (stdout)
- cli/: Command-line parser and command handlers
"""
