"""Command-line interface adapters.

Provides the ``create`` command:
- Create an outgoing webhook from a JSON definition
- Optionally create an alert definition linked to that webhook
"""
