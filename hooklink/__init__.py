"""hooklink: provision Coralogix outgoing webhooks and linked alert definitions."""

__version__ = "0.1.0"
