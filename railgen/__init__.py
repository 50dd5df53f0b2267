"""Generate Go test rails from OpenAPI operation IDs."""

__version__ = "0.1.0"
