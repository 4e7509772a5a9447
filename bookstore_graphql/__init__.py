"""In-memory authors and books exposed over GraphQL."""

__version__ = "0.1.0"
