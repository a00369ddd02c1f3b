"""GraphQL email syntax validation service."""

__version__ = "0.1.0"
