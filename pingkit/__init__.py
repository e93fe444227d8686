"""Transaction check and webhook integration models, and GraphQL-based organization user management."""

__version__ = "0.1.0"