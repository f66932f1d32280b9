"""Typed Apollo client SDK generator for GraphQL operation documents."""

__version__ = "0.1.0"
