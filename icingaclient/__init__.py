"""Icinga 2 REST API client (client), in-memory mock (mock) and data types (models)."""

__version__ = "0.1.0"
__all__ = ["client", "mock", "models"]