"""Caseworker task API with bank holiday validation."""

__version__ = "1.0.0"
