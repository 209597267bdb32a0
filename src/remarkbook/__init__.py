"""Remarkbook: multi-tenant remarks and profile API."""

__version__ = "0.1.0"
