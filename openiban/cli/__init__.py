"""Command-line interface for OpenIBAN."""

from .main import app

__all__ = ["app"]
