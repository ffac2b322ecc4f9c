"""Loan payment math, scenario comparison and display helpers.

This module also exposes the package version for runtime display."""

from core.version import __version__

__all__ = ["__version__"]
