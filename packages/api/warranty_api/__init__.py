# This project was developed with assistance from AI tools.
"""Roof warranty management API."""

__version__ = "0.1.0"
