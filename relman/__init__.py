"""Release-packaging command utilities."""

__version__ = "0.9.0"
