"""Blade Arena battle engine and terminal front-end."""
__version__ = "0.5.0"
