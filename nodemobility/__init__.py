"""Mobility models, position allocators and geographic coordinate conversions."""

__version__ = "0.1.0"