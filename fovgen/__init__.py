"""Aladin field-of-view footprint generator."""

__version__ = "0.1.0"
