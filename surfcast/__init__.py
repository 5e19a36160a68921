"""Surf condition assessment service for Taiwan surf spots."""

__version__ = "1.0.0"
