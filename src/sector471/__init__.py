"""Sector 471 scene sequencing engine."""

__version__ = "0.1.0"
