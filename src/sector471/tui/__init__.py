"""Textual player for Sector 471."""
