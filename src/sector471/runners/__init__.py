"""Headless runners for Sector 471."""
