"""Seed a location registry from a CSV of administrative locations."""

__version__ = "0.1.0"
