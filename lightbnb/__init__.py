"""LightBnB data-access layer: users, reservations, and property search."""

__version__ = "0.1.0"
