"""Cylinder calculator: derived properties of a cylinder and its base circle."""

__version__ = "0.1.0"
