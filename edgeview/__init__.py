"""Edgeview: live diagrams from a toggleable list of directed relationships."""

__version__ = "0.1.0"
