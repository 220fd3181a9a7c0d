"""Simai chart data model, chart file key-value reading and note judge simulation."""

__version__ = "0.5.0"