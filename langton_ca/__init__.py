"""Langton's ant simulator with collision-triggered reproduction."""

__version__ = "0.1.0"
