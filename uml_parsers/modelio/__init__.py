"""Modelio parser module."""

from .strategy import ModelioStrategy

__all__ = [
    "ModelioStrategy",
]
