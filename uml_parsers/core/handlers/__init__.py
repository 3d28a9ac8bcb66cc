"""Document handlers for UML parser library."""

from .xmi_handler import XmiHandler

__all__ = [
    "XmiHandler",
]
