"""UML Designer parser module."""

from .strategy import UmlDesignerStrategy

__all__ = [
    "UmlDesignerStrategy",
]
