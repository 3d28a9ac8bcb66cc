"""
UML Parsers Library - Pluggable parsers for UML class-diagram exports.

This library turns XMI exports of various UML modeling tools (UML
Designer, Modelio, ...) into one validated intermediate model of types,
enumerations, classes, fields and associations.
"""

from .core import (
    XmiParser,
    BaseFormatStrategy,
    ParserRegistry,
    create_parser,
    ParserConfig,
    DatabaseTypes,
    get_database_types,
    ParsedData,
    UmlType,
    UmlEnum,
    UmlClass,
    UmlField,
    UmlAssociation,
    Cardinality,
    ErrorKind,
    UmlParserError,
    NullPointerError,
    WrongTypeError,
    WrongFieldError,
    ReservedNameError,
    UnsupportedFormatError,
    ModelSealedError,
)

# Import and register format strategies
from .modelio import ModelioStrategy
from .umldesigner import UmlDesignerStrategy

# Modelio first: its exports also match the UML Designer dialect
ParserRegistry.register("modelio", ModelioStrategy)
ParserRegistry.register("umldesigner", UmlDesignerStrategy)

__version__ = "0.1.0"

__all__ = [
    "XmiParser",
    "BaseFormatStrategy",
    "ParserRegistry",
    "create_parser",
    "ParserConfig",
    "DatabaseTypes",
    "get_database_types",
    "ParsedData",
    "UmlType",
    "UmlEnum",
    "UmlClass",
    "UmlField",
    "UmlAssociation",
    "Cardinality",
    "ErrorKind",
    "UmlParserError",
    "NullPointerError",
    "WrongTypeError",
    "WrongFieldError",
    "ReservedNameError",
    "UnsupportedFormatError",
    "ModelSealedError",
    "ModelioStrategy",
    "UmlDesignerStrategy",
]
