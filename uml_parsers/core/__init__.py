"""Core parser framework for UML exports."""

from .base_parser import XmiParser, derive_cardinality
from .base_strategy import (
    BaseFormatStrategy,
    ElementKind,
    RawAssociation,
    RawAssociationEnd,
    RawAttribute,
    RawClass,
    RawEnum,
    RawType,
    ScanState,
)
from .config import ParserConfig
from .database_types import DatabaseTypes, get_database_types
from .exceptions import (
    ErrorKind,
    ModelSealedError,
    NullPointerError,
    ReservedNameError,
    UmlParserError,
    UnsupportedFormatError,
    WrongFieldError,
    WrongTypeError,
)
from .models import (
    Cardinality,
    ParsedData,
    UmlAssociation,
    UmlClass,
    UmlEnum,
    UmlField,
    UmlType,
)
from .registry import ParserRegistry, create_parser

__all__ = [
    "XmiParser",
    "derive_cardinality",
    "BaseFormatStrategy",
    "ElementKind",
    "RawAssociation",
    "RawAssociationEnd",
    "RawAttribute",
    "RawClass",
    "RawEnum",
    "RawType",
    "ScanState",
    "ParserConfig",
    "DatabaseTypes",
    "get_database_types",
    "ErrorKind",
    "ModelSealedError",
    "NullPointerError",
    "ReservedNameError",
    "UmlParserError",
    "UnsupportedFormatError",
    "WrongFieldError",
    "WrongTypeError",
    "Cardinality",
    "ParsedData",
    "UmlAssociation",
    "UmlClass",
    "UmlEnum",
    "UmlField",
    "UmlType",
    "ParserRegistry",
    "create_parser",
]
