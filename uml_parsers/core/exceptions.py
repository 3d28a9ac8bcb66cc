"""
Exceptions raised while parsing UML exports.

Every parse failure is fatal: the first error aborts the whole parse and
the partially built model is thrown away.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of parse error kinds."""
    NULL_POINTER = "NullPointer"
    WRONG_TYPE = "WrongType"
    WRONG_FIELD = "WrongField"
    RESERVED_NAME = "ReservedName"
    UNSUPPORTED_FORMAT = "UnsupportedFormat"


class UmlParserError(Exception):
    """Base class for all parse errors."""

    kind: ErrorKind

    def __init__(self, message: str, name: Optional[str] = None):
        """
        Args:
            message: Message meant to be shown verbatim to the end user
            name: Name of the offending element, when it has one
        """
        self.message = message
        self.name = name
        super().__init__(message)


class NullPointerError(UmlParserError):
    """A class, enum, literal or attribute has no name."""
    kind = ErrorKind.NULL_POINTER


class WrongTypeError(UmlParserError):
    """A primitive type is not supported by the selected database."""
    kind = ErrorKind.WRONG_TYPE


class WrongFieldError(UmlParserError):
    """A field has no resolvable type."""
    kind = ErrorKind.WRONG_FIELD


class ReservedNameError(UmlParserError):
    """A class, table or field name is a reserved word."""
    kind = ErrorKind.RESERVED_NAME


class UnsupportedFormatError(UmlParserError):
    """No parser recognizes the document, or it holds unsupported constructs."""
    kind = ErrorKind.UNSUPPORTED_FORMAT


class ModelSealedError(RuntimeError):
    """Raised when writing to a ParsedData that was already returned."""
