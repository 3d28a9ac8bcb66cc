"""
Abstract base class for per-tool format strategies.

A strategy knows how one authoring tool lays out its export: which
elements are types, enums, classes and associations, and where their
names, attributes and multiplicities live. Validation and insertion into
the model are left to XmiParser, so every tool gets the same policy.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
import logging
import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

from .handlers import XmiHandler
from .parser_helper import DEFAULT_TABLE_NAME_DELIMITERS


logger = logging.getLogger(__name__)

UNBOUNDED_VALUES = frozenset({"*", "-1"})


class ElementKind(str, Enum):
    """Structural kinds a top-level element is bucketed into."""
    TYPE = "type"
    ENUM = "enum"
    CLASS = "class"
    ASSOCIATION = "association"
    UNRECOGNIZED = "unrecognized"


class RawType(BaseModel):
    id: str
    name: Optional[str] = None


class RawEnum(BaseModel):
    id: str
    name: Optional[str] = None
    literals: List[Optional[str]] = Field(default_factory=list)


class RawAttribute(BaseModel):
    """An owned attribute as written in the document, not yet validated."""
    id: str
    name: Optional[str] = None
    type_id: Optional[str] = None
    type_href: Optional[str] = None
    comment: Optional[str] = None


class RawClass(BaseModel):
    id: str
    label: Optional[str] = None
    comment: Optional[str] = None
    attributes: List[RawAttribute] = Field(default_factory=list)


class RawAssociationEnd(BaseModel):
    """One end of an association: the class it points to and its role."""
    class_id: Optional[str] = None
    name: Optional[str] = None
    lower: str = "1"
    upper: str = "1"

    @property
    def is_unbounded(self) -> bool:
        return self.upper in UNBOUNDED_VALUES

    @property
    def is_mandatory(self) -> bool:
        return self.lower != "0"


class RawAssociation(BaseModel):
    id: str
    ends: List[RawAssociationEnd] = Field(default_factory=list)
    comment: Optional[str] = None


class ScanState(BaseModel):
    """
    Accumulator threaded through the phases of one parse.

    Holds the classified elements and an id index strategies may use to
    resolve references.
    """

    types: List[Any] = Field(default_factory=list)
    enums: List[Any] = Field(default_factory=list)
    classes: List[Any] = Field(default_factory=list)
    associations: List[Any] = Field(default_factory=list)
    index: Dict[str, Any] = Field(default_factory=dict)
    skipped: int = 0

    def bucket(self, kind: ElementKind, element: Any) -> None:
        """Put an element in the bucket of its kind."""
        if kind == ElementKind.TYPE:
            self.types.append(element)
        elif kind == ElementKind.ENUM:
            self.enums.append(element)
        elif kind == ElementKind.CLASS:
            self.classes.append(element)
        elif kind == ElementKind.ASSOCIATION:
            self.associations.append(element)
        else:
            self.skipped += 1


class BaseFormatStrategy(ABC):
    """
    Abstract base class for the extraction rules of one authoring tool.

    Each tool (UML Designer, Modelio, ...) implements this interface; the
    five-phase pipeline itself lives in XmiParser.
    """

    # Delimiters around the table name in a class label
    default_table_name_delimiters: Tuple[str, str] = DEFAULT_TABLE_NAME_DELIMITERS

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the name of the authoring tool this strategy handles."""
        pass

    @abstractmethod
    def recognizes(self, root: ET.Element) -> bool:
        """
        Check whether a document was exported by this tool.

        Args:
            root: Document root element

        Returns:
            True if this strategy can parse the document
        """
        pass

    @abstractmethod
    def classify(self, model: ET.Element, state: ScanState) -> None:
        """
        Bucket the model's elements by kind into the scan state.

        Args:
            model: The uml:Model element
            state: Accumulator of the current parse
        """
        pass

    @abstractmethod
    def extract_type(self, element: ET.Element) -> RawType:
        pass

    @abstractmethod
    def extract_enum(self, element: ET.Element) -> RawEnum:
        pass

    @abstractmethod
    def extract_class(self, element: ET.Element) -> RawClass:
        pass

    @abstractmethod
    def extract_association(
        self,
        element: ET.Element,
        state: ScanState
    ) -> RawAssociation:
        pass

    def _element_id(self, element: ET.Element) -> str:
        """Return the xmi:id of an element, or "" if it has none."""
        return XmiHandler.get_xmi_attribute(element, "id", default="")

    def _element_type(self, element: ET.Element) -> Optional[str]:
        """Return the xmi:type of an element, e.g. "uml:Class"."""
        return XmiHandler.get_xmi_attribute(element, "type")

    def _bound(self, element: ET.Element, tag: str) -> str:
        """
        Read a multiplicity bound ("lowerValue" or "upperValue").

        A missing bound element means 1; a bound element without a value
        is the literal's default, 0.
        """
        bound = XmiHandler.first_child(element, tag)
        if bound is None:
            return "1"
        value = bound.get("value")
        if value is None or value.strip() == "":
            return "0"
        return value.strip()

    def _raw_attribute(self, element: ET.Element) -> RawAttribute:
        """Read an owned attribute: inline type reference or href link."""
        type_elem = XmiHandler.first_child(element, "type")
        return RawAttribute(
            id=self._element_id(element),
            name=element.get("name"),
            type_id=element.get("type") or None,
            type_href=type_elem.get("href") if type_elem is not None else None,
            comment=XmiHandler.get_comment(element),
        )

    def _association_end(self, element: ET.Element) -> RawAssociationEnd:
        return RawAssociationEnd(
            class_id=element.get("type") or None,
            name=element.get("name") or None,
            lower=self._bound(element, "lowerValue"),
            upper=self._bound(element, "upperValue"),
        )

    def _log_classification(self, state: ScanState) -> None:
        self.logger.debug(
            f"Classified {len(state.types)} types, {len(state.enums)} enums, "
            f"{len(state.classes)} classes, {len(state.associations)} associations "
            f"({state.skipped} skipped)"
        )
