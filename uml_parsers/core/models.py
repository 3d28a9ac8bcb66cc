"""
Core data models for the UML parser library.

These models are the common output of every format strategy: the
intermediate model handed to the code generator.
"""
from enum import Enum
import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr

from .exceptions import ModelSealedError


logger = logging.getLogger(__name__)


class Cardinality(str, Enum):
    """Multiplicity classes of a binary association."""
    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"
    MANY_TO_ONE = "many-to-one"
    MANY_TO_MANY = "many-to-many"


class UmlType(BaseModel):
    """A primitive or data type."""

    id: str
    name: str

    class Config:
        frozen = True


class UmlEnum(BaseModel):
    """An enumeration and its upper-case literals."""

    id: str
    name: str
    values: Tuple[str, ...] = ()

    class Config:
        frozen = True


class UmlClass(BaseModel):
    """A class, to become an entity."""

    id: str
    name: str
    table_name: str
    comment: Optional[str] = None

    class Config:
        frozen = True


class UmlField(BaseModel):
    """A regular (not injected) field of a class."""

    id: str
    owner_class_id: str
    name: str
    type: str = Field(..., description="Id of the field's Type or Enum")
    comment: Optional[str] = None

    class Config:
        frozen = True


class UmlAssociation(BaseModel):
    """A binary association between two classes."""

    id: str
    from_class_id: str
    to_class_id: str
    injected_field_in_from: Optional[str] = None
    injected_field_in_to: Optional[str] = None
    cardinality: Cardinality
    is_injected_field_in_from_required: bool = False
    is_injected_field_in_to_required: bool = False
    comment_in_from: Optional[str] = None
    comment_in_to: Optional[str] = None

    class Config:
        frozen = True


class ParsedData(BaseModel):
    """
    The intermediate model built by one parse.

    Append-only: entries are never replaced nor removed, and once the
    parser seals it no more entries can be added. Tables are only exposed
    as read-only mappings.
    """

    _types: Dict[str, UmlType] = PrivateAttr(default_factory=dict)
    _enums: Dict[str, UmlEnum] = PrivateAttr(default_factory=dict)
    _classes: Dict[str, UmlClass] = PrivateAttr(default_factory=dict)
    _fields: Dict[str, UmlField] = PrivateAttr(default_factory=dict)
    _associations: Dict[str, UmlAssociation] = PrivateAttr(default_factory=dict)
    _user_class_id: Optional[str] = PrivateAttr(default=None)
    _sealed: bool = PrivateAttr(default=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_"):
            raise ModelSealedError(
                f"'{name}' is read-only, entries are added through the add_* methods."
            )
        super().__setattr__(name, value)

    @property
    def types(self) -> Mapping[str, UmlType]:
        return MappingProxyType(self._types)

    @property
    def enums(self) -> Mapping[str, UmlEnum]:
        return MappingProxyType(self._enums)

    @property
    def classes(self) -> Mapping[str, UmlClass]:
        return MappingProxyType(self._classes)

    @property
    def fields(self) -> Mapping[str, UmlField]:
        return MappingProxyType(self._fields)

    @property
    def associations(self) -> Mapping[str, UmlAssociation]:
        return MappingProxyType(self._associations)

    @property
    def user_class_id(self) -> Optional[str]:
        return self._user_class_id

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Make the model read-only."""
        self._sealed = True

    def _check_writable(self) -> None:
        if self._sealed:
            raise ModelSealedError("The parsed data is read-only once parsing is done.")

    def _insert(self, table: Dict[str, Any], entry: Any) -> bool:
        """Insert an entry; skip it if its id is already present (first-wins)."""
        self._check_writable()
        if entry.id in table:
            logger.debug(f"Skipping duplicate {type(entry).__name__} '{entry.id}'")
            return False
        table[entry.id] = entry
        return True

    def add_type(self, type_id: str, name: str) -> bool:
        return self._insert(self._types, UmlType(id=type_id, name=name))

    def add_enum(self, enum_id: str, name: str, values: List[str]) -> bool:
        return self._insert(
            self._enums, UmlEnum(id=enum_id, name=name, values=tuple(values))
        )

    def add_class(
        self,
        class_id: str,
        name: str,
        table_name: str,
        comment: Optional[str] = None
    ) -> bool:
        return self._insert(
            self._classes,
            UmlClass(id=class_id, name=name, table_name=table_name, comment=comment)
        )

    def add_field(
        self,
        class_id: str,
        field_id: str,
        name: str,
        type: str,
        comment: Optional[str] = None
    ) -> bool:
        return self._insert(
            self._fields,
            UmlField(
                id=field_id,
                owner_class_id=class_id,
                name=name,
                type=type,
                comment=comment,
            )
        )

    def add_association(self, association_id: str, **data: Any) -> bool:
        """
        Add an association.

        Args:
            association_id: Source element id
            **data: UmlAssociation fields (from_class_id, to_class_id,
                cardinality, ...)
        """
        return self._insert(
            self._associations, UmlAssociation(id=association_id, **data)
        )

    def set_user_class_id(self, class_id: str) -> None:
        """Record the user class; only the first one is kept."""
        self._check_writable()
        if self._user_class_id is None:
            self._user_class_id = class_id

    def get_type(self, type_id: str) -> Optional[UmlType]:
        return self.types.get(type_id)

    def get_enum(self, enum_id: str) -> Optional[UmlEnum]:
        return self.enums.get(enum_id)

    def get_class(self, class_id: str) -> Optional[UmlClass]:
        return self.classes.get(class_id)

    def get_field(self, field_id: str) -> Optional[UmlField]:
        return self.fields.get(field_id)

    def get_association(self, association_id: str) -> Optional[UmlAssociation]:
        return self.associations.get(association_id)

    def get_class_by_name(self, name: str) -> Optional[UmlClass]:
        for uml_class in self.classes.values():
            if uml_class.name == name:
                return uml_class
        return None

    def get_fields_of(self, class_id: str) -> List[UmlField]:
        """Return the fields of a class, in document order."""
        return [f for f in self.fields.values() if f.owner_class_id == class_id]

    @property
    def class_names(self) -> List[str]:
        return [c.name for c in self.classes.values()]

    def stats(self) -> Dict[str, Any]:
        """Count the parsed entries by kind."""
        return {
            "total_types": len(self.types),
            "total_enums": len(self.enums),
            "total_classes": len(self.classes),
            "total_fields": len(self.fields),
            "total_associations": len(self.associations),
            "user_class_id": self.user_class_id,
        }
