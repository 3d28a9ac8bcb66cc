"""
The parsing pipeline shared by every UML export format.
"""
from typing import Optional, Union
import logging
import xml.etree.ElementTree as ET

from .base_strategy import (
    BaseFormatStrategy,
    RawAssociationEnd,
    RawAttribute,
    ScanState,
)
from .config import ParserConfig
from .database_types import DatabaseTypes, get_database_types
from .exceptions import (
    NullPointerError,
    ReservedNameError,
    UmlParserError,
    UnsupportedFormatError,
    WrongFieldError,
    WrongTypeError,
)
from .handlers import XmiHandler
from .models import Cardinality, ParsedData
from . import parser_helper


logger = logging.getLogger(__name__)


def derive_cardinality(
    end0: RawAssociationEnd,
    end1: RawAssociationEnd
) -> Cardinality:
    """Classify an association from the upper bounds of its two ends."""
    if end0.is_unbounded and end1.is_unbounded:
        return Cardinality.MANY_TO_MANY
    if end1.is_unbounded:
        return Cardinality.ONE_TO_MANY
    if end0.is_unbounded:
        return Cardinality.MANY_TO_ONE
    return Cardinality.ONE_TO_ONE


class XmiParser:
    """
    Parser for UML class-diagram exports.

    Runs five phases in a fixed order, each one depending on the entities
    the previous ones resolved:

    1. classify the document's elements (delegated to the strategy)
    2. types
    3. enumerations
    4. classes and their fields
    5. associations

    The tool-specific reading of elements is delegated to a
    BaseFormatStrategy; validation against the database policy is the same
    for every tool.
    """

    def __init__(
        self,
        document: Union[ET.ElementTree, ET.Element],
        strategy: BaseFormatStrategy,
        database_type: Optional[str] = None,
        config: dict = None
    ):
        """
        Initialize the parser.

        Args:
            document: Parsed XMI document or its root element
            strategy: Extraction rules of the tool that wrote the document
            database_type: Target backend, overrides the configured one
            config: Optional parser configuration (see ParserConfig)

        Raises:
            ValueError: If the database type is unknown
        """
        self.config = ParserConfig(**(config or {}))
        if database_type:
            self.config = self.config.model_copy(update={"database_type": database_type})
        self.root = XmiHandler.get_root(document)
        self.strategy = strategy
        self.database_types: DatabaseTypes = get_database_types(self.config.database_type)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def tool_name(self) -> str:
        return self.strategy.tool_name

    @property
    def table_name_delimiters(self):
        return self.config.table_name_delimiters or self.strategy.default_table_name_delimiters

    def parse(self) -> ParsedData:
        """
        Parse the document into a new intermediate model.

        Returns:
            Sealed ParsedData holding types, enums, classes, fields and
            associations

        Raises:
            UmlParserError: On the first invalid element; nothing is returned
        """
        state = ScanState()
        parsed_data = ParsedData()

        self._log_progress(
            f"Starting parse of {self.tool_name} export "
            f"for the '{self.database_types.get_name()}' database",
            "info"
        )

        try:
            self.strategy.classify(XmiHandler.find_model(self.root), state)
            self._fill_types(state, parsed_data)
            self._fill_enums(state, parsed_data)
            self._fill_classes_and_fields(state, parsed_data)
            self._fill_associations(state, parsed_data)
        except UmlParserError as e:
            self._log_progress(f"Parse aborted ({e.kind.value}): {e}", "error")
            raise

        parsed_data.seal()
        stats = parsed_data.stats()
        self._log_progress(
            f"Parse complete: {stats['total_classes']} classes, "
            f"{stats['total_fields']} fields, {stats['total_enums']} enums, "
            f"{stats['total_associations']} associations",
            "info"
        )
        return parsed_data

    def _fill_types(self, state: ScanState, parsed_data: ParsedData) -> None:
        for element in state.types:
            raw_type = self.strategy.extract_type(element)
            if not raw_type.name:
                raise NullPointerError("Types must have a name.")
            self._add_type(parsed_data, raw_type.name, raw_type.id)

    def _add_type(self, parsed_data: ParsedData, type_name: str, type_id: str) -> None:
        name = parser_helper.upper_first(type_name)
        if not self.database_types.contains(name):
            raise WrongTypeError(
                f"The type '{type_name}' isn't supported by the "
                f"'{self.database_types.get_name()}' database.",
                name=type_name
            )
        parsed_data.add_type(type_id, name)

    def _fill_enums(self, state: ScanState, parsed_data: ParsedData) -> None:
        for element in state.enums:
            raw_enum = self.strategy.extract_enum(element)
            if not raw_enum.name:
                raise NullPointerError("The enumeration's name can't be null.")
            values = []
            for literal in raw_enum.literals:
                if not literal or not literal.strip():
                    raise NullPointerError(
                        f"The values of the enumeration '{raw_enum.name}' can't be null.",
                        name=raw_enum.name
                    )
                values.append(literal.strip().upper())
            parsed_data.add_enum(
                raw_enum.id, parser_helper.upper_first(raw_enum.name), values
            )

    def _fill_classes_and_fields(self, state: ScanState, parsed_data: ParsedData) -> None:
        for element in state.classes:
            raw_class = self.strategy.extract_class(element)
            if not raw_class.label or not raw_class.label.strip():
                raise NullPointerError("Classes must have a name.")

            names = parser_helper.extract_class_name(
                raw_class.label, self.table_name_delimiters
            )
            if not names.entity_name:
                raise NullPointerError("Classes must have a name.", name=raw_class.label)
            self._check_class_names(names)

            if (self.config.detect_user_class
                    and names.entity_name.lower() == "user"):
                parsed_data.set_user_class_id(raw_class.id)

            parsed_data.add_class(
                raw_class.id,
                names.entity_name,
                names.table_name,
                comment=raw_class.comment
            )

            for attribute in raw_class.attributes:
                self._add_field(parsed_data, attribute, raw_class.id, names.entity_name)

    def _check_class_names(self, names: parser_helper.ClassNames) -> None:
        database_name = self.database_types.get_name()
        if self.database_types.is_reserved_class_name(names.entity_name):
            raise ReservedNameError(
                f"The class name '{names.entity_name}' is a reserved keyword "
                f"for the '{database_name}' database.",
                name=names.entity_name
            )
        if self.database_types.is_reserved_table_name(names.table_name):
            raise ReservedNameError(
                f"The table name '{names.table_name}' is a reserved keyword "
                f"for the '{database_name}' database.",
                name=names.table_name
            )

    def _add_field(
        self,
        parsed_data: ParsedData,
        attribute: RawAttribute,
        class_id: str,
        class_name: str
    ) -> None:
        if not attribute.name or not attribute.name.strip():
            raise NullPointerError(
                f"No name is defined for the passed attribute, for class '{class_name}'.",
                name=class_name
            )
        if parser_helper.is_an_id(attribute.name, self.config.id_field_pattern):
            self.logger.debug(f"Skipping id attribute '{attribute.name}' of '{class_name}'")
            return

        field_name = parser_helper.lower_first(attribute.name.strip())

        if attribute.type_id:
            field_type = attribute.type_id
        else:
            type_name = parser_helper.get_type_name_from_url(attribute.type_href)
            if not type_name:
                raise WrongFieldError(
                    f"The field '{field_name}' does not possess any type.",
                    name=field_name
                )
            field_type = parser_helper.upper_first(type_name)
            self._add_type(parsed_data, field_type, field_type)

        if self.database_types.is_reserved_field_name(field_name):
            raise ReservedNameError(
                f"The field name '{field_name}' is a reserved keyword for the "
                f"'{self.database_types.get_name()}' database.",
                name=field_name
            )

        parsed_data.add_field(
            class_id,
            attribute.id,
            field_name,
            field_type,
            comment=attribute.comment
        )

    def _fill_associations(self, state: ScanState, parsed_data: ParsedData) -> None:
        for element in state.associations:
            association = self.strategy.extract_association(element, state)
            if len(association.ends) != 2:
                raise UnsupportedFormatError(
                    f"The association '{association.id}' has {len(association.ends)} ends, "
                    f"only binary associations are supported.",
                    name=association.id
                )
            end0, end1 = association.ends

            unknown = [
                end.class_id for end in (end0, end1)
                if end.class_id not in parsed_data.classes
            ]
            if unknown:
                message = (
                    f"The association '{association.id}' references "
                    f"an unknown class '{unknown[0]}'."
                )
                if self.config.strict_association_ends:
                    raise UnsupportedFormatError(message, name=association.id)
                self._log_progress(f"{message} Skipping it.", "warning")
                continue

            parsed_data.add_association(
                association.id,
                from_class_id=end0.class_id,
                to_class_id=end1.class_id,
                injected_field_in_from=end1.name,
                injected_field_in_to=end0.name,
                cardinality=derive_cardinality(end0, end1),
                is_injected_field_in_from_required=end1.is_mandatory,
                is_injected_field_in_to_required=end0.is_mandatory,
                comment_in_from=association.comment,
                comment_in_to=association.comment,
            )

    def _log_progress(self, message: str, level: str = "info") -> None:
        """Helper to log parsing progress."""
        log_method = getattr(self.logger, level)
        log_method(message)
