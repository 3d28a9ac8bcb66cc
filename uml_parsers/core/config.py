"""
Configuration for UML export parsers.
"""
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from .parser_helper import DEFAULT_ID_PATTERN


class ParserConfig(BaseModel):
    """Configuration options shared by every format strategy."""

    # Target backend
    database_type: str = Field(
        default="sql",
        description="Storage backend: sql, mongodb or cassandra"
    )

    # Naming conventions
    id_field_pattern: str = Field(
        default=DEFAULT_ID_PATTERN,
        description="Regex matching attribute names that are synthetic primary keys"
    )

    table_name_delimiters: Optional[Tuple[str, str]] = Field(
        default=None,
        description="Delimiters around an explicit table name in a class label "
                    "(None uses the strategy default)"
    )

    # Generator wiring
    detect_user_class: bool = Field(
        default=True,
        description="Record the id of the class named 'user'"
    )

    # Validation
    strict_association_ends: bool = Field(
        default=True,
        description="Fail when an association end doesn't reference a known class"
    )
