"""
Stateless helpers shared by every format strategy.
"""
import re
from typing import NamedTuple, Optional, Tuple


DEFAULT_ID_PATTERN = r"^id$"
DEFAULT_TABLE_NAME_DELIMITERS = ("(", ")")

_WORD_BOUNDARY_REGEX = re.compile(r"([a-z0-9])([A-Z])|([A-Z]+)([A-Z][a-z])")
_SEPARATOR_REGEX = re.compile(r"[\s\-\.]+")


class ClassNames(NamedTuple):
    """Canonical names derived from a class label."""
    entity_name: str
    table_name: str


def upper_first(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]


def lower_first(value: str) -> str:
    if not value:
        return value
    return value[0].lower() + value[1:]


def snake_case(value: str) -> str:
    """Convert "CustomerOrder" or "customer order" to "customer_order"."""
    if not value:
        return value
    value = _WORD_BOUNDARY_REGEX.sub(
        lambda m: f"{m.group(1) or m.group(3)}_{m.group(2) or m.group(4)}",
        value.strip()
    )
    value = _SEPARATOR_REGEX.sub("_", value)
    return re.sub(r"_+", "_", value).strip("_").lower()


def extract_class_name(
    label: str,
    delimiters: Tuple[str, str] = DEFAULT_TABLE_NAME_DELIMITERS
) -> ClassNames:
    """
    Split a class label into its entity name and table name.

    A label such as "Customer (t_customer)" carries an explicit table name
    between the delimiters. Otherwise the table name is derived from the
    entity name.

    Args:
        label: Raw class name as written in the diagram
        delimiters: Opening and closing delimiters around the table name

    Returns:
        ClassNames with the upper-first entity name and the table name
    """
    trimmed = label.strip()
    opening, closing = delimiters
    start = trimmed.find(opening)
    end = trimmed.find(closing, start + len(opening)) if start != -1 else -1

    if start != -1 and end != -1:
        # An empty entity name is left for the caller to reject
        entity_name = trimmed[:start].strip()
        table_name = trimmed[start + len(opening):end].strip()
        return ClassNames(
            upper_first(entity_name), table_name or snake_case(entity_name)
        )

    return ClassNames(upper_first(trimmed), snake_case(trimmed))


def is_an_id(name: str, pattern: str = DEFAULT_ID_PATTERN) -> bool:
    """Return True if the attribute name denotes the synthetic primary key."""
    if not name:
        return False
    return re.fullmatch(pattern, name.strip(), re.IGNORECASE) is not None


def get_type_name_from_url(url: Optional[str]) -> Optional[str]:
    """
    Extract the type name from a cross-reference link.

    "pathmap://UML_LIBRARIES/UMLPrimitiveTypes.library.uml#String" gives
    "String".
    """
    if not url:
        return None
    if "#" in url:
        name = url.rsplit("#", 1)[1]
    else:
        name = url.rstrip("/").rsplit("/", 1)[-1]
    return name.strip() or None
