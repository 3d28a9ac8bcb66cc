"""
Parser registry for managing UML export format strategies.
"""
from typing import Dict, List, Optional, Type, Union
import logging
import xml.etree.ElementTree as ET

from .base_parser import XmiParser
from .base_strategy import BaseFormatStrategy
from .exceptions import UnsupportedFormatError
from .handlers import XmiHandler


logger = logging.getLogger(__name__)


class ParserRegistry:
    """
    Registry of the authoring tools a document can come from.

    Strategies are tried in registration order when detecting the tool
    that wrote a document.
    """

    _strategies: Dict[str, Type[BaseFormatStrategy]] = {}

    @classmethod
    def register(cls, tool_name: str, strategy_class: Type[BaseFormatStrategy]) -> None:
        """
        Register the format strategy of an authoring tool.

        Args:
            tool_name: Name of the tool (e.g., "umldesigner", "modelio")
            strategy_class: Strategy class extending BaseFormatStrategy

        Raises:
            ValueError: If strategy_class doesn't extend BaseFormatStrategy
        """
        if not issubclass(strategy_class, BaseFormatStrategy):
            raise ValueError(
                f"Strategy class must extend BaseFormatStrategy, got {strategy_class}"
            )

        cls._strategies[tool_name.lower()] = strategy_class
        logger.info(f"Registered parser for '{tool_name}'")

    @classmethod
    def get_parser(
        cls,
        tool_name: str,
        document: Union[ET.ElementTree, ET.Element],
        database_type: Optional[str] = None,
        config: dict = None
    ) -> XmiParser:
        """
        Get a parser for a known authoring tool.

        Args:
            tool_name: Name of the tool
            document: Parsed XMI document
            database_type: Target backend
            config: Optional configuration for the parser

        Returns:
            Parser instance

        Raises:
            ValueError: If no parser registered for tool_name
        """
        strategy_class = cls._strategies.get(tool_name.lower())

        if not strategy_class:
            available = ", ".join(cls._strategies.keys())
            raise ValueError(
                f"No parser registered for '{tool_name}'. "
                f"Available parsers: {available}"
            )

        return XmiParser(document, strategy_class(), database_type, config)

    @classmethod
    def detect(cls, document: Union[ET.ElementTree, ET.Element]) -> str:
        """
        Find the tool that exported a document.

        Returns:
            Name of the first registered tool recognizing the document

        Raises:
            UnsupportedFormatError: If no registered tool recognizes it
        """
        root = XmiHandler.get_root(document)
        for tool_name, strategy_class in cls._strategies.items():
            if strategy_class().recognizes(root):
                logger.debug(f"Detected '{tool_name}' export")
                return tool_name
        raise UnsupportedFormatError(
            "The document's format isn't supported, it must be exported by one of: "
            f"{', '.join(cls._strategies.keys())}.",
            name=XmiHandler.local_name(root.tag)
        )

    @classmethod
    def list_parsers(cls) -> List[str]:
        """List all registered tool names."""
        return list(cls._strategies.keys())

    @classmethod
    def is_supported(cls, tool_name: str) -> bool:
        return tool_name.lower() in cls._strategies


def create_parser(
    document: Union[ET.ElementTree, ET.Element],
    database_type: Optional[str] = None,
    config: dict = None
) -> XmiParser:
    """
    Factory function creating the parser matching a document.

    Args:
        document: Parsed XMI document or its root element
        database_type: Target backend ("sql", "mongodb" or "cassandra")
        config: Optional configuration for the parser

    Returns:
        Parser instance bound to the detected tool's strategy

    Raises:
        UnsupportedFormatError: If no registered tool recognizes the document
        ValueError: If the database type is unknown
    """
    tool_name = ParserRegistry.detect(document)
    return ParserRegistry.get_parser(tool_name, document, database_type, config)
