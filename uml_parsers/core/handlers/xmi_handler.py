"""
XMI document handler.
"""
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional, Union
import logging


logger = logging.getLogger(__name__)

XMI_PREFIX = "xmi:"


class XmiHandler:
    """Handler for reading UML/XMI element trees."""

    @staticmethod
    def parse(xmi_path: Union[str, Path]) -> ET.ElementTree:
        """
        Parse an XMI file into an ElementTree.

        Args:
            xmi_path: Path to the XMI file

        Returns:
            ElementTree object

        Raises:
            FileNotFoundError: If xmi_path doesn't exist
            ET.ParseError: If the XML is malformed
        """
        xmi_path = Path(xmi_path)

        if not xmi_path.exists():
            raise FileNotFoundError(f"XMI file not found: {xmi_path}")

        try:
            tree = ET.parse(xmi_path)
            logger.debug(f"Parsed XMI file: {xmi_path.name}")
            return tree
        except ET.ParseError as e:
            logger.error(f"Failed to parse XMI: {xmi_path}, error: {e}")
            raise

    @staticmethod
    def parse_string(xmi_string: str) -> ET.Element:
        """
        Parse an XMI string into its root Element.

        Raises:
            ET.ParseError: If the XML is malformed
        """
        try:
            return ET.fromstring(xmi_string)
        except ET.ParseError as e:
            logger.error(f"Failed to parse XMI string: {e}")
            raise

    @staticmethod
    def get_root(document: Union[ET.ElementTree, ET.Element]) -> ET.Element:
        """Return the root element of a tree, or the element itself."""
        if isinstance(document, ET.ElementTree):
            return document.getroot()
        return document

    @staticmethod
    def local_name(tag: str) -> str:
        """Strip the namespace from a tag or attribute name."""
        if not isinstance(tag, str):
            return ""
        if "}" in tag:
            return tag.rsplit("}", 1)[1]
        if ":" in tag:
            return tag.rsplit(":", 1)[1]
        return tag

    @staticmethod
    def find_model(root: ET.Element) -> ET.Element:
        """
        Return the uml:Model element of a document.

        Exports either use the model as root or wrap it in an xmi:XMI element.
        """
        if XmiHandler.local_name(root.tag) == "XMI":
            for child in root:
                if XmiHandler.local_name(child.tag) == "Model":
                    return child
        return root

    @staticmethod
    def get_xmi_attribute(
        element: ET.Element,
        attr_name: str,
        default: Optional[str] = None
    ) -> Optional[str]:
        """
        Get an xmi-namespaced attribute ("id", "type", ...) from an element.

        The XMI namespace URI differs between XMI versions, so any namespace
        whose URI mentions XMI is accepted.
        """
        for key, value in element.attrib.items():
            if key == f"{XMI_PREFIX}{attr_name}":
                return value
            if key.startswith("{") and key.endswith(f"}}{attr_name}"):
                namespace = key[1:key.index("}")]
                if "xmi" in namespace.lower():
                    return value
        return default

    @staticmethod
    def children(element: ET.Element, local_name: str) -> Iterator[ET.Element]:
        """Iterate over the direct children with the given local tag name."""
        for child in element:
            if XmiHandler.local_name(child.tag) == local_name:
                yield child

    @staticmethod
    def first_child(element: ET.Element, local_name: str) -> Optional[ET.Element]:
        return next(XmiHandler.children(element, local_name), None)

    @staticmethod
    def has_annotation(element: ET.Element, source: str) -> bool:
        """Return True if the element owns an eAnnotations with this source."""
        return any(
            annotation.get("source") == source
            for annotation in XmiHandler.children(element, "eAnnotations")
        )

    @staticmethod
    def get_comment(element: ET.Element) -> Optional[str]:
        """
        Get the body of an element's first owned comment.

        The body is either a "body" attribute or a <body> child element.
        """
        comment = XmiHandler.first_child(element, "ownedComment")
        if comment is None:
            return None
        body = comment.get("body")
        if body:
            return body
        body_elem = XmiHandler.first_child(comment, "body")
        if body_elem is not None and body_elem.text and body_elem.text.strip():
            return body_elem.text.strip()
        return None
