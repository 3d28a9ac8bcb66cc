"""
Modelio format strategy.
"""
from typing import Iterator, List
import xml.etree.ElementTree as ET

from ..core.base_strategy import (
    BaseFormatStrategy,
    ElementKind,
    RawAssociation,
    RawAssociationEnd,
    RawClass,
    RawEnum,
    RawType,
    ScanState,
)
from ..core.handlers import XmiHandler
from ..umldesigner.strategy import ELEMENT_KINDS, MODELIO_ANNOTATION_SOURCE


class ModelioStrategy(BaseFormatStrategy):
    """
    Extraction rules for Modelio exports.

    Modelio tags its models with an "Objing" annotation and nests elements
    in packages. Navigable association ends are owned by the classes as
    attributes pointing back to their association; the association lists
    its ends through memberEnd references.
    """

    @property
    def tool_name(self) -> str:
        return "modelio"

    def recognizes(self, root: ET.Element) -> bool:
        model = XmiHandler.find_model(root)
        return (XmiHandler.has_annotation(model, MODELIO_ANNOTATION_SOURCE)
                or XmiHandler.has_annotation(root, MODELIO_ANNOTATION_SOURCE))

    def classify(self, model: ET.Element, state: ScanState) -> None:
        for element in self._packaged_elements(model):
            kind = ELEMENT_KINDS.get(self._element_type(element), ElementKind.UNRECOGNIZED)
            state.bucket(kind, element)
            # Association ends may sit in classes or in the association itself
            for tag in ("ownedAttribute", "ownedEnd"):
                for end in XmiHandler.children(element, tag):
                    state.index[self._element_id(end)] = end
        self._log_classification(state)

    def _packaged_elements(self, container: ET.Element) -> Iterator[ET.Element]:
        """Yield packaged elements, descending into packages."""
        for element in XmiHandler.children(container, "packagedElement"):
            if self._element_type(element) == "uml:Package":
                yield from self._packaged_elements(element)
            else:
                yield element

    def extract_type(self, element: ET.Element) -> RawType:
        return RawType(id=self._element_id(element), name=element.get("name"))

    def extract_enum(self, element: ET.Element) -> RawEnum:
        return RawEnum(
            id=self._element_id(element),
            name=element.get("name"),
            literals=[
                literal.get("name")
                for literal in XmiHandler.children(element, "ownedLiteral")
            ],
        )

    def extract_class(self, element: ET.Element) -> RawClass:
        return RawClass(
            id=self._element_id(element),
            label=element.get("name"),
            comment=XmiHandler.get_comment(element),
            attributes=[
                self._raw_attribute(attribute)
                for attribute in XmiHandler.children(element, "ownedAttribute")
                if not attribute.get("association")
            ],
        )

    def extract_association(self, element: ET.Element, state: ScanState) -> RawAssociation:
        member_ends = self._member_end_ids(element)
        if member_ends:
            ends = [self._resolve_end(end_id, state) for end_id in member_ends]
        else:
            ends = [
                self._association_end(end)
                for end in XmiHandler.children(element, "ownedEnd")
            ]
        return RawAssociation(
            id=self._element_id(element),
            ends=ends,
            comment=XmiHandler.get_comment(element),
        )

    def _member_end_ids(self, element: ET.Element) -> List[str]:
        """Read memberEnd references, either as an attribute or as child idrefs."""
        member_end = element.get("memberEnd")
        if member_end:
            return member_end.split()
        return [
            XmiHandler.get_xmi_attribute(child, "idref")
            for child in XmiHandler.children(element, "memberEnd")
            if XmiHandler.get_xmi_attribute(child, "idref")
        ]

    def _resolve_end(self, end_id: str, state: ScanState) -> RawAssociationEnd:
        end = state.index.get(end_id)
        if end is None:
            self.logger.warning(f"Association end '{end_id}' not found")
            return RawAssociationEnd()
        return self._association_end(end)
