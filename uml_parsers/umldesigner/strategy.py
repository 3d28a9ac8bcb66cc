"""
UML Designer format strategy.
"""
import xml.etree.ElementTree as ET

from ..core.base_strategy import (
    BaseFormatStrategy,
    ElementKind,
    RawAssociation,
    RawClass,
    RawEnum,
    RawType,
    ScanState,
)
from ..core.handlers import XmiHandler


# xmi:type of top-level packaged elements
ELEMENT_KINDS = {
    "uml:PrimitiveType": ElementKind.TYPE,
    "uml:DataType": ElementKind.TYPE,
    "uml:Enumeration": ElementKind.ENUM,
    "uml:Class": ElementKind.CLASS,
    "uml:Association": ElementKind.ASSOCIATION,
}

ECLIPSE_UML2_NAMESPACE = "eclipse.org/uml2"

# Modelio writes the same dialect but tags its models
MODELIO_ANNOTATION_SOURCE = "Objing"


class UmlDesignerStrategy(BaseFormatStrategy):
    """
    Extraction rules for UML Designer (Obeo) exports.

    UML Designer writes Eclipse UML2 models: every element is a flat
    packagedElement of the model, attributes carry either an inline type id
    or a <type href="..."/> link to a primitive library, and associations
    own both of their ends.
    """

    @property
    def tool_name(self) -> str:
        return "umldesigner"

    def recognizes(self, root: ET.Element) -> bool:
        model = XmiHandler.find_model(root)
        if XmiHandler.local_name(model.tag) != "Model":
            return False
        if ECLIPSE_UML2_NAMESPACE not in model.tag:
            return False
        return not XmiHandler.has_annotation(model, MODELIO_ANNOTATION_SOURCE)

    def classify(self, model: ET.Element, state: ScanState) -> None:
        for element in XmiHandler.children(model, "packagedElement"):
            kind = ELEMENT_KINDS.get(self._element_type(element), ElementKind.UNRECOGNIZED)
            state.bucket(kind, element)
        self._log_classification(state)

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
            ],
        )

    def extract_association(self, element: ET.Element, state: ScanState) -> RawAssociation:
        return RawAssociation(
            id=self._element_id(element),
            ends=[
                self._association_end(end)
                for end in XmiHandler.children(element, "ownedEnd")
            ],
            comment=XmiHandler.get_comment(element),
        )
