"""Shared test fixtures for the uml_parsers test suite."""
from __future__ import annotations

from typing import Callable
import xml.etree.ElementTree as ET

import pytest

from uml_parsers.core.handlers import XmiHandler


XMI_NS = "http://www.omg.org/spec/XMI/20131001"
UML_NS = "http://www.eclipse.org/uml2/5.0.0/UML"

STRING_HREF = "pathmap://UML_LIBRARIES/UMLPrimitiveTypes.library.uml#string"

UMLDESIGNER_BODY = f"""
  <packagedElement xmi:type="uml:Enumeration" xmi:id="_status" name="Status">
    <ownedLiteral xmi:id="_status_active" name="active"/>
    <ownedLiteral xmi:id="_status_inactive" name="inactive"/>
  </packagedElement>
  <packagedElement xmi:type="uml:PrimitiveType" xmi:id="_long" name="long"/>
  <packagedElement xmi:type="uml:Class" xmi:id="_customer" name="Customer">
    <ownedComment xmi:id="_customer_comment" body="A customer of the shop"/>
    <ownedAttribute xmi:id="_customer_id" name="id" type="_long"/>
    <ownedAttribute xmi:id="_customer_name" name="name">
      <type xmi:type="uml:PrimitiveType" href="{STRING_HREF}"/>
    </ownedAttribute>
    <ownedAttribute xmi:id="_customer_status" name="status" type="_status"/>
  </packagedElement>
  <packagedElement xmi:type="uml:Class" xmi:id="_order" name="Order (customer_order)">
    <ownedAttribute xmi:id="_order_total" name="Total" type="_long">
      <ownedComment xmi:id="_order_total_comment">
        <body>Total price in cents</body>
      </ownedComment>
    </ownedAttribute>
  </packagedElement>
  <packagedElement xmi:type="uml:Class" xmi:id="_user" name="User (app_user)"/>
  <packagedElement xmi:type="uml:Association" xmi:id="_customer_orders" memberEnd="_end0 _end1">
    <ownedComment xmi:id="_assoc_comment" body="Orders placed"/>
    <ownedEnd xmi:id="_end0" name="customer" type="_customer" association="_customer_orders">
      <lowerValue xmi:type="uml:LiteralInteger" xmi:id="_end0_lower" value="1"/>
      <upperValue xmi:type="uml:LiteralUnlimitedNatural" xmi:id="_end0_upper" value="*"/>
    </ownedEnd>
    <ownedEnd xmi:id="_end1" name="orders" type="_order" association="_customer_orders">
      <lowerValue xmi:type="uml:LiteralInteger" xmi:id="_end1_lower"/>
      <upperValue xmi:type="uml:LiteralUnlimitedNatural" xmi:id="_end1_upper" value="1"/>
    </ownedEnd>
  </packagedElement>
  <packagedElement xmi:type="uml:Comment" xmi:id="_note" body="Not part of the model"/>
"""

MODELIO_BODY = f"""
  <eAnnotations xmi:id="_annotation" source="Objing">
    <contents xmi:type="uml:Property" xmi:id="_exporter" name="exporterVersion"/>
  </eAnnotations>
  <packagedElement xmi:type="uml:Package" xmi:id="_shop" name="shop">
    <packagedElement xmi:type="uml:Enumeration" xmi:id="_level" name="level">
      <ownedLiteral xmi:id="_level_gold" name="gold"/>
      <ownedLiteral xmi:id="_level_silver" name="Silver"/>
    </packagedElement>
    <packagedElement xmi:type="uml:Class" xmi:id="_author" name="Author">
      <ownedAttribute xmi:id="_author_id" name="ID">
        <type href="{STRING_HREF}"/>
      </ownedAttribute>
      <ownedAttribute xmi:id="_author_name" name="Name">
        <type href="{STRING_HREF}"/>
      </ownedAttribute>
      <ownedAttribute xmi:id="_author_level" name="level" type="_level"/>
      <ownedAttribute xmi:id="_author_books" name="books" type="_book" association="_writes">
        <lowerValue xmi:type="uml:LiteralInteger" xmi:id="_books_lower"/>
        <upperValue xmi:type="uml:LiteralUnlimitedNatural" xmi:id="_books_upper" value="*"/>
      </ownedAttribute>
    </packagedElement>
    <packagedElement xmi:type="uml:Package" xmi:id="_catalog" name="catalog">
      <packagedElement xmi:type="uml:Class" xmi:id="_book" name="Book">
        <ownedAttribute xmi:id="_book_title" name="title">
          <type href="{STRING_HREF}"/>
        </ownedAttribute>
        <ownedAttribute xmi:id="_book_authors" name="authors" type="_author" association="_writes">
          <lowerValue xmi:type="uml:LiteralInteger" xmi:id="_authors_lower" value="1"/>
          <upperValue xmi:type="uml:LiteralUnlimitedNatural" xmi:id="_authors_upper" value="*"/>
        </ownedAttribute>
      </packagedElement>
    </packagedElement>
    <packagedElement xmi:type="uml:Association" xmi:id="_writes" memberEnd="_book_authors _author_books"/>
  </packagedElement>
"""


def wrap_model(body: str) -> str:
    """Wrap packaged elements into a uml:Model document."""
    return (
        f'<uml:Model xmi:version="20131001" xmlns:xmi="{XMI_NS}" '
        f'xmlns:uml="{UML_NS}" xmi:id="_model" name="model">'
        f"{body}</uml:Model>"
    )


@pytest.fixture
def make_document() -> Callable[[str], ET.Element]:
    """Provide a builder turning packaged elements into a parsed document."""
    def _make(body: str) -> ET.Element:
        return XmiHandler.parse_string(wrap_model(body))
    return _make


@pytest.fixture
def umldesigner_document() -> ET.Element:
    """Provide a complete UML Designer export."""
    return XmiHandler.parse_string(wrap_model(UMLDESIGNER_BODY))


@pytest.fixture
def modelio_document() -> ET.Element:
    """Provide a complete Modelio export, wrapped in an xmi:XMI element."""
    return XmiHandler.parse_string(
        f'<xmi:XMI xmi:version="20131001" xmlns:xmi="{XMI_NS}" xmlns:uml="{UML_NS}">'
        f"{wrap_model(MODELIO_BODY)}</xmi:XMI>"
    )
