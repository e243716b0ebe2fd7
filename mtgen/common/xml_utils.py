from __future__ import annotations

import xml.etree.ElementTree as ET

METADATA_NS = "http://soap.sforce.com/2006/04/metadata"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NS = "http://www.w3.org/2001/XMLSchema"

INDENT = "    "


def sub_text(parent: ET.Element, tag: str, text: str, **attrib: str) -> ET.Element:
    el = ET.SubElement(parent, tag, attrib)
    el.text = text
    return el


def xml_bool(value: bool) -> str:
    return "true" if value else "false"


def to_xml_string(root: ET.Element, standalone: bool = False) -> str:
    """
    Serialize a metadata tree the way Salesforce writes it:
    double-quoted UTF-8 declaration, 4-space indent, trailing newline.
    """
    declaration = '<?xml version="1.0" encoding="UTF-8"'
    if standalone:
        declaration += ' standalone="yes"'
    declaration += "?>"

    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f"{declaration}\n{body}\n"
