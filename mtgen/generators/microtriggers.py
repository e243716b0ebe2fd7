# mtgen/generators/microtriggers.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from mtgen.common.io import write_xml_file
from mtgen.common.naming import derive_microtrigger_member, derive_permission_name
from mtgen.common.xml_utils import METADATA_NS, XSD_NS, XSI_NS, sub_text, to_xml_string, xml_bool
from mtgen.config.loader import GeneratorSettings

# columns that become document attributes instead of field/value pairs
DOCUMENT_COLUMNS = ("DeveloperName", "Label")

PERMISSIONS_COLUMN = "Custom_Permissions__c"
RUN_MODE_COLUMN = "Run_Or_Bypass__c"
RUN_MODE_BYPASS = "Bypass"

VALUE_TYPE_ATTR = "xsi:type"
VALUE_TYPE_STRING = "xsd:string"


def build_field_values(row: Dict[str, str]) -> List[Tuple[str, str]]:
    """
    Field/value pairs for one microtrigger record, in column order.

    The permission column always points at the row's bypass permission and
    the run mode is always forced to Bypass, whatever the input says.
    """
    developer_name = row["DeveloperName"]
    values: List[Tuple[str, str]] = []

    for column, value in row.items():
        if column in DOCUMENT_COLUMNS:
            continue
        if column == PERMISSIONS_COLUMN:
            value = derive_permission_name(developer_name)
        elif column == RUN_MODE_COLUMN:
            value = RUN_MODE_BYPASS
        values.append((column, value))

    return values


def build_microtrigger_document(row: Dict[str, str], keep_value_type: bool = False) -> ET.Element:
    root = ET.Element(
        "CustomMetadata",
        {
            "xmlns": METADATA_NS,
            "xmlns:xsi": XSI_NS,
            "xmlns:xsd": XSD_NS,
        },
    )
    sub_text(root, "label", row["Label"])
    sub_text(root, "protected", xml_bool(False))

    for field, value in build_field_values(row):
        values_el = ET.SubElement(root, "values")
        sub_text(values_el, "field", field)
        value_el = sub_text(values_el, "value", value, **{VALUE_TYPE_ATTR: VALUE_TYPE_STRING})
        if not keep_value_type:
            value_el.attrib.pop(VALUE_TYPE_ATTR)

    return root


def generate_microtriggers(
    rows: Sequence[Dict[str, str]],
    out_dir: Path,
    settings: GeneratorSettings,
) -> List[str]:
    """
    Write one Microtrigger.<DeveloperName>.md-meta.xml per row.

    Returns the package.xml members (Microtrigger.<DeveloperName>) in row order.
    """
    members: List[str] = []

    for row in rows:
        member = derive_microtrigger_member(row["DeveloperName"])
        root = build_microtrigger_document(dict(row), keep_value_type=settings.keep_value_type)
        write_xml_file(out_dir, f"{member}.md-meta.xml", to_xml_string(root))
        members.append(member)

    return members
