# mtgen/generators/custom_permissions.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Sequence

from mtgen.common.io import write_xml_file
from mtgen.common.naming import derive_permission_name
from mtgen.common.xml_utils import METADATA_NS, sub_text, to_xml_string, xml_bool
from mtgen.config.loader import GeneratorSettings


def build_custom_permission_document(row: Dict[str, str], description_prefix: str) -> ET.Element:
    root = ET.Element("CustomPermission", {"xmlns": METADATA_NS})
    sub_text(root, "description", description_prefix + row["Label"])
    sub_text(root, "isLicensed", xml_bool(False))
    sub_text(root, "label", derive_permission_name(row["DeveloperName"]))
    return root


def generate_custom_permissions(
    rows: Sequence[Dict[str, str]],
    out_dir: Path,
    settings: GeneratorSettings,
) -> List[str]:
    """
    Write one <PermissionName>.customPermission-meta.xml per row and
    return the permission names in row order.
    """
    members: List[str] = []

    for row in rows:
        permission_name = derive_permission_name(row["DeveloperName"])
        root = build_custom_permission_document(row, settings.description_prefix)
        write_xml_file(out_dir, f"{permission_name}.customPermission-meta.xml", to_xml_string(root))
        members.append(permission_name)

    return members
