# mtgen/generators/permission_set.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Sequence

from mtgen.common.io import write_xml_file
from mtgen.common.naming import derive_permission_name
from mtgen.common.xml_utils import METADATA_NS, sub_text, to_xml_string, xml_bool
from mtgen.config.loader import GeneratorSettings


def build_permission_set_document(rows: Sequence[Dict[str, str]], label: str) -> ET.Element:
    root = ET.Element("PermissionSet", {"xmlns": METADATA_NS})

    for row in rows:
        perm_el = ET.SubElement(root, "customPermissions")
        sub_text(perm_el, "enabled", xml_bool(True))
        sub_text(perm_el, "name", derive_permission_name(row["DeveloperName"]))

    sub_text(root, "label", label)
    return root


def generate_permission_set(
    rows: Sequence[Dict[str, str]],
    out_dir: Path,
    settings: GeneratorSettings,
) -> Path:
    """
    Write the single permission set granting every bypass permission.

    This file is not listed in package.xml; it has to be merged into the
    org's existing permission set by hand.
    """
    root = build_permission_set_document(rows, settings.permission_set_label)
    file_name = f"{settings.permission_set_name}.permissionset-meta.xml"
    return write_xml_file(out_dir, file_name, to_xml_string(root))
