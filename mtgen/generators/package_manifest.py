# mtgen/generators/package_manifest.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from mtgen.common.io import write_xml_file
from mtgen.common.xml_utils import METADATA_NS, sub_text, to_xml_string
from mtgen.config.loader import GeneratorSettings

PACKAGE_FILE_NAME = "package.xml"

CUSTOM_METADATA_TYPE = "CustomMetadata"
CUSTOM_PERMISSION_TYPE = "CustomPermission"


def _add_types(parent: ET.Element, members: Sequence[str], type_name: str) -> ET.Element:
    types_el = ET.SubElement(parent, "types")
    for member in members:
        sub_text(types_el, "members", member)
    sub_text(types_el, "name", type_name)
    return types_el


def build_package_document(
    microtrigger_members: Sequence[str],
    custom_permission_members: Sequence[str],
    api_version: str,
) -> ET.Element:
    """
    package.xml with the custom metadata block first, then the custom
    permission block, then the API version. Member order is kept as given.
    """
    root = ET.Element("Package", {"xmlns": METADATA_NS})
    _add_types(root, microtrigger_members, CUSTOM_METADATA_TYPE)
    _add_types(root, custom_permission_members, CUSTOM_PERMISSION_TYPE)
    sub_text(root, "version", api_version)
    return root


def generate_package_manifest(
    microtrigger_members: Sequence[str],
    custom_permission_members: Sequence[str],
    out_dir: Path,
    settings: GeneratorSettings,
) -> Path:
    root = build_package_document(
        microtrigger_members,
        custom_permission_members,
        settings.api_version,
    )
    return write_xml_file(out_dir, PACKAGE_FILE_NAME, to_xml_string(root, standalone=True))
