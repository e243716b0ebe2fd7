from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tabulate import tabulate

from mtgen.common.io import read_table
from mtgen.common.logging import info, ok, warn
from mtgen.config.loader import GeneratorSettings, find_settings_path, load_settings
from mtgen.generators.custom_permissions import generate_custom_permissions
from mtgen.generators.microtriggers import generate_microtriggers
from mtgen.generators.package_manifest import generate_package_manifest
from mtgen.generators.permission_set import generate_permission_set

REQUIRED_COLUMNS = ("DeveloperName", "Label")


@dataclass
class GenerationResult:
    """
    Outcome of one run: the members that went into package.xml and
    every file written to the output folder.
    """
    output_dir: Path
    rows: int = 0
    microtrigger_members: List[str] = field(default_factory=list)
    custom_permission_members: List[str] = field(default_factory=list)
    permission_set_path: Optional[Path] = None
    package_path: Optional[Path] = None


def validate_rows(rows: Sequence[Dict[str, str]], source: Path) -> None:
    """
    Check required columns and unique developer names before anything
    is written. Raises ValueError on the first problem found.
    """
    for idx, row in enumerate(rows, start=1):
        missing = [c for c in REQUIRED_COLUMNS if c not in row]
        if missing:
            raise ValueError(
                f"Input {source} row {idx} is missing required columns: {', '.join(missing)}"
            )

    counts = Counter(row["DeveloperName"] for row in rows)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        raise ValueError(
            f"Input {source} has duplicate DeveloperName values: {', '.join(duplicates)}"
        )


def _print_summary(result: GenerationResult) -> None:
    summary = [
        ["CustomMetadata", len(result.microtrigger_members), "Microtrigger.*.md-meta.xml"],
        ["CustomPermission", len(result.custom_permission_members), "*.customPermission-meta.xml"],
        ["PermissionSet", 1, result.permission_set_path.name],
        ["Package", 1, result.package_path.name],
    ]
    print("\nGENERATED METADATA")
    print(tabulate(summary, headers=["type", "files", "pattern"], tablefmt="github"))


def run_generate_metadata(
    input_path: Path,
    base_dir: Path,
    settings: GeneratorSettings | None = None,
) -> GenerationResult:
    """
    Main entry point: turn the microtriggers table into Salesforce metadata.

    Steps:
    - read + validate rows
    - microtrigger records, custom permissions, permission set
    - package.xml from the members of the first two
    """
    if settings is None:
        settings = load_settings(find_settings_path(base_dir))

    if not input_path.is_absolute():
        input_path = base_dir / input_path
    out_dir = base_dir / settings.output_dir

    info(f"input={input_path}")
    info(f"output_dir={out_dir}")

    rows = read_table(input_path)
    result = GenerationResult(output_dir=out_dir, rows=len(rows))

    if not rows:
        warn(f"no rows found in {input_path}; permission set and package.xml will be empty")

    validate_rows(rows, input_path)
    info(f"rows={len(rows):,}")

    result.microtrigger_members = generate_microtriggers(rows, out_dir, settings)
    ok(f"microtriggers written={len(result.microtrigger_members):,}")

    result.custom_permission_members = generate_custom_permissions(rows, out_dir, settings)
    ok(f"custom permissions written={len(result.custom_permission_members):,}")

    result.permission_set_path = generate_permission_set(rows, out_dir, settings)
    ok(f"permission set written={result.permission_set_path.name}")

    result.package_path = generate_package_manifest(
        result.microtrigger_members,
        result.custom_permission_members,
        out_dir,
        settings,
    )
    ok(f"package written={result.package_path}")

    warn(
        f"{result.permission_set_path.name} is not listed in {result.package_path.name}; "
        "merge it into the existing permission set and deploy it separately"
    )

    _print_summary(result)
    return result
