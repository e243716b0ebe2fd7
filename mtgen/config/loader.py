from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .paths import SETTINGS_PATH

SETTINGS_RELATIVE_PATH = Path("config") / "settings.yaml"


@dataclass(frozen=True)
class GeneratorSettings:
    """Values that shape the generated metadata but are not naming rules."""
    output_dir: str = "metadata"
    api_version: str = "58.0"
    description_prefix: str = "#156529 Adding custom permission to bypass microtrigger "
    permission_set_name: str = "MicroTriggers_Integration_User_E"
    permission_set_label: str = "MicroTriggers - Integration User - E"
    keep_value_type: bool = False


def find_settings_path(base_dir: Path) -> Path:
    """
    config/settings.yaml under the run directory wins; otherwise the copy
    next to the source checkout. An installed package ships no settings
    file, so outside a checkout this may not exist and defaults apply.
    """
    local = base_dir / SETTINGS_RELATIVE_PATH
    if local.is_file():
        return local
    return SETTINGS_PATH


def _check_types(values: dict, settings_path: Path) -> None:
    bad = []
    for f in fields(GeneratorSettings):
        if f.name not in values:
            continue
        expected = bool if f.name == "keep_value_type" else str
        if not isinstance(values[f.name], expected):
            bad.append(f"{f.name} (expected {expected.__name__}, got {type(values[f.name]).__name__})")
    if bad:
        raise ValueError(f"Settings file {settings_path} has invalid values: {', '.join(bad)}")


def load_settings(settings_path: Optional[Path] = None) -> GeneratorSettings:
    """
    Load settings.yaml into a GeneratorSettings.
    A missing file gives the defaults; unknown keys or wrongly typed
    values raise ValueError.
    """
    if settings_path is None:
        settings_path = SETTINGS_PATH

    if not settings_path.is_file():
        return GeneratorSettings()

    with settings_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} must contain a mapping")

    known = {f.name for f in fields(GeneratorSettings)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ValueError(f"Settings file {settings_path} has unknown keys: {', '.join(unknown)}")

    values = {k: v for k, v in data.items() if v is not None}
    if isinstance(values.get("api_version"), (int, float)) and not isinstance(values["api_version"], bool):
        # YAML reads 58.0 as a float
        values["api_version"] = str(values["api_version"])

    _check_types(values, settings_path)
    return GeneratorSettings(**values)
