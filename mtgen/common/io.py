from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd


def _read_frame(path: Path) -> pd.DataFrame:
    ext = path.suffix.lower()

    if ext == ".csv":
        return pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            encoding="utf-8-sig",
        )

    # openpyxl only reads the zip based formats; legacy binary .xls is not supported
    if ext == ".xlsx":
        try:
            return pd.read_excel(path, dtype=str, keep_default_na=False, engine="openpyxl")
        except ImportError as exc:
            raise ImportError(
                "Reading Excel files requires 'openpyxl'. "
                "Install it with: pip install openpyxl"
            ) from exc

    raise ValueError(f"Unsupported file extension: {ext} for path {path}")


def read_table(path: Path) -> List[Dict[str, str]]:
    """
    Read a table with a header row (CSV or .xlsx) into one dict per row.

    Column order follows the file. Every value is a string with surrounding
    whitespace trimmed; blank cells come back as "" rather than NaN.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File does not exist: {path}")

    df = _read_frame(path).fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    return [
        {col: str(val).strip() for col, val in row.items()}
        for row in df.to_dict(orient="records")
    ]


def write_xml_file(directory: Path, file_name: str, content: str) -> Path:
    """Write one metadata file, creating the folder if needed and replacing any old copy."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    return path
