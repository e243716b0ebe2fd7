from __future__ import annotations

import argparse
from pathlib import Path

from mtgen.pipelines.generate_metadata import run_generate_metadata

VERSION = "0.0.1"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate microtrigger, custom permission, permission set and package.xml metadata",
        epilog="Settings are read from ./config/settings.yaml when present; otherwise the source checkout copy or built-in defaults apply.",
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        help="Name of csv file (e.g. 'microtriggers.csv')",
    )
    args = parser.parse_args()

    run_generate_metadata(input_path=Path(args.file), base_dir=Path.cwd())


if __name__ == "__main__":
    main()
