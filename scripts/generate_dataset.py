# Path: scripts/generate_dataset.py
# Purpose: CLI tool to composite layer images into a captioned training dataset.
# Layer: scripts.
# Details: Wires settings, dataset building, and generation together for each group.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings
from core.errors import DatasetError
from core.generation.runner import DatasetGenerator


def main() -> int:
    """Generate samples for the selected groups."""

    try:
        settings = AppSettings.from_env()
    except ValueError as exc:
        print(f"Error: invalid DATASET_* environment setting: {exc}", file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(description="Composite layer images into a captioned dataset")
    parser.add_argument("--root", type=Path, default=settings.dataset_root, help="Dataset root folder")
    parser.add_argument("--group", action="append", dest="groups", help="Group to render (repeatable)")
    parser.add_argument("--limit", type=int, default=settings.limit, help="Maximum samples per group")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging verbosity")
    parser.add_argument("--strict-keys", action="store_true", help="Fail on duplicate file keys")
    args = parser.parse_args()
    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be a positive integer")

    generation = settings.generation.model_copy(update={"strict_keys": args.strict_keys or settings.generation.strict_keys})
    settings = settings.model_copy(
        update={
            "dataset_root": args.root,
            "groups": args.groups or settings.groups,
            "limit": args.limit,
            "log_level": args.log_level,
            "generation": generation,
        }
    )
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        counts = DatasetGenerator(settings).generate()
    except DatasetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for group, count in counts.items():
        print(f"Generated {count} samples for {group} into {settings.output_path / group}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
