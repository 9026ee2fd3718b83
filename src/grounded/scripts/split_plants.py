"""
Split a combined plants JSON file into the catalog partition files

    grounded-split-plants data/plants.json
    grounded-split-plants plants.json --data-dir data
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from grounded.core.config import settings
from grounded.services.catalog_service import write_partitions
from grounded.utils.logging import app_logger


def split_plants(source: Path, data_dir: Path) -> dict:
    """
    Read a JSON array of plant records and write one partition file per
    plant type bucket into ``data_dir``.

    Raises:
        ValueError: if the source file does not hold a JSON array
    """
    with open(source, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{source} must contain a JSON array of plants")

    return write_partitions(
        records,
        data_dir,
        prefix=settings.catalog.file_prefix,
        suffix=settings.catalog.file_suffix,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Split a plants JSON file into catalog partition files")
    parser.add_argument("source", help="JSON file holding an array of plant records")
    parser.add_argument(
        "--data-dir",
        default=settings.catalog.data_dir,
        help=f"Directory to write partition files to (default: {settings.catalog.data_dir})",
    )
    args = parser.parse_args(argv)

    try:
        counts = split_plants(Path(args.source), Path(args.data_dir))
    except (OSError, ValueError) as e:
        app_logger.error(f"❌ [bold red]Could not split {args.source}:[/bold red] {e}")
        return 1

    app_logger.info(
        f"✅ [bold green]Wrote {sum(counts.values())} plants[/bold green] "
        f"into {len(counts)} files in [cyan]{args.data_dir}[/cyan]"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
