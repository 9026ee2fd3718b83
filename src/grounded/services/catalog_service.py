"""
Plant catalog aggregation from partition files

The catalog lives on disk as a directory of JSON files, one per plant type
bucket (``plants-trees.json``, ``plants-shrubs.json`` ...), each holding an
array of plant records.
"""
import json
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from grounded.core.config import settings
from grounded.utils.helpers import utcnow
from grounded.utils.logging import get_logger

logger = get_logger(__name__)

PLANT_TYPE_BUCKETS = {
    "tree": "trees",
    "shrub": "shrubs",
    "perennial": "perennials",
    "annual": "annuals",
    "grass": "grasses",
    "groundcover": "groundcovers",
    "vine": "vines",
    "fern": "ferns",
    "succulent": "succulents",
    "bulb": "bulbs",
}


def partition_for_plant_type(plant_type: Optional[str], prefix: str = "plants-", suffix: str = ".json") -> str:
    """Partition file name a plant of this type belongs in"""
    bucket = PLANT_TYPE_BUCKETS.get(plant_type or "", "other")
    return f"{prefix}{bucket}{suffix}"


def write_partitions(
    records: Iterable[Dict[str, Any]],
    data_dir: Union[str, Path],
    prefix: str = "plants-",
    suffix: str = ".json",
) -> Dict[str, int]:
    """
    Split plant records into partition files by plant type.

    Existing partition files for the written buckets are replaced.

    Returns:
        Record count per written file name
    """
    buckets: Dict[str, List[Dict[str, Any]]] = {}
    for record in records:
        file_name = partition_for_plant_type(record.get("plantType"), prefix, suffix)
        buckets.setdefault(file_name, []).append(record)

    directory = Path(data_dir)
    directory.mkdir(parents=True, exist_ok=True)
    for file_name, items in buckets.items():
        with open(directory / file_name, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2)
            f.write("\n")
        logger.info(f"[green]{file_name}[/green] {len(items)} plants")

    return {file_name: len(items) for file_name, items in buckets.items()}


def load_catalog(
    data_dir: Union[str, Path],
    prefix: str = "plants-",
    suffix: str = ".json",
) -> Dict[str, Any]:
    """
    Merge every partition file in ``data_dir`` into one catalog.

    Files are read in lexicographic name order and items keep their file
    order; nothing is deduplicated or re-sorted. A file that does not hold a
    JSON array (or is not valid JSON) counts as 0 items and is skipped.

    Returns:
        {"generatedAt", "items", "total", "byFile"}
    """
    directory = Path(data_dir)
    by_file: Dict[str, int] = {}
    items = []

    if directory.is_dir():
        file_names = sorted(
            entry.name
            for entry in directory.iterdir()
            if entry.is_file() and entry.name.startswith(prefix) and entry.name.endswith(suffix)
        )
    else:
        logger.warning(f"[yellow]Catalog directory not found:[/yellow] {directory}")
        file_names = []

    for file_name in file_names:
        try:
            with open(directory / file_name, "r", encoding="utf-8") as f:
                parsed = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"[yellow]Skipping unreadable catalog file {file_name}:[/yellow] {e}")
            parsed = None

        if isinstance(parsed, list):
            by_file[file_name] = len(parsed)
            items.extend(parsed)
        else:
            by_file[file_name] = 0

    return {
        "generatedAt": utcnow().isoformat() + "Z",
        "items": items,
        "total": len(items),
        "byFile": by_file,
    }


def load_configured_catalog() -> Dict[str, Any]:
    """load_catalog with the directory and file pattern from config.yaml"""
    catalog = settings.catalog
    return load_catalog(catalog.data_dir, catalog.file_prefix, catalog.file_suffix)


class CatalogCache:
    """
    Keeps the last merged catalog for ``ttl`` seconds.

    Each process holds at most one copy; the edge cache in front of the
    public endpoint handles stale-while-revalidate.
    """

    def __init__(self, loader: Callable[[], Dict[str, Any]], ttl: int = 3600, clock: Callable[[], float] = time.monotonic):
        self._loader = loader
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[Dict[str, Any]] = None
        self._loaded_at = 0.0

    def get(self) -> Dict[str, Any]:
        with self._lock:
            now = self._clock()
            if self._value is None or now - self._loaded_at >= self._ttl:
                self._value = self._loader()
                self._loaded_at = now
                logger.info(
                    f"[cyan]Catalog loaded:[/cyan] {self._value['total']} plants "
                    f"from {len(self._value['byFile'])} files"
                )
            return self._value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None


catalog_cache = CatalogCache(load_configured_catalog, ttl=settings.catalog.cache_ttl)
