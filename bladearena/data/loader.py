"""Runtime loader utilities for the parts catalogs.

Provides cached access to the JSON catalogs under ``assets/parts``: blades,
assists, ratchets, bits and launch types. Each row is a plain dict keyed by
the catalog's own id column.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

from bladearena.core import paths
from bladearena.core.errors import CatalogError, DataLoadError
from bladearena.core.logging import logger
from bladearena.battle.models import LaunchType

Row = Dict[str, Any]

# catalog name -> (file attribute on core.paths, id column)
CATALOGS: Dict[str, Tuple[str, str]] = {
    "blade": ("BLADES", "blade_id"),
    "assist": ("ASSISTS", "assist_id"),
    "ratchet": ("RATCHETS", "ratchet_id"),
    "bit": ("BITS", "bit_id"),
    "launch_type": ("LAUNCH_TYPES", "id"),
}

def _catalog_path(catalog: str) -> Path:
    try:
        attr, _ = CATALOGS[catalog]
    except KeyError:
        raise CatalogError(catalog, "unknown catalog") from None
    return getattr(paths, attr)

@lru_cache(maxsize=None)
def load_catalog(catalog: str) -> Tuple[Row, ...]:
    path = _catalog_path(catalog)
    if not path.exists():
        logger.warn("CatalogMissing", catalog=catalog, path=str(path))
        return ()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(str(path), str(e)) from e
    if not isinstance(raw, list):
        raise DataLoadError(str(path), "expected a JSON list of rows")
    logger.debug("CatalogLoaded", catalog=catalog, rows=len(raw))
    return tuple(raw)

def get_part(catalog: str, part_id: str) -> Row:
    rows = load_catalog(catalog)
    id_col = CATALOGS[catalog][1]
    for row in rows:
        if str(row.get(id_col)) == part_id:
            return dict(row)
    raise CatalogError(catalog, f"no entry with id {part_id!r}")

def get_blade(blade_id: str) -> Row: return get_part("blade", blade_id)
def get_assist(assist_id: str) -> Row: return get_part("assist", assist_id)
def get_ratchet(ratchet_id: str) -> Row: return get_part("ratchet", ratchet_id)
def get_bit(bit_id: str) -> Row: return get_part("bit", bit_id)

def get_launch_type(launch_id: str) -> LaunchType:
    return LaunchType.from_mapping(get_part("launch_type", launch_id))

def all_launch_types() -> Tuple[LaunchType, ...]:
    return tuple(LaunchType.from_mapping(r) for r in load_catalog("launch_type"))

def clear_cache():
    load_catalog.cache_clear()

# Simple CLI for debugging
if __name__ == "__main__":
    import sys
    if len(sys.argv) == 3:
        print(json.dumps(get_part(sys.argv[1], sys.argv[2]), indent=2))
    else:
        for name in CATALOGS:
            print(f"{name}: {len(load_catalog(name))} rows")
