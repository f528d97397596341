"""
Strain catalog loader: JSON -> validated ``Strain`` list.

Responsibilities
----------------
1. Read a strains JSON file (default ``config/strains/seed_strains.json``).
2. Reject structurally invalid input (non-list root, missing ids, duplicate
   ids) with a ``ValueError`` that names the offending record.
3. Validate every record through the ``Strain`` model.

Read-only: the catalog is never written back.

Record format
-------------
    {
      "id": "seed-001",
      "name": "Blue Dream",
      "thc": 21,
      "cbd": 0.1,
      "compounds": ["Myrcene", "Caryophyllene", "Pinene"],
      "notes": "Classic hybrid. Sweet berry aroma."
    }

Usage
-----
    from cannablend.catalog.seed_loader import load_strain_catalog

    strains = load_strain_catalog(Path("config/strains/seed_strains.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cannablend.models.strain import Strain
from cannablend.taxonomy.experience_taxonomy import is_standard_compound

log = logging.getLogger(__name__)


# ── Validation ────────────────────────────────────────────────────────────────

def _validate_records(records: Any) -> None:
    """Raise ValueError for structural problems in the raw strains list."""
    if not isinstance(records, list):
        raise ValueError(
            f"Strain catalog must be a JSON array, got {type(records).__name__}."
        )
    seen_ids: set[str] = set()
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Strain at index {i} is not an object.")
        strain_id = rec.get("id")
        if not strain_id:
            raise ValueError(f"Strain at index {i} is missing 'id' field.")
        if strain_id in seen_ids:
            raise ValueError(f"Duplicate strain id '{strain_id}' at index {i}.")
        seen_ids.add(strain_id)


def _record_to_strain(rec: dict[str, Any]) -> Strain:
    fields: dict[str, Any] = {
        "strain_id": rec["id"],
        "name": rec.get("name", ""),
        "thc_percent": rec.get("thc"),
        "cbd_percent": rec.get("cbd"),
        "dominant_compounds": rec.get("compounds", []),
        "notes": rec.get("notes"),
    }
    for key in ("created_at", "updated_at"):
        if rec.get(key):
            fields[key] = rec[key]
    return Strain(**fields)


# ── Public API ────────────────────────────────────────────────────────────────

def parse_strain_catalog(records: Any) -> list[Strain]:
    """Validate already-decoded JSON records and build ``Strain`` objects.

    Raises:
        ValueError: On structural problems (see module docstring).
        pydantic.ValidationError: If a record fails ``Strain`` validation.
    """
    _validate_records(records)
    strains = [_record_to_strain(rec) for rec in records]

    custom = sorted({
        name
        for s in strains
        for name in s.dominant_compounds
        if not is_standard_compound(name)
    })
    if custom:
        log.info("Catalog uses %d custom compound(s): %s", len(custom), ", ".join(custom))

    return strains


def load_strain_catalog(path: Path) -> list[Strain]:
    """Load and validate a strain catalog JSON file.

    Args:
        path: Path to the strains JSON file.

    Returns:
        Strains in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On invalid JSON or structural problems.
        pydantic.ValidationError: If a record fails ``Strain`` validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Strain catalog not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Strain catalog {path} is not valid JSON: {exc}") from exc

    strains = parse_strain_catalog(records)
    log.info("Loaded %d strain(s) from %s", len(strains), path)
    return strains
