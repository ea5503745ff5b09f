"""Load seed overrides from a JSON file.

The file holds an object keyed by entity name (``products``,
``order_details``, ...) with a list of camelCase payloads per entity.
Entities absent from the file keep their built-in seed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..core.types import ENTITY_TYPES
from ..validation.schema import from_payload

logger = logging.getLogger(__name__)


class SeedFileError(ValueError):
    pass


def read_json(path: str | Path) -> Any:
    p = Path(path)
    with p.open(encoding="utf-8") as f:
        return json.load(f)


def load_seed_file(path: str | Path) -> Dict[str, List[Any]]:
    try:
        raw = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SeedFileError(f"{path}: cannot decode ({exc})") from exc
    if not isinstance(raw, dict):
        raise SeedFileError(f"{path}: expected an object keyed by entity name")

    seed: Dict[str, List[Any]] = {}
    for name, payloads in raw.items():
        cls = ENTITY_TYPES.get(name)
        if cls is None:
            raise SeedFileError(f"{path}: unknown entity '{name}'")
        if not isinstance(payloads, list):
            raise SeedFileError(f"{path}: '{name}' must be a list")
        try:
            seed[name] = [from_payload(cls, p) for p in payloads]
        except ValueError as exc:
            raise SeedFileError(f"{path}: bad '{name}' record: {exc}") from exc
        logger.info("Loaded %d %s seed records from %s", len(seed[name]), name, path)
    return seed
