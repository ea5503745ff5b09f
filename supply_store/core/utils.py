"""Small utilities."""

from __future__ import annotations

import re
from typing import Any

_ID = re.compile(r"-?[0-9]+")

TRUTHY = {"1", "true", "yes", "on"}


def parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUTHY


def parse_id(raw: Any) -> int | None:
    """Return ``raw`` as an integer identifier, or None if it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _ID.fullmatch(raw):
        return None
    return int(raw)
