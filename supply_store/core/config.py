"""Runtime settings read from the environment (and ``.env`` when present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .utils import parse_bool


@dataclass
class Settings:
    seed_path: Optional[str] = None
    validate_payloads: bool = True
    log_level: str = "INFO"


def load_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv()
    seed_path = os.getenv("SUPPLY_STORE_SEED_PATH") or None
    return Settings(
        seed_path=seed_path,
        validate_payloads=parse_bool(os.getenv("SUPPLY_STORE_VALIDATE"), default=True),
        log_level=(os.getenv("SUPPLY_STORE_LOG_LEVEL") or "INFO").upper(),
    )
