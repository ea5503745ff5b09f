"""App bootstrap: settings -> seeded stores -> router."""

from __future__ import annotations

from typing import Optional

from ..api.router import Router
from ..core.config import Settings, load_settings
from ..io.seed_file import load_seed_file
from ..state.seed import build_stores
from ..state.store import Stores


def build_environment(settings: Optional[Settings] = None) -> tuple[Stores, Router]:
    settings = settings or load_settings()
    overrides = load_seed_file(settings.seed_path) if settings.seed_path else None
    stores = build_stores(overrides)
    router = Router(stores, validate=settings.validate_payloads)
    return stores, router
