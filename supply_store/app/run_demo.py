"""Walk a product through insert/replace/remove via the router, then reset."""

from __future__ import annotations

import logging

from .main import build_environment
from ..core.config import load_settings

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - manual run
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    stores, router = build_environment(settings)

    gadget = {
        "productId": 100,
        "supplierId": 1,
        "name": "Gadget",
        "description": "Demo product",
        "price": 9.99,
        "sku": "DEMO-100",
        "unit": "piece",
    }
    steps = [
        ("POST", "/api/products", gadget),
        ("PUT", "/api/products/100", {**gadget, "name": "Gadget Pro"}),
        ("GET", "/api/products/100", None),
        ("DELETE", "/api/products/100", None),
        ("GET", "/api/products/100", None),
    ]
    for method, path, body in steps:
        resp = router.handle(method, path, body)
        logger.info("%s %s -> %d %s", method, path, resp.status, resp.body)

    stores.reset_all()
    print("Demo done. Products after reset:", len(stores.products))


if __name__ == "__main__":  # pragma: no cover
    main()
