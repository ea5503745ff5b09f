"""Static seed data and store construction."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..core.types import (
    ENTITY_TYPES,
    Branch,
    Delivery,
    Headquarters,
    Order,
    OrderDetail,
    OrderDetailDelivery,
    Product,
    Supplier,
)
from .store import EntityStore, Stores

Seed = Dict[str, List[Any]]


def default_seed() -> Seed:
    """Fresh seed collections; callers may mutate the result freely."""
    return {
        "headquarters": [
            Headquarters(
                1,
                "Cat Supply Co. HQ",
                "Central purchasing and distribution office",
                "123 Main Street, Seattle, WA",
                "Mona Lisa",
                "hq@catsupply.example",
                "555-0100",
            ),
        ],
        "branches": [
            Branch(1, 1, "Downtown", "Flagship store", "1 Pike Place, Seattle, WA",
                   "Sam Ortiz", "downtown@catsupply.example", "555-0101"),
            Branch(2, 1, "Bellevue", "Eastside branch", "500 Bellevue Way, Bellevue, WA",
                   "Jordan Lee", "bellevue@catsupply.example", "555-0102"),
            Branch(3, 1, "Tacoma", "South Sound branch", "900 Pacific Ave, Tacoma, WA",
                   "Riley Chen", "tacoma@catsupply.example", "555-0103"),
        ],
        "suppliers": [
            Supplier(1, "Purrfect Supplies", "Cat toys and accessories",
                     "Alex Kim", "sales@purrfect.example", "555-0201"),
            Supplier(2, "Whisker Works", "Smart feeders and fountains",
                     "Pat Morgan", "orders@whiskerworks.example", "555-0202"),
            Supplier(3, "Feline Fabrics", "Beds, blankets and scratchers",
                     "Drew Patel", "hello@felinefabrics.example", "555-0203"),
        ],
        "products": [
            Product(1, 1, "Laser Pointer Pro", "Auto-rotating laser toy", 24.99,
                    "TOY-LASER-001", "piece", "laser-pointer.png"),
            Product(2, 2, "SmartFeeder One", "App-controlled food dispenser", 129.99,
                    "FEED-SMART-001", "piece", "smart-feeder.png", 0.1),
            Product(3, 2, "Hydra Fountain", "Filtered water fountain", 49.5,
                    "WATER-FTN-001", "piece", "fountain.png"),
            Product(4, 3, "Cozy Cube Bed", "Enclosed bed with cushion", 39.0,
                    "BED-CUBE-001", "piece", "cube-bed.png", 0.25),
            Product(5, 3, "Sisal Scratch Post", "Tall sisal scratching post", 29.95,
                    "SCR-POST-001", "piece", "scratch-post.png"),
            Product(6, 1, "Feather Wand", "Teaser wand with feathers", 7.5,
                    "TOY-WAND-001", "box", "feather-wand.png"),
        ],
        "orders": [
            Order(1, 1, "2024-05-01T09:00:00Z", "Spring restock",
                  "Toys and feeders for spring", "delivered"),
            Order(2, 2, "2024-05-10T14:30:00Z", "Bed refresh",
                  "New beds for the Bellevue floor", "processing"),
            Order(3, 3, "2024-05-12T11:15:00Z", "Opening stock",
                  "Initial stock for Tacoma", "pending"),
        ],
        "order_details": [
            OrderDetail(1, 1, 1, 20, 24.99, "Display units included"),
            OrderDetail(2, 1, 2, 5, 129.99),
            OrderDetail(3, 2, 4, 10, 39.0),
            OrderDetail(4, 3, 5, 8, 29.95, "Assembly required"),
        ],
        "deliveries": [
            Delivery(1, 1, "2024-05-05T10:00:00Z", "Purrfect shipment",
                     "Toys for order 1", "delivered"),
            Delivery(2, 2, "2024-05-06T10:00:00Z", "Whisker Works shipment",
                     "Feeders for order 1", "delivered"),
            Delivery(3, 3, "2024-05-15T10:00:00Z", "Feline Fabrics shipment",
                     "Beds for order 2", "in-transit"),
        ],
        "order_detail_deliveries": [
            OrderDetailDelivery(1, 1, 1, 20),
            OrderDetailDelivery(2, 2, 2, 5),
            OrderDetailDelivery(3, 3, 3, 6, "Partial, remainder backordered"),
        ],
    }


def build_stores(overrides: Optional[Mapping[str, List[Any]]] = None) -> Stores:
    """Build all eight stores from the default seed, replacing any entity in ``overrides``."""
    seed = default_seed()
    if overrides:
        seed.update(overrides)
    return Stores(
        **{
            name: EntityStore(name, cls.id_field, seed.get(name, []))
            for name, cls in ENTITY_TYPES.items()
        }
    )
