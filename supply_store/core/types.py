"""Core record definitions for the supply-chain data layer.

Every entity carries a numeric identifier chosen by the caller plus a few
scalar attributes. Reference attributes (``branch_id`` on an Order, etc.)
are plain labels; nothing checks that the referenced record exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Type


@dataclass
class Headquarters:
    id_field: ClassVar[str] = "headquarters_id"

    headquarters_id: int
    name: str
    description: str = ""
    address: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""


@dataclass
class Branch:
    id_field: ClassVar[str] = "branch_id"

    branch_id: int
    headquarters_id: int
    name: str
    description: str = ""
    address: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""


@dataclass
class Supplier:
    id_field: ClassVar[str] = "supplier_id"

    supplier_id: int
    name: str
    description: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""


@dataclass
class Product:
    id_field: ClassVar[str] = "product_id"

    product_id: int
    supplier_id: int
    name: str
    description: str = ""
    price: float = 0.0
    sku: str = ""
    unit: str = ""
    img_name: str = ""
    discount: Optional[float] = None


@dataclass
class Order:
    id_field: ClassVar[str] = "order_id"

    order_id: int
    branch_id: int
    order_date: str
    name: str
    description: str = ""
    status: str = "pending"


@dataclass
class OrderDetail:
    id_field: ClassVar[str] = "order_detail_id"

    order_detail_id: int
    order_id: int
    product_id: int
    quantity: int
    unit_price: float
    notes: str = ""


@dataclass
class Delivery:
    id_field: ClassVar[str] = "delivery_id"

    delivery_id: int
    supplier_id: int
    delivery_date: str
    name: str
    description: str = ""
    status: str = "pending"


@dataclass
class OrderDetailDelivery:
    id_field: ClassVar[str] = "order_detail_delivery_id"

    order_detail_delivery_id: int
    order_detail_id: int
    delivery_id: int
    quantity: int
    notes: str = ""


# entity name -> record class; names double as keys in seed files and stores
ENTITY_TYPES: Dict[str, Type] = {
    "headquarters": Headquarters,
    "branches": Branch,
    "suppliers": Supplier,
    "products": Product,
    "orders": Order,
    "order_details": OrderDetail,
    "deliveries": Delivery,
    "order_detail_deliveries": OrderDetailDelivery,
}
