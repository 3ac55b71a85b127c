# app/domain/entities/storefront.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    image: str
    price: float  # USD


@dataclass
class CartItem:
    product: Product
    quantity: int = 1


@dataclass
class CartState:
    """UI-owned state: selected currency and cart lines."""

    currency: str = "USD"
    items: List[CartItem] = field(default_factory=list)


@dataclass
class QuoteLine:
    product_id: int
    name: str
    description: str
    quantity: int
    unit_price: float
    line_total: float
    unit_price_display: str


@dataclass
class CartQuote:
    currency: str
    converted: bool
    lines: List[QuoteLine]
    subtotal: float
    shipping: float
    tax: float
    total: float
    base: str
    date: Optional[str]
    base_rate: Optional[float]
    notice: Optional[str] = None
