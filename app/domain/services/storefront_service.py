# app/domain/services/storefront_service.py
"""Cart pricing for the demo storefront."""
import logging
from typing import Dict, List, Optional

from app.domain.entities.conversion import ConversionRequest, RateSnapshot
from app.domain.entities.storefront import CartItem, CartQuote, CartState, Product, QuoteLine
from app.domain.errors import UnsupportedCurrency
from app.domain.services.conversion_engine import convert
from app.domain.services.formatting import format_money

logger = logging.getLogger(__name__)

PRICE_CURRENCY = "USD"
SHIPPING_RATE = 10.00  # USD
TAX_RATE = 0.08
MAX_QUANTITY = 999

CATALOG: List[Product] = [
    Product(1, "Premium Wireless Headphones", "Noise-cancelling with 20hr battery life",
            "headphone-159569_640.png", 199.99),
    Product(2, "Smart Fitness Watch", "Track your health with precision",
            "watch-42803_640.png", 149.50),
    Product(3, "Ultralight Gaming Desktop", "Powerful computing on the go",
            "computer-158743_640.png", 1299.00),
    Product(4, "Wireless Charging Pad", "Fast charging for all your devices",
            "charge-159707_640.png", 49.99),
]


def default_cart(currency: str = PRICE_CURRENCY, quantities: Optional[Dict[int, int]] = None) -> CartState:
    """Every catalogue product once, unless overridden by ``quantities``."""
    quantities = quantities or {}
    items = [
        CartItem(product=p, quantity=min(MAX_QUANTITY, max(1, quantities.get(p.id, 1))))
        for p in CATALOG
    ]
    return CartState(currency=currency.upper(), items=items)


def price_cart(state: CartState, snapshot: RateSnapshot) -> CartQuote:
    """Price ``state`` in its selected currency.

    An unsupported currency falls back to unconverted USD amounts; a
    missing rate table propagates to the caller.
    """
    currency = state.currency
    notice = None

    def to_display(amount: float) -> float:
        if notice is not None:
            return amount
        request = ConversionRequest(source=PRICE_CURRENCY, target=currency, amount=amount)
        return convert(request, snapshot.rates, snapshot.base).converted

    try:
        base_rate = convert(
            ConversionRequest(source=snapshot.base, target=currency, amount=1.0),
            snapshot.rates,
            snapshot.base,
        ).rate
        shipping = to_display(SHIPPING_RATE)
    except UnsupportedCurrency as e:
        logger.warning(f"Storefront falling back to {PRICE_CURRENCY}: {e}")
        notice = str(e)
        currency = PRICE_CURRENCY
        base_rate = None
        shipping = SHIPPING_RATE

    lines = []
    subtotal = 0.0
    for item in state.items:
        unit_price = to_display(item.product.price)
        line_total = unit_price * item.quantity
        subtotal += line_total
        lines.append(QuoteLine(
            product_id=item.product.id,
            name=item.product.name,
            description=item.product.description,
            quantity=item.quantity,
            unit_price=unit_price,
            line_total=line_total,
            unit_price_display=format_money(unit_price, currency),
        ))

    tax = subtotal * TAX_RATE

    return CartQuote(
        currency=currency,
        converted=notice is None,
        lines=lines,
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
        base=snapshot.base,
        date=snapshot.date,
        base_rate=base_rate,
        notice=notice,
    )
