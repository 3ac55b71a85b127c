# app/api/v1/endpoints/storefront.py
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.domain.services.formatting import format_money
from app.domain.services.storefront_service import MAX_QUANTITY, default_cart, price_cart
from app.infra.providers.fixer import FixerClient, get_fixer_client
from app.schemas.exchange_schemas import QuoteLineOut, StorefrontQuote

router = APIRouter(prefix="/storefront", tags=["storefront"])


def _parse_quantities(raw: List[str]) -> Dict[int, int]:
    """``["1:2", "3:1"]`` -> ``{1: 2, 3: 1}``."""
    quantities = {}
    for item in raw:
        try:
            product_id, quantity = item.split(":", 1)
            product_id, quantity = int(product_id), int(quantity)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Invalid qty value: {item!r}")
        if quantity > MAX_QUANTITY:
            raise HTTPException(status_code=422, detail=f"Quantity for product {product_id} above {MAX_QUANTITY}")
        quantities[product_id] = quantity
    return quantities


@router.get("/quote", response_model=StorefrontQuote)
@limiter.limit(settings.RATE_LIMIT)
def get_quote(
    request: Request,
    currency: str = Query("USD", min_length=3, max_length=3),
    qty: List[str] = Query(default=[]),
    client: FixerClient = Depends(get_fixer_client),
):
    state = default_cart(currency, _parse_quantities(qty))
    quote = price_cart(state, client.latest())

    rate_info = None
    if quote.base_rate is not None:
        rate_info = (
            f"Exchange rate: 1 {quote.base} = {quote.base_rate:.6f} {quote.currency} ({quote.date})"
        )

    return StorefrontQuote(
        currency=quote.currency,
        converted=quote.converted,
        lines=[QuoteLineOut(**vars(line)) for line in quote.lines],
        subtotal=quote.subtotal,
        shipping=quote.shipping,
        tax=quote.tax,
        total=quote.total,
        display={
            "subtotal": format_money(quote.subtotal, quote.currency),
            "shipping": format_money(quote.shipping, quote.currency),
            "tax": format_money(quote.tax, quote.currency),
            "total": format_money(quote.total, quote.currency),
        },
        rate_info=rate_info,
        notice=quote.notice,
    )
