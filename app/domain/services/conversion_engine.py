# app/domain/services/conversion_engine.py
"""Pivot conversion between currencies quoted against a single base."""
import math
from collections.abc import Mapping
from numbers import Real
from typing import Dict, List

from app.domain.entities.conversion import ConversionRequest, ConversionResult
from app.domain.errors import InvalidAmount, RateTableUnavailable, UnsupportedCurrency


def _check_amount(amount) -> float:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise InvalidAmount(amount)
    amount = float(amount)
    if not math.isfinite(amount) or amount < 0:
        raise InvalidAmount(amount)
    return amount


def _check_rate_table(rate_table, base: str) -> Dict[str, float]:
    if rate_table is None or not isinstance(rate_table, Mapping) or not rate_table:
        raise RateTableUnavailable("Rate table is missing")

    table: Dict[str, float] = {}
    for code, rate in rate_table.items():
        if isinstance(rate, bool) or not isinstance(rate, Real):
            raise RateTableUnavailable(f"Malformed rate for {code}: {rate!r}")
        rate = float(rate)
        if not math.isfinite(rate) or rate <= 0:
            raise RateTableUnavailable(f"Malformed rate for {code}: {rate!r}")
        table[code] = rate

    if table.get(base, 1.0) != 1.0:
        raise RateTableUnavailable(f"Base currency {base} must have rate 1.0, got {table[base]}")
    table[base] = 1.0
    return table


def convert(request: ConversionRequest, rate_table: Mapping, base: str) -> ConversionResult:
    """Convert ``request.amount`` from ``request.source`` to ``request.target``.

    ``rate_table`` holds units of each currency per one unit of ``base``.
    Values are returned at full precision; rounding belongs to the caller.
    """
    amount = _check_amount(request.amount)
    table = _check_rate_table(rate_table, base)

    missing: List[UnsupportedCurrency] = []
    if request.source not in table:
        missing.append(UnsupportedCurrency(request.source, "from"))
    if request.target not in table:
        missing.append(UnsupportedCurrency(request.target, "to"))
    if missing:
        raise missing[0]

    if request.source == request.target:
        return ConversionResult(converted=amount, rate=1.0)

    rate_from = table[request.source]
    rate_to = table[request.target]

    if request.source == base:
        converted = amount * rate_to
    elif request.target == base:
        converted = amount / rate_from
    else:
        converted = (amount / rate_from) * rate_to

    rate = rate_to / rate_from
    if not math.isfinite(rate):
        raise RateTableUnavailable(f"Rate {request.source}->{request.target} is out of range")
    if not math.isfinite(converted):
        raise InvalidAmount(amount, "converted amount is out of range")

    return ConversionResult(converted=converted, rate=rate)
