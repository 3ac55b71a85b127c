# app/domain/services/conversion_service.py
from typing import Tuple

from app.domain.entities.conversion import ConversionRequest, ConversionResult, RateSnapshot
from app.domain.services.conversion_engine import convert
from app.infra.providers.fixer import FixerClient


def normalize_currency(code: str) -> str:
    return code.strip().upper()


def convert_with_latest_rates(
    client: FixerClient,
    source: str,
    target: str,
    amount: float,
) -> Tuple[ConversionResult, RateSnapshot]:
    """Fetch a fresh snapshot and run the conversion against it."""
    snapshot = client.latest()
    request = ConversionRequest(
        source=normalize_currency(source),
        target=normalize_currency(target),
        amount=amount,
    )
    return convert(request, snapshot.rates, snapshot.base), snapshot
