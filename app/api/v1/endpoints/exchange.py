# app/api/v1/endpoints/exchange.py
from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.domain.services.conversion_service import convert_with_latest_rates, normalize_currency
from app.domain.services.formatting import round_amount, round_rate
from app.infra.providers.fixer import FixerClient, get_fixer_client
from app.schemas.exchange_schemas import (
    ConversionDetail,
    ConvertRequest,
    ConvertResponse,
    ErrorResponse,
    RatesResponse,
)

router = APIRouter(tags=["exchange"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@router.get("/rates", response_model=RatesResponse, responses={502: {"model": ErrorResponse}})
@limiter.limit(settings.RATE_LIMIT)
def get_rates(request: Request, client: FixerClient = Depends(get_fixer_client)):
    snapshot = client.latest()
    return RatesResponse(
        base=snapshot.base,
        date=snapshot.date,
        timestamp=snapshot.timestamp,
        rates=snapshot.with_base(),
    )


@router.post("/convert", response_model=ConvertResponse, responses=ERROR_RESPONSES)
@limiter.limit(settings.RATE_LIMIT)
def convert_currency(
    request: Request,
    payload: ConvertRequest,
    client: FixerClient = Depends(get_fixer_client),
):
    result, snapshot = convert_with_latest_rates(
        client, payload.source, payload.target, payload.amount
    )
    target = normalize_currency(payload.target)

    return ConvertResponse(
        result=ConversionDetail(
            source=normalize_currency(payload.source),
            target=target,
            amount=payload.amount,
            convertedAmount=round_amount(result.converted, target),
            rate=round_rate(result.rate),
            date=snapshot.date,
        )
    )
