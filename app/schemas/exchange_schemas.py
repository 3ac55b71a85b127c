# app/schemas/exchange_schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class RatesResponse(BaseModel):
    success: bool = True
    base: str
    date: Optional[str]
    timestamp: Optional[int] = None
    rates: Dict[str, float]


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from", min_length=1)
    target: str = Field(alias="to", min_length=1)
    amount: float


class ConversionDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    amount: float
    convertedAmount: float
    rate: float
    date: Optional[str]


class ConvertResponse(BaseModel):
    success: bool = True
    result: ConversionDetail


class ErrorResponse(BaseModel):
    detail: str
    code: Optional[str] = None
    side: Optional[str] = None


class QuoteLineOut(BaseModel):
    product_id: int
    name: str
    description: str
    quantity: int
    unit_price: float
    line_total: float
    unit_price_display: str


class StorefrontQuote(BaseModel):
    currency: str
    converted: bool
    lines: List[QuoteLineOut]
    subtotal: float
    shipping: float
    tax: float
    total: float
    display: Dict[str, str]
    rate_info: Optional[str]
    notice: Optional[str] = None
