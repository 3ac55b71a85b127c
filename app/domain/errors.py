# app/domain/errors.py
from typing import Optional


class ConversionError(Exception):
    """Base class for errors reported by the conversion core."""


class UnsupportedCurrency(ConversionError):
    def __init__(self, code: str, side: str):
        self.code = code
        self.side = side
        super().__init__(f"Currency not supported: {code} ({side})")


class InvalidAmount(ConversionError):
    def __init__(self, amount, reason: Optional[str] = None):
        self.amount = amount
        self.reason = reason
        message = f"Invalid amount: {amount!r}"
        super().__init__(f"{message} ({reason})" if reason else message)


class RateTableUnavailable(ConversionError):
    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or "Exchange rates unavailable"
        super().__init__(self.detail)
