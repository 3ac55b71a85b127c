# app/domain/services/formatting.py
from typing import Dict, Set

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "C$",
    "AUD": "A$",
    "CNY": "¥",
    "CHF": "Fr",
}

# ISO 4217 currencies without minor units
ZERO_DECIMAL_CURRENCIES: Set[str] = {
    "BIF", "CLP", "DJF", "GNF", "ISK", "JPY", "KMF", "KRW",
    "PYG", "RWF", "UGX", "VND", "VUV", "XAF", "XOF", "XPF",
}

RATE_DECIMALS = 6


def decimals_for(currency: str) -> int:
    return 0 if currency.upper() in ZERO_DECIMAL_CURRENCIES else 2


def round_amount(amount: float, currency: str) -> float:
    return round(amount, decimals_for(currency))


def round_rate(rate: float) -> float:
    return round(rate, RATE_DECIMALS)


def format_money(amount: float, currency: str) -> str:
    """Amount with the currency symbol, e.g. ``$199.99`` or ``¥21960``."""
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{symbol}{amount:.{decimals_for(code)}f}"
