# app/domain/entities/conversion.py
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class ConversionRequest:
    source: str
    target: str
    amount: float


@dataclass(frozen=True)
class ConversionResult:
    converted: float
    rate: float


@dataclass
class RateSnapshot:
    """Rate table as returned by the provider, plus its metadata."""

    base: str
    date: Optional[str]
    rates: Dict[str, float] = field(default_factory=dict)
    timestamp: Optional[int] = None

    def with_base(self) -> Dict[str, float]:
        """Rates including the implicit base entry."""
        rates = dict(self.rates)
        rates[self.base] = 1.0
        return rates
