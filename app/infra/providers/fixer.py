# app/infra/providers/fixer.py
import logging
from typing import Any, Dict, Optional

import requests

from app.core.config import settings
from app.domain.entities.conversion import RateSnapshot
from app.domain.errors import RateTableUnavailable

logger = logging.getLogger(__name__)


class FixerClient:
    """Thin client for the Fixer ``/latest`` endpoint. No caching, no retries."""

    def __init__(
        self,
        access_key: str,
        base_url: str = "http://data.fixer.io/api",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def latest_payload(self) -> Dict[str, Any]:
        """Raw JSON document from Fixer, checked for the success flag."""
        url = f"{self.base_url}/latest"
        logger.info(f"Fetching latest rates from {url}")
        try:
            r = self.session.get(url, params={"access_key": self.access_key}, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching exchange rates: {e}")
            raise RateTableUnavailable(f"Failed to fetch exchange rates: {e}") from e
        except ValueError as e:
            logger.error(f"Fixer returned a non-JSON body: {e}")
            raise RateTableUnavailable("Failed to fetch exchange rates: invalid response") from e

        if not isinstance(data, dict) or not data.get("success"):
            detail = _error_detail(data)
            logger.error(f"Fixer reported an error: {detail}")
            raise RateTableUnavailable(detail)

        return data

    def latest(self) -> RateSnapshot:
        data = self.latest_payload()
        rates = data.get("rates")
        base = data.get("base")
        if not isinstance(rates, dict) or not base:
            raise RateTableUnavailable("Fixer response is missing rates or base")

        snapshot = RateSnapshot(
            base=str(base).upper(),
            date=data.get("date"),
            rates=rates,
            timestamp=data.get("timestamp"),
        )
        logger.info(f"Rates loaded: {len(rates)} currencies against {snapshot.base} ({snapshot.date})")
        return snapshot


def _error_detail(data: Any) -> str:
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        return error.get("info") or error.get("type") or "Unknown error"
    return "Unknown error"


def get_fixer_client() -> FixerClient:
    """FastAPI dependency; also used by the CLI."""
    return FixerClient(
        access_key=settings.FIXER_API_KEY,
        base_url=settings.FIXER_BASE_URL,
        timeout=settings.FIXER_TIMEOUT,
    )
