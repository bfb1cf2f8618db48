# icloud_pricing/pricing/rates.py
import logging
from typing import Any, Dict

from ..config import PricingConfig
from ..errors import ParseError
from ..models import ExchangeRateTable
from .http_fetch import fetch_json

_LOGGER = logging.getLogger(__name__)

EXPECTED_BASE = "USD"


def parse_rates(payload: Any) -> ExchangeRateTable:
    """
    Extract the currency -> rate table from an exchangerate-api style payload:
    {"base": "USD", "rates": {"CNY": 7.2, ...}}
    """
    if not isinstance(payload, dict):
        raise ParseError("exchange-rate payload is not a JSON object")

    raw_rates = payload.get("rates")
    if not isinstance(raw_rates, dict) or not raw_rates:
        raise ParseError("exchange-rate payload has no 'rates' object")

    base = str(payload.get("base") or payload.get("base_code") or EXPECTED_BASE).upper()
    if base != EXPECTED_BASE:
        # Conversion below still assumes USD quotes.
        _LOGGER.warning("Exchange rates are quoted against %s, expected %s", base, EXPECTED_BASE)

    rates: Dict[str, float] = {}
    for code, value in raw_rates.items():
        if isinstance(value, bool):
            continue
        try:
            rate = float(value)
        except (TypeError, ValueError):
            _LOGGER.warning("Dropping non-numeric rate %s=%r", code, value)
            continue
        if rate <= 0:
            _LOGGER.warning("Dropping non-positive rate %s=%r", code, value)
            continue
        rates[str(code).upper()] = rate

    if not rates:
        raise ParseError("exchange-rate payload contains no usable rates")
    return rates


class RateProvider:
    def __init__(self, config: PricingConfig):
        self.config = config

    def get_rates(self) -> ExchangeRateTable:
        """Fetch rates once. NetworkError / ParseError propagate to the caller."""
        payload = fetch_json(self.config.exchange_api_url, timeout=self.config.request_timeout)
        rates = parse_rates(payload)
        _LOGGER.info("Fetched %d exchange rates from %s", len(rates), self.config.exchange_api_url)
        return rates
