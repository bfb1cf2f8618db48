# icloud_pricing/pricing/normalize.py
import logging
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from ..config import DEFAULT_BENCHMARK_PLAN, DEFAULT_REFERENCE_CURRENCY
from ..models import Dataset, ExchangeRateTable, PlanPrice, Region

_LOGGER = logging.getLogger(__name__)

DEFAULT_SOURCE_DESCRIPTION = "Apple Support + ExchangeRate-API"


def round_half_up(value: float, digits: int = 2) -> float:
    """Round half away from zero on the scaled value (Python's round() is banker's)."""
    scale = 10 ** digits
    scaled = math.floor(abs(value) * scale + 0.5)
    return math.copysign(scaled / scale, value)


def convert_price(
    price: float,
    currency: str,
    rates: ExchangeRateTable,
    reference: str = DEFAULT_REFERENCE_CURRENCY,
) -> float:
    """
    Convert a local price into the reference currency.

    Rates are "1 USD = rate units", so local -> USD -> reference. A missing
    rate on either side passes the original price through untouched.
    """
    cur = (currency or "").upper()
    ref = (reference or "").upper()
    if cur == ref:
        return price

    source_rate = rates.get(cur)
    reference_rate = rates.get(ref)
    if not source_rate or not reference_rate:
        _LOGGER.warning("No exchange rate for %s -> %s, keeping original price %s", cur, ref, price)
        return price

    return round_half_up((price / source_rate) * reference_rate, 2)


def benchmark_price(region: Region, plan_name: str) -> float:
    plan = region.find_plan(plan_name)
    if plan is None or plan.price_in_reference is None:
        return math.inf
    return plan.price_in_reference


def rank_regions(regions: Sequence[Region], plan_name: str = DEFAULT_BENCHMARK_PLAN) -> List[Region]:
    """Ascending by the plan's reference price; regions without it go last (stable)."""
    return sorted(regions, key=lambda r: benchmark_price(r, plan_name))


def normalize_region(region: Region, rates: ExchangeRateTable, reference: str) -> Region:
    plans = [
        PlanPrice(
            name=plan.name,
            price=plan.price,
            price_in_reference=convert_price(plan.price, region.currency, rates, reference),
        )
        for plan in region.plans
    ]
    return region.with_plans(plans)


def normalize(
    regions: Sequence[Region],
    rates: ExchangeRateTable,
    reference: str = DEFAULT_REFERENCE_CURRENCY,
    *,
    benchmark: str = DEFAULT_BENCHMARK_PLAN,
    source: str = DEFAULT_SOURCE_DESCRIPTION,
    now: Optional[Callable[[], datetime]] = None,
) -> Dataset:
    generated = (now or (lambda: datetime.now(timezone.utc)))()
    normalized = [normalize_region(r, rates, reference) for r in regions]
    return Dataset(
        last_updated=generated.isoformat(),
        source=source,
        regions=rank_regions(normalized, benchmark),
    )
