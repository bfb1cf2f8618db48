import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from icloud_pricing.models import Dataset, PlanPrice, Region


def _make_region(iso, country, currency, plans):
    return Region(
        country_iso=iso,
        country=country,
        currency=currency,
        plans=[PlanPrice(name=n, price=p, price_in_reference=c) for n, p, c in plans],
    )


@pytest.fixture
def make_region():
    return _make_region


@pytest.fixture
def sample_dataset() -> Dataset:
    return Dataset(
        last_updated="2026-10-01T08:00:00+00:00",
        source="unit-test",
        regions=[
            _make_region("CN", "China", "CNY", [("50GB", 6.0, 6.0), ("2TB", 68.0, 68.0)]),
            _make_region("US", "United States", "USD", [("50GB", 0.99, 7.13), ("2TB", 9.99, 71.93)]),
            _make_region("JP", "Japan", "JPY", [("50GB", 150.0, 7.2), ("2TB", 1500.0, 72.0)]),
            _make_region("RU", "Russia", "RUB", [("2TB", 599.0, 52.3)]),
        ],
    )
