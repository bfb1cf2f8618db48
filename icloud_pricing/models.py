from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Optional

# Currency code -> units per 1 USD.
ExchangeRateTable = Dict[str, float]


@dataclass(frozen=True)
class PlanPrice:
    """One storage tier offered in a region."""

    name: str  # "50GB" | "200GB" | "2TB" | "6TB" | "12TB"
    price: float  # local currency
    price_in_reference: Optional[float] = None


@dataclass(frozen=True)
class Region:
    country_iso: str
    country: str
    currency: str
    plans: List[PlanPrice] = field(default_factory=list)

    def find_plan(self, name: str) -> Optional[PlanPrice]:
        wanted = (name or "").upper()
        for plan in self.plans:
            if plan.name.upper() == wanted:
                return plan
        return None

    def with_plans(self, plans: List[PlanPrice]) -> "Region":
        return replace(self, plans=list(plans))


@dataclass(frozen=True)
class Dataset:
    """Normalized snapshot written by the collection run and read by queries."""

    last_updated: str  # ISO-8601
    source: str
    regions: List[Region] = field(default_factory=list)

    def updated_at(self) -> Optional[datetime]:
        raw = (self.last_updated or "").strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(raw)
        except ValueError:
            return None
