"""Launcher query: argument tokenizing, region filtering and ranking."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_BENCHMARK_PLAN, PLAN_TYPES
from .models import Dataset, PlanPrice, Region
from .pricing.normalize import rank_regions

HELP_KEYWORDS = ("help", "?")
MIN_REGION_TOKEN = 2

_PLAN_LOOKUP = {p.lower(): p for p in PLAN_TYPES}


@dataclass(frozen=True)
class QueryRequest:
    plan: Optional[str] = None  # explicit tier, upper-case
    region: Optional[str] = None
    show_help: bool = False


@dataclass(frozen=True)
class QueryHit:
    region: Region
    plan: PlanPrice
    rank: Optional[int]  # None when listing every tier of one region


def parse_query(argv: Iterable[str]) -> QueryRequest:
    """
    Tokenize free-text launcher input.

    A token from the tier vocabulary always counts as a tier, never as a
    region. Any other token of two or more characters is the region token
    (the last one wins). Everything else is ignored.
    """
    query = " ".join(argv).lower().strip()
    if query in HELP_KEYWORDS:
        return QueryRequest(show_help=True)

    plan: Optional[str] = None
    region: Optional[str] = None
    for part in re.split(r"\s+", query):
        if not part:
            continue
        if part in _PLAN_LOOKUP:
            plan = _PLAN_LOOKUP[part]
        elif len(part) >= MIN_REGION_TOKEN:
            region = part
    return QueryRequest(plan=plan, region=region)


def filter_regions(regions: Sequence[Region], token: Optional[str]) -> List[Region]:
    if not token:
        return list(regions)
    needle = token.upper()
    return [
        r
        for r in regions
        if needle in r.country_iso.upper() or needle in r.country.upper()
    ]


def query(
    dataset: Dataset,
    plan: Optional[str] = None,
    region: Optional[str] = None,
    benchmark: str = DEFAULT_BENCHMARK_PLAN,
) -> List[QueryHit]:
    filtered = filter_regions(dataset.regions, region)

    if region and len(filtered) == 1:
        only = filtered[0]
        plans = only.plans
        if plan:
            # a tier the region does not offer shows the full list instead
            plans = [p for p in plans if p.name.upper() == plan.upper()] or plans
        return [QueryHit(region=only, plan=p, rank=None) for p in plans]

    selected = (plan or benchmark).upper()
    hits: List[QueryHit] = []
    for idx, r in enumerate(rank_regions(filtered, selected), start=1):
        found = r.find_plan(selected)
        if found is not None:
            hits.append(QueryHit(region=r, plan=found, rank=idx))
    return hits
