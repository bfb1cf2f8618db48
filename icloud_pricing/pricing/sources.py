"""Price sources.

A price source produces the list of regions with their local plan prices.
Sources are tried in priority order by collect_regions(); an empty list
means "no result" and moves on to the next source.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..config import PricingConfig
from ..errors import ParseError
from ..models import PlanPrice, Region
from .countries import resolve_iso
from .fallback import fallback_regions
from .http_fetch import fetch_text

_LOGGER = logging.getLogger(__name__)

HEADER_TAGS = ["h2", "h3", "h4", "strong", "b"]
COUNTRY_RE = re.compile(r"^(.+?)\s*\((\w{3})\)$")
PLAN_RE = re.compile(r"(\d+)\s*(GB|TB)[:\s]+(.+)", re.IGNORECASE)


def _clean_text(s: str) -> str:
    if not s:
        return ""
    s = (
        s.replace("\xa0", " ")
        .replace("\u202f", " ")
        .replace("\u2009", " ")
        .replace("\u200b", "")
        .replace("\ufeff", "")
    )
    return re.sub(r"\s+", " ", s).strip()


def parse_price(price_str: str) -> Optional[float]:
    """
    Turn a localized price string into a float, or None when nothing parses.

    "$0.99" -> 0.99, "1.234,56" -> 1234.56, "¥198" -> 198.0
    """
    cleaned = re.sub(r"[^\d.,]", "", price_str or "").replace(",", ".").rstrip(".")
    if not cleaned:
        return None

    # European grouping: "1.234,56" became "1.234.56" above
    parts = cleaned.split(".")
    if len(parts) > 2:
        cleaned = "".join(parts[:-1]) + "." + parts[-1]

    try:
        return float(cleaned)
    except ValueError:
        return None


def _following_list(header: Tag) -> Optional[Tag]:
    sibling = header.find_next_sibling(True)
    if sibling is None and header.parent is not None and header.parent.name == "p":
        sibling = header.parent.find_next_sibling(True)
    if sibling is not None and sibling.name in ("ul", "ol"):
        return sibling
    return None


def parse_apple_pricing(html: str) -> List[Region]:
    """Extract regions from the Apple support article. Returns [] when nothing matches."""
    soup = BeautifulSoup(html or "", "html.parser")
    regions: List[Region] = []
    seen: set[tuple[str, str]] = set()

    for header in soup.find_all(HEADER_TAGS):
        m = COUNTRY_RE.match(_clean_text(header.get_text()))
        if not m:
            continue
        country, currency = m.group(1).strip(), m.group(2).upper()
        if (country, currency) in seen:
            continue

        price_list = _following_list(header)
        if price_list is None:
            continue

        plans: List[PlanPrice] = []
        names: set[str] = set()
        for li in price_list.find_all("li"):
            pm = PLAN_RE.search(_clean_text(li.get_text()))
            if not pm:
                continue
            size, unit, price_str = pm.groups()
            name = f"{int(size)}{unit.upper()}"
            price = parse_price(price_str)
            if price is None or name in names:
                continue
            names.add(name)
            plans.append(PlanPrice(name=name, price=price))

        if plans:
            seen.add((country, currency))
            regions.append(
                Region(
                    country_iso=resolve_iso(country, currency),
                    country=country,
                    currency=currency,
                    plans=plans,
                )
            )

    return regions


class AppleSupportSource:
    name = "apple-support"

    def __init__(self, config: PricingConfig):
        self.config = config

    def fetch(self) -> List[Region]:
        html = fetch_text(self.config.apple_url, timeout=self.config.request_timeout)
        regions = parse_apple_pricing(html)
        _LOGGER.info("Parsed %d regions from %s", len(regions), self.config.apple_url)
        return regions


class FallbackSource:
    name = "fallback-table"

    def fetch(self) -> List[Region]:
        return fallback_regions()


def default_sources(config: PricingConfig) -> list:
    return [AppleSupportSource(config), FallbackSource()]


def collect_regions(sources: Sequence) -> List[Region]:
    """
    Try each source in order and return the first non-empty result.

    Source failures are logged and absorbed; only running out of sources
    raises.
    """
    for src in sources:
        label = getattr(src, "name", type(src).__name__)
        try:
            regions = src.fetch()
        except Exception as ex:
            _LOGGER.warning("Price source '%s' failed: %s", label, ex)
            continue
        if regions:
            _LOGGER.info("Using price source '%s' (%d regions)", label, len(regions))
            return list(regions)
        _LOGGER.warning("Price source '%s' returned no regions", label)

    raise ParseError("no price source produced any region")
