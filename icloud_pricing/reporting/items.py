from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..config import DEFAULT_REFERENCE_CURRENCY, PLAN_TYPES, SUPPORT_PAGE_URL
from ..models import Dataset
from ..query import QueryHit

ICON = {"path": "icon.png"}

_CURRENCY_SYMBOLS = {"CNY": "¥", "USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def flag(iso: str) -> str:
    """Regional-indicator emoji for a two-letter code ("JP" -> 🇯🇵)."""
    return "".join(chr(ord(c) + 127397) for c in (iso or "").upper() if "A" <= c <= "Z")


def _format_local(price: float) -> str:
    return str(int(price)) if float(price).is_integer() else f"{price:.2f}"


def _format_reference(value: Optional[float], currency: str) -> str:
    if value is None:
        return "-"
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    if symbol:
        return f"{symbol}{value:.2f}"
    return f"{value:.2f} {currency.upper()}"


def _info(title: str, subtitle: str) -> Dict[str, Any]:
    return {"title": title, "subtitle": subtitle, "valid": False, "icon": ICON}


def hit_item(hit: QueryHit, reference_currency: str = DEFAULT_REFERENCE_CURRENCY) -> Dict[str, Any]:
    region, plan = hit.region, hit.plan
    icon = flag(region.country_iso)
    local = f"{_format_local(plan.price)} {region.currency}"
    converted = _format_reference(plan.price_in_reference, reference_currency)
    rank = "-" if hit.rank is None else str(hit.rank)

    return {
        "uid": f"{region.country_iso}-{plan.name}",
        "title": f"{icon} {region.country} | {local} ≈ {converted}",
        "subtitle": f"#{rank} | {plan.name} plan",
        "arg": converted,
        "icon": ICON,
        "mods": {
            "cmd": {"valid": True, "arg": local, "subtitle": "⌘ Copy local price"},
            "alt": {"valid": True, "arg": SUPPORT_PAGE_URL, "subtitle": "⌥ Open Apple support page"},
        },
        "text": {
            "copy": converted,
            "largetype": f"{icon} {region.country}\n{plan.name}: {local} ≈ {converted}",
        },
    }


def updated_item(dataset: Dataset) -> Optional[Dict[str, Any]]:
    if not dataset.last_updated:
        return None
    stamp = dataset.updated_at()
    date_str = stamp.date().isoformat() if stamp else dataset.last_updated
    item = _info(f"Data updated: {date_str}", "⌥ + Enter opens the Apple support page")
    item["mods"] = {
        "alt": {"valid": True, "arg": SUPPORT_PAGE_URL, "subtitle": "⌥ Open Apple support page"}
    }
    return item


def help_items() -> List[Dict[str, Any]]:
    tiers = ", ".join(p.lower() for p in PLAN_TYPES)
    return [
        _info("Usage: icloud [plan] [region]", f"Plans: {tiers} | Region: country code or name"),
        _info("Example: icloud 2tb", "Rank every region by 2TB price"),
        _info("Example: icloud us", "Every plan in the United States"),
        _info("Example: icloud 50gb jp", "50GB price in Japan"),
    ]


def no_data_items(message: str = "Unable to load price data") -> List[Dict[str, Any]]:
    return [_info("Failed to load data", message)]


def no_match_items() -> List[Dict[str, Any]]:
    return [_info("No matching region", "Try another keyword, e.g. US, JP, CN")]


def render_items(
    hits: List[QueryHit],
    dataset: Dataset,
    reference_currency: str = DEFAULT_REFERENCE_CURRENCY,
) -> List[Dict[str, Any]]:
    items = [hit_item(h, reference_currency) for h in hits]
    trailer = updated_item(dataset)
    if trailer:
        items.append(trailer)
    return items
