"""Read/write the prices.json document shared by collection and query.

Field names are the wire contract with already-published copies and must
not change: lastUpdated/source/regions at the top, CountryISO/Country/
Currency/Plans per region, Name/Price/PriceInCNY per plan.
"""

from __future__ import annotations

import json
import math
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from ..errors import FormatError
from ..models import Dataset, PlanPrice, Region

PRICE_IN_REFERENCE_FIELD = "PriceInCNY"


def dataset_to_dict(dataset: Dataset) -> Dict[str, Any]:
    return {
        "lastUpdated": dataset.last_updated,
        "source": dataset.source,
        "regions": [
            {
                "CountryISO": r.country_iso,
                "Country": r.country,
                "Currency": r.currency,
                "Plans": [
                    {
                        "Name": p.name,
                        "Price": p.price,
                        PRICE_IN_REFERENCE_FIELD: p.price_in_reference,
                    }
                    for p in r.plans
                ],
            }
            for r in dataset.regions
        ],
    }


def _require(obj: Any, key: str, kind, where: str) -> Any:
    if not isinstance(obj, dict):
        raise FormatError(f"{where}: expected an object")
    if key not in obj:
        raise FormatError(f"{where}: missing '{key}'")
    value = obj[key]
    # bool is an int subclass, never a valid number here
    if not isinstance(value, kind) or isinstance(value, bool):
        raise FormatError(f"{where}: '{key}' has unexpected type {type(value).__name__}")
    return value


def _require_price(obj: Any, key: str, where: str) -> float:
    raw = _require(obj, key, (int, float), where)
    try:
        value = float(raw)
    except (OverflowError, ValueError) as ex:
        raise FormatError(f"{where}: '{key}' is not a usable number: {ex}") from ex
    if not math.isfinite(value) or value < 0:
        raise FormatError(f"{where}: '{key}' must be a finite non-negative number")
    return value


def _plan_from_dict(raw: Any, where: str) -> PlanPrice:
    return PlanPrice(
        name=_require(raw, "Name", str, where),
        price=_require_price(raw, "Price", where),
        price_in_reference=_require_price(raw, PRICE_IN_REFERENCE_FIELD, where),
    )


def _region_from_dict(raw: Any, where: str) -> Region:
    plans_raw = _require(raw, "Plans", list, where)
    plans: List[PlanPrice] = [
        _plan_from_dict(p, f"{where}.Plans[{i}]") for i, p in enumerate(plans_raw)
    ]
    return Region(
        country_iso=_require(raw, "CountryISO", str, where),
        country=_require(raw, "Country", str, where),
        currency=_require(raw, "Currency", str, where),
        plans=plans,
    )


def dataset_from_dict(raw: Any) -> Dataset:
    regions_raw = _require(raw, "regions", list, "dataset")
    return Dataset(
        last_updated=_require(raw, "lastUpdated", str, "dataset"),
        source=_require(raw, "source", str, "dataset"),
        regions=[_region_from_dict(r, f"regions[{i}]") for i, r in enumerate(regions_raw)],
    )


def dumps_dataset(dataset: Dataset) -> str:
    return json.dumps(dataset_to_dict(dataset), indent=2, ensure_ascii=False)


def loads_dataset(text: str) -> Dataset:
    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as ex:
        raise FormatError(f"dataset is not valid JSON: {ex}") from ex
    return dataset_from_dict(raw)


def write_text_atomic(path: Path | str, text: str) -> None:
    """Replace the file wholesale: write a sibling temp file, then os.replace()."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=target.name + ".", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise


def write_dataset(dataset: Dataset, path: Path | str) -> None:
    write_text_atomic(path, dumps_dataset(dataset) + "\n")


def read_dataset(path: Path | str) -> Dataset:
    with open(path, "r", encoding="utf-8") as f:
        return loads_dataset(f.read())
