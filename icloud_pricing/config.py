#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

Configuration defaults for the iCloud+ pricing tool.

Two consumers share this module:
- the collection command (scrape Apple's page, fetch exchange rates, write prices.json)
- the launcher query command (resolve prices.json from cache / bundle / remote)

Every value below can be overridden through an environment variable. Nothing
reads the module constants directly at run time: load_config() snapshots them
into a PricingConfig which is then handed to each component.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

_LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Remote sources (collection side)
# ---------------------------------------------------------------------
# Apple support article listing iCloud+ prices per country/region.
DEFAULT_APPLE_URL = "https://support.apple.com/en-us/108047"

# Exchange-rate endpoint. The response must quote rates against USD
# ("1 USD = rate units of currency"), conversion relies on that.
DEFAULT_EXCHANGE_API_URL = "https://api.exchangerate-api.com/v4/latest/USD"

# Where the collection command writes the dataset.
DEFAULT_OUTPUT_PATH = os.path.join("data", "prices.json")

# Timeout (seconds) for the Apple page and the exchange-rate call.
DEFAULT_REQUEST_TIMEOUT = 15.0

# ---------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------
# All prices are converted into this currency for ranking.
DEFAULT_REFERENCE_CURRENCY = "CNY"

# Fixed tier vocabulary, smallest first.
PLAN_TYPES = ("50GB", "200GB", "2TB", "6TB", "12TB")

# Benchmark tier: default sort key for the dataset and for queries.
DEFAULT_BENCHMARK_PLAN = PLAN_TYPES[0]

# ---------------------------------------------------------------------
# Query side (launcher)
# ---------------------------------------------------------------------
# Published copy of prices.json, used when no bundled copy is available.
DEFAULT_DATA_URL = "https://raw.githubusercontent.com/YOUR_USERNAME/icloud-pricing/main/data/prices.json"

# Cache freshness window (seconds).
DEFAULT_CACHE_TTL = 3600.0

# Timeout (seconds) for the remote dataset fetch. Kept short: the launcher
# is waiting on us.
DEFAULT_DATA_TIMEOUT = 5.0

CACHE_FILENAME = "prices.json"

# Support page opened from result items (localized article).
SUPPORT_PAGE_URL = "https://support.apple.com/zh-cn/108047"

ENV_PREFIX = "ICLOUD_PRICING_"


@dataclass(frozen=True)
class PricingConfig:
    apple_url: str = DEFAULT_APPLE_URL
    exchange_api_url: str = DEFAULT_EXCHANGE_API_URL
    output_path: str = DEFAULT_OUTPUT_PATH
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    reference_currency: str = DEFAULT_REFERENCE_CURRENCY
    benchmark_plan: str = DEFAULT_BENCHMARK_PLAN
    cache_dir: str = ""
    cache_ttl: float = DEFAULT_CACHE_TTL
    data_url: str = DEFAULT_DATA_URL
    data_timeout: float = DEFAULT_DATA_TIMEOUT
    local_data_path: str = ""

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir) / CACHE_FILENAME


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = (env.get(ENV_PREFIX + name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _LOGGER.warning("Ignoring %s%s=%r (not a number), using %s", ENV_PREFIX, name, raw, default)
        return default
    if value <= 0:
        _LOGGER.warning("Ignoring %s%s=%r (must be positive), using %s", ENV_PREFIX, name, raw, default)
        return default
    return value


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    return (env.get(ENV_PREFIX + name) or "").strip() or default


def default_cache_dir(env: Mapping[str, str]) -> str:
    """Alfred's per-workflow cache folder, else a folder under the system temp dir."""
    alfred_cache = (env.get("alfred_workflow_cache") or "").strip()
    if alfred_cache:
        return alfred_cache
    return os.path.join(tempfile.gettempdir(), "icloud-pricing")


def default_workflow_dir(env: Mapping[str, str]) -> str:
    prefs = (env.get("alfred_preferences") or "").strip()
    uid = (env.get("alfred_workflow_uid") or "").strip()
    if prefs and uid:
        return os.path.join(prefs, "workflows", uid)
    return os.getcwd()


def load_config(env: Optional[Mapping[str, str]] = None) -> PricingConfig:
    """Build a PricingConfig from environment variables (ICLOUD_PRICING_*)."""
    if env is None:
        env = os.environ

    benchmark = _env_str(env, "BENCHMARK_PLAN", DEFAULT_BENCHMARK_PLAN).upper()
    if benchmark not in PLAN_TYPES:
        _LOGGER.warning("Unknown benchmark plan %r, using %s", benchmark, DEFAULT_BENCHMARK_PLAN)
        benchmark = DEFAULT_BENCHMARK_PLAN

    local_data = _env_str(
        env,
        "LOCAL_DATA",
        os.path.join(default_workflow_dir(env), "data", CACHE_FILENAME),
    )

    return PricingConfig(
        apple_url=_env_str(env, "APPLE_URL", DEFAULT_APPLE_URL),
        exchange_api_url=_env_str(env, "EXCHANGE_URL", DEFAULT_EXCHANGE_API_URL),
        output_path=_env_str(env, "OUTPUT", DEFAULT_OUTPUT_PATH),
        request_timeout=_env_float(env, "TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        reference_currency=_env_str(env, "REFERENCE_CURRENCY", DEFAULT_REFERENCE_CURRENCY).upper(),
        benchmark_plan=benchmark,
        cache_dir=_env_str(env, "CACHE_DIR", default_cache_dir(env)),
        cache_ttl=_env_float(env, "CACHE_TTL", DEFAULT_CACHE_TTL),
        data_url=_env_str(env, "DATA_URL", DEFAULT_DATA_URL),
        data_timeout=_env_float(env, "DATA_TIMEOUT", DEFAULT_DATA_TIMEOUT),
        local_data_path=local_data,
    )
