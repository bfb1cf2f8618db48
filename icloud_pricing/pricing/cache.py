"""Dataset resolution for the query side.

Order of preference:
  1. cache file younger than the TTL
  2. copy bundled with the workflow (also refreshes the cache)
  3. remote copy (also refreshes the cache)
  4. cache file of any age
  5. nothing: resolve() returns None
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..config import PricingConfig
from ..errors import FormatError, NetworkError
from ..models import Dataset
from .dataset_io import loads_dataset, write_text_atomic
from .http_fetch import fetch_text

_LOGGER = logging.getLogger(__name__)

ORIGIN_FRESH_CACHE = "fresh-cache"
ORIGIN_LOCAL = "local"
ORIGIN_REMOTE = "remote"
ORIGIN_STALE_CACHE = "stale-cache"


@dataclass(frozen=True)
class Resolution:
    dataset: Dataset
    origin: str


def is_fresh(mtime: Optional[float], ttl: float, now: float) -> bool:
    return mtime is not None and (now - mtime) < ttl


def file_mtime(path: Path | str) -> Optional[float]:
    try:
        return os.path.getmtime(path)
    except OSError:
        return None


def _read_text(path: Path | str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return None


class CacheResolver:
    def __init__(
        self,
        cache_path: Path | str,
        ttl: float,
        local_path: Optional[Path | str],
        remote_url: Optional[str],
        remote_timeout: float,
        clock: Callable[[], float] = time.time,
    ):
        self.cache_path = Path(cache_path)
        self.ttl = ttl
        self.local_path = Path(local_path) if local_path else None
        self.remote_url = remote_url
        self.remote_timeout = remote_timeout
        self.clock = clock

    @classmethod
    def from_config(cls, config: PricingConfig) -> "CacheResolver":
        return cls(
            cache_path=config.cache_path,
            ttl=config.cache_ttl,
            local_path=config.local_data_path or None,
            remote_url=config.data_url or None,
            remote_timeout=config.data_timeout,
        )

    def _store(self, text: str) -> None:
        try:
            write_text_atomic(self.cache_path, text)
        except OSError as ex:
            _LOGGER.warning("Failed to refresh cache %s: %s", self.cache_path, ex)

    def _from_cache(self, require_fresh: bool) -> Optional[Dataset]:
        if require_fresh and not is_fresh(file_mtime(self.cache_path), self.ttl, self.clock()):
            return None
        try:
            text = _read_text(self.cache_path)
            return loads_dataset(text) if text is not None else None
        except (OSError, UnicodeDecodeError, FormatError) as ex:
            _LOGGER.warning("Ignoring unreadable cache %s: %s", self.cache_path, ex)
            return None

    def _from_local(self) -> Optional[Dataset]:
        if self.local_path is None:
            return None
        try:
            text = _read_text(self.local_path)
            if text is None:
                return None
            dataset = loads_dataset(text)
        except (OSError, UnicodeDecodeError, FormatError) as ex:
            _LOGGER.warning("Ignoring bundled data %s: %s", self.local_path, ex)
            return None
        self._store(text)
        return dataset

    def _from_remote(self) -> Optional[Dataset]:
        if not self.remote_url:
            return None
        try:
            text = fetch_text(self.remote_url, timeout=self.remote_timeout)
            dataset = loads_dataset(text)
        except (NetworkError, FormatError) as ex:
            _LOGGER.warning("Remote dataset %s unavailable: %s", self.remote_url, ex)
            return None
        self._store(text)
        return dataset

    def resolve(self) -> Optional[Resolution]:
        steps = (
            (ORIGIN_FRESH_CACHE, lambda: self._from_cache(require_fresh=True)),
            (ORIGIN_LOCAL, self._from_local),
            (ORIGIN_REMOTE, self._from_remote),
            (ORIGIN_STALE_CACHE, lambda: self._from_cache(require_fresh=False)),
        )
        for origin, step in steps:
            dataset = step()
            if dataset is not None:
                _LOGGER.debug("Resolved dataset from %s", origin)
                return Resolution(dataset=dataset, origin=origin)

        _LOGGER.error("No price data available (cache=%s)", self.cache_path)
        return None
