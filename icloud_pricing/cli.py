#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
iCloud+ price lookup – launcher CLI

Prints an Alfred script-filter document ({"items": [...]}) on stdout:
- icloud help         usage listing
- icloud 2tb          every region ranked by its 2TB price
- icloud jp           every plan in Japan
- icloud 50gb jp      Japan's 50GB plan
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .config import PricingConfig, load_config
from .pricing.cache import CacheResolver
from .query import filter_regions, parse_query, query
from .reporting.items import help_items, no_data_items, no_match_items, render_items

logger = logging.getLogger("icloud_pricing")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="icloud-pricing",
        description="Rank iCloud+ plan prices across regions (Alfred script filter output).",
    )
    parser.add_argument(
        "terms",
        nargs="*",
        help="Optional plan tier (50gb, 200gb, 2tb, 6tb, 12tb) and region code/name, or 'help'.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=os.getenv("ICLOUD_PRICING_LOG_LEVEL", "WARNING"),
        help="Logging level for internal messages (written to stderr).",
    )
    return parser.parse_args(argv)


def build_items(terms: List[str], config: PricingConfig, resolver: Optional[CacheResolver] = None) -> List[Dict[str, Any]]:
    request = parse_query(terms)
    if request.show_help:
        return help_items()

    resolution = (resolver or CacheResolver.from_config(config)).resolve()
    if resolution is None or not resolution.dataset.regions:
        return no_data_items()

    dataset = resolution.dataset
    if not filter_regions(dataset.regions, request.region):
        return no_match_items()

    hits = query(dataset, plan=request.plan, region=request.region, benchmark=config.benchmark_plan)
    return render_items(hits, dataset, config.reference_currency)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    items = build_items(args.terms, load_config())
    sys.stdout.write(json.dumps({"items": items}, ensure_ascii=False))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
