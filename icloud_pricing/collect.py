#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
iCloud+ price collection – CLI

Flow:
- Fetch USD-based exchange rates (fatal on failure: there is no rate fallback).
- Collect regional prices: Apple support page first, embedded table otherwise.
- Convert every plan to the reference currency and rank by the benchmark tier.
- Write prices.json (or print a preview with --dry-run).
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console

from .config import load_config
from .errors import NetworkError, ParseError
from .pricing.dataset_io import dumps_dataset, write_dataset
from .pricing.normalize import normalize
from .pricing.rates import RateProvider
from .pricing.sources import collect_regions, default_sources

console = Console()
logger = logging.getLogger("icloud_pricing")

PREVIEW_CHARS = 2000
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="icloud-pricing-collect",
        description=(
            "Collect iCloud+ prices for every region, convert them to the reference "
            "currency and write the prices.json dataset."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a truncated preview of the dataset instead of writing it.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output path (default: ICLOUD_PRICING_OUTPUT or data/prices.json).",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=os.getenv("ICLOUD_PRICING_LOG_LEVEL", "WARNING"),
        help="Logging level for internal messages.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )

    config = load_config()
    output_path = args.output or config.output_path
    logger.debug("Config: %s", config)

    console.print("[bold]iCloud+ price collection[/bold]\n")

    # --------------------
    # 1) Exchange rates
    # --------------------
    console.print("[cyan]Fetching exchange rates…[/cyan]")
    try:
        rates = RateProvider(config).get_rates()
    except (NetworkError, ParseError) as ex:
        logger.error("Exchange rate fetch failed: %s", ex)
        console.print(f"[red]Failed to fetch exchange rates: {ex}[/red]")
        sys.exit(1)

    ref = config.reference_currency
    if ref in rates:
        console.print(f"[green]Exchange rates OK[/green] (1 USD = {rates[ref]:.4f} {ref})\n")
    else:
        console.print(f"[yellow]No {ref} rate in the table; prices will stay in local currency.[/yellow]\n")

    # --------------------
    # 2) Regional prices
    # --------------------
    console.print("[cyan]Collecting regional prices…[/cyan]")
    sources = default_sources(config)
    try:
        regions = collect_regions(sources)
    except ParseError as ex:
        console.print(f"[red]{ex}[/red]")
        sys.exit(1)
    console.print(f"[green]Collected {len(regions)} regions[/green]\n")

    # --------------------
    # 3) Normalize + persist
    # --------------------
    dataset = normalize(regions, rates, ref, benchmark=config.benchmark_plan)

    if args.dry_run:
        console.print("[cyan]Dry run, dataset preview:[/cyan]\n")
        console.out(dumps_dataset(dataset)[:PREVIEW_CHARS] + "...\n", highlight=False)
        console.print(f"{len(dataset.regions)} regions")
        return

    try:
        write_dataset(dataset, output_path)
    except OSError as ex:
        logger.error("Failed to write %s: %s", output_path, ex)
        console.print(f"[red]Failed to write {output_path}: {ex}[/red]")
        sys.exit(1)

    logger.info("Saved dataset to %s", output_path)
    console.print(f"[green]Saved to {output_path}[/green]")
    console.print(f"{len(dataset.regions)} regions")


if __name__ == "__main__":
    main()
