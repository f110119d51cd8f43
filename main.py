#!/usr/bin/env python3
"""WordPress.com Stats Insights CLI.

Fetches the "Tags & Categories" insights block for a site and prints the
published list the way a stats screen would lay it out.

Environment Variables Required:
    - WPCOM_ACCESS_TOKEN: OAuth2 bearer token with stats access
    - WPCOM_API_BASE_URL: REST API base URL (optional)
    - STATS_TAGS_MAX: Number of tag groups to request (optional)

Example Usage:
    $ python main.py --site-id 12345                # Print the tags block
    $ python main.py --site-id 12345 --forced       # Bypass the store cache
    $ python main.py --site-id 12345 --json         # Dump the result as JSON
"""
import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

from src.wpstats.api import ConfigurationError, StatsClient
from src.wpstats.config import StatsConfig
from src.wpstats.insights.adapters import StringCatalogLabels, WPComInsightsStore
from src.wpstats.insights.domain import (
    BlockListItem,
    Empty,
    ExpandableItem,
    FailureResult,
    ILabelProvider,
    InsightsResult,
    Item,
    Link,
    ListResult,
    SiteRef,
    Title,
)
from src.wpstats.insights.use_cases import TagsAndCategoriesUseCase


def format_item(item: BlockListItem, labels: ILabelProvider) -> list[str]:
    """Render one block item as text lines."""
    if isinstance(item, Title):
        return [labels.render(item.text), "=" * 40]
    if isinstance(item, Item):
        value = f"{item.value:>8}" if item.value is not None else ""
        return [f"  {item.text:<30}{value}"]
    if isinstance(item, ExpandableItem):
        lines = [f"+ {item.header.text:<30}{item.header.value:>8}"]
        lines.extend(f"    - {member.text}" for member in item.expanded_items)
        return lines
    if isinstance(item, Empty):
        return ["  No data yet"]
    if isinstance(item, Link):
        return ["", f"  {labels.render(item.text)} >"]
    raise TypeError(f"Unknown block item: {item!r}")


def format_result(result: InsightsResult, labels: ILabelProvider) -> str:
    """Render a published result as text."""
    if isinstance(result, FailureResult):
        return f"{labels.render(result.failed_label)}: {result.error_message}"

    lines: list[str] = []
    for item in result.items:
        lines.extend(format_item(item, labels))
    return "\n".join(lines)


async def run_fetch(args: argparse.Namespace) -> int:
    """Fetch the tags block once and print it.

    Returns:
        Process exit code
    """
    try:
        config = StatsConfig.from_env(tags_max=args.max)
    except ConfigurationError as e:
        print(f"[Main] Configuration error: {e}")
        return 1

    labels = StringCatalogLabels()
    site = SiteRef(site_id=args.site_id)
    published: list[InsightsResult] = []

    async with StatsClient(config) as client:
        use_case = TagsAndCategoriesUseCase(
            insights_store=WPComInsightsStore(client),
            labels=labels,
        )
        use_case.live_data.subscribe(published.append)
        await use_case.fetch(site, refresh=True, forced=args.forced)

    result: Optional[InsightsResult] = published[-1] if published else None
    if result is None:
        print("[Main] Nothing was published")
        return 1

    if args.json:
        print(json.dumps(asdict(result), indent=2))
    else:
        print(format_result(result, labels))

    return 0 if isinstance(result, ListResult) else 2


def main():
    parser = argparse.ArgumentParser(
        description="Fetch the Tags & Categories stats block for a WordPress.com site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --site-id 12345              # Print the tags block
  python main.py --site-id 12345 --forced     # Bypass the store cache
  python main.py --site-id 12345 --max 20     # Request up to 20 groups
        """
    )
    parser.add_argument(
        "--site-id",
        type=int,
        required=True,
        help="WordPress.com site ID"
    )
    parser.add_argument(
        "--forced",
        action="store_true",
        help="Bypass the store cache and hit the network"
    )
    parser.add_argument(
        "--max",
        type=int,
        metavar="N",
        help="Number of tag groups to request (default: STATS_TAGS_MAX or 10)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the published result as JSON"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    sys.exit(asyncio.run(run_fetch(args)))


if __name__ == "__main__":
    main()
