#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from cloudkit.business import BearerCredential, BusinessService, ServiceConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Count admins of every location concurrently")
    p.add_argument("account_id", nargs="?", default="-")
    p.add_argument("--reviews", action="store_true", help="Also print review summaries")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with BusinessService(
        BearerCredential.from_env(), config=ServiceConfig.from_env()
    ) as service:
        locations = await service.get_locations(args.account_id)
        pages = await service.admins(locations)
        summaries = await service.review_summaries(locations) if args.reviews else []

    pages.sort(key=lambda p: p.page_name)
    print(f"{'Location':30} | {'Store code':12} | {'Admins':>6} | Title")
    print("-" * 80)
    for page in pages:
        print(
            f"{page.page_name:30} | {page.store_code or '':12} | {page.admin_count:>6} | "
            f"{page.page_title or ''}"
        )

    for summary in summaries:
        print(
            f"{summary.location_title} - total reviews {summary.total_review_count} "
            f"- average rating {summary.average_rating}"
        )


if __name__ == "__main__":
    asyncio.run(main())
