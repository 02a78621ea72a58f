#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from cloudkit.business import BearerCredential, BusinessService, ServiceConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every location of an account")
    p.add_argument("account_id", nargs="?", default="-")
    p.add_argument(
        "--mask",
        default="name,title,storeCode",
        help="Comma-separated read mask (e.g. name,title,storeCode,phoneNumbers)",
    )
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    async with BusinessService(
        BearerCredential.from_env(), config=ServiceConfig.from_env()
    ) as service:
        locations = await service.get_locations_details(args.account_id, args.mask.split(","))

    print("=" * 72)
    print(f"{'Name':30} | {'Store code':12} | Title")
    print("-" * 72)
    for loc in locations:
        print(f"{loc.name:30} | {loc.store_code or '':12} | {loc.title or ''}")
    print("=" * 72)
    print(f"Total: {len(locations)}")


if __name__ == "__main__":
    asyncio.run(main())
