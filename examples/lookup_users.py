#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from socialgraph.lookup import UserLookupClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve user ids to user records via REST")
    p.add_argument("ids", nargs="+", type=int)
    p.add_argument("--repeat", action="store_true", help="Run the lookup twice to show caching")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    async with UserLookupClient(bearer_token=os.environ.get("SOCIALGRAPH_BEARER_TOKEN")) as client:
        report = await client.lookup_with_report(args.ids)
        print("=" * 72)
        print(f"Requested  : {len(args.ids)}")
        print(f"Resolved   : {len(report.records)}")
        print(f"Batches    : {report.batches_dispatched} ({report.batches_failed} failed)")
        print(f"Failed ids : {report.failed_keys or '-'}")
        print("=" * 72)
        print(f"{'Id':>20} | {'Screen name':20} | {'Followers':>10} | {'Friends':>10}")
        print("-" * 72)
        for u in report.records:
            print(
                f"{u.id:>20} | {u.screen_name:20} | "
                f"{u.followers_count:>10} | {u.friends_count:>10}"
            )

        if args.repeat:
            again = await client.lookup_with_report(args.ids)
            print(f"Second run : {again.batches_dispatched} batches dispatched")


if __name__ == "__main__":
    asyncio.run(main())
