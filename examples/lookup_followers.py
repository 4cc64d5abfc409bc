#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from socialgraph.lookup import BatchPolicy, UserLookupClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve the followers or friends of an account")
    p.add_argument("screen_name")
    p.add_argument("relation", nargs="?", default="followers", choices=["followers", "friends"])
    p.add_argument("--max-concurrency", type=int, default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    policy = BatchPolicy(max_concurrency=args.max_concurrency)

    async with UserLookupClient(
        policy=policy, bearer_token=os.environ.get("SOCIALGRAPH_BEARER_TOKEN")
    ) as client:
        if args.relation == "followers":
            users = await client.lookup_followers(args.screen_name)
        else:
            users = await client.lookup_friends(args.screen_name)

    print(f"{args.relation.title()} of @{args.screen_name}: {len(users)}")
    for u in sorted(users, key=lambda u: u.followers_count, reverse=True)[:20]:
        print(f"  @{u.screen_name:20} {u.followers_count:>10} followers")


if __name__ == "__main__":
    asyncio.run(main())
