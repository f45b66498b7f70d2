"""
Run every example in turn: python examples/run_all.py
"""

from __future__ import annotations

import asyncio

from chaining_async_tries import chain_all_these_async_functions
from chaining_tries import chain_all_these_functions
from latest_spacex_rocket import print_rocket_name_of_latest_launch
from skipping_on_failure import skipping_a_lot_of_functionality_on_failure
from transformations import do_some_transformations


async def main() -> None:
    print("Getting the SpaceX rocket name of the latest launch...")
    await print_rocket_name_of_latest_launch().get_or_else(lambda error: print(f"Lookup failed: {error!r}"))

    print("\nDoing a bunch of transformations...")
    do_some_transformations().get()

    print("\nWe can also chain functions that return a Try...")
    chain_all_these_functions()

    print("\nWe can also chain async functions that return an AsyncTry...")
    await chain_all_these_async_functions()

    print("\nWhen a Try or an AsyncTry is a failure, all subsequent operations are skipped...")
    await skipping_a_lot_of_functionality_on_failure()


if __name__ == "__main__":
    asyncio.run(main())
