"""
Example: once a step fails, every later step is skipped.
"""

from __future__ import annotations

import asyncio

from attempt import AsyncTry


async def fail() -> str:
    raise RuntimeError("Failed!")


async def to_upper_case(value: str) -> str:
    print("never printed")
    return value.upper()


async def to_lower_case(value: str) -> str:
    print("never printed either")
    return value.lower()


async def skipping_a_lot_of_functionality_on_failure() -> None:
    node = AsyncTry.of(fail).map(to_upper_case).map(to_lower_case)

    print(f"The AsyncTry is a failure: {await node.is_failure()}")
    cause = await node.get_cause()
    print(f"All subsequent operations were skipped because the first function raised: {cause}")


if __name__ == "__main__":
    asyncio.run(skipping_a_lot_of_functionality_on_failure())
