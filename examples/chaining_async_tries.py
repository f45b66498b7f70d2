"""
Example: chaining coroutine functions that return an AsyncTry.

Same shape as the synchronous version; nothing runs until get() settles
the last node, and every step then runs exactly once. A side effect that
returns an AsyncTry hands back its get() so and_then() awaits it.
"""

from __future__ import annotations

import asyncio

from attempt import AsyncTry


def get_name() -> AsyncTry[str]:
    async def name() -> str:
        return "John Doe"

    return AsyncTry.of(name)


def create_message(name: str) -> AsyncTry[str]:
    async def message() -> str:
        return f"Hello World from {name}!"

    return AsyncTry.of(message)


def print_message(message: str) -> AsyncTry[None]:
    async def emit() -> None:
        print(message)

    return AsyncTry.of(emit)


def transform_message(message: str) -> AsyncTry[str]:
    async def shout() -> str:
        return message.upper()

    return AsyncTry.of(shout)


async def chain_all_these_async_functions() -> str:
    return await (
        get_name()
        .map(create_message)
        .flat_map()
        .and_then(lambda message: print_message(message).get())
        .flat_map(transform_message)
        .and_then(lambda message: print_message(message).get())
        .get()
    )


async def main() -> None:
    print("=== Chaining AsyncTry-returning functions ===\n")
    result = await chain_all_these_async_functions()
    print(f"\nResult: {result!r}")


if __name__ == "__main__":
    asyncio.run(main())
