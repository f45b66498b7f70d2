"""
Example: chaining functions that return a Try.

map() on a Try-returning function gives a Try of a Try; flat_map() with no
argument flattens it, and flat_map(fn) chains the next step directly.
"""

from __future__ import annotations

from attempt import Try


def get_name() -> Try[str]:
    return Try.of(lambda: "John Doe")


def create_message(name: str) -> Try[str]:
    return Try.of(lambda: f"Hello World from {name}!")


def print_message(message: str) -> Try[None]:
    return Try.of(lambda: print(message))


def transform_message(message: str) -> Try[str]:
    return Try.of(lambda: message.upper())


def chain_all_these_functions() -> Try[str]:
    return (
        get_name()
        .map(create_message)
        .flat_map()
        .and_then(print_message)
        .flat_map(transform_message)
        .and_then(print_message)
    )


def main() -> None:
    print("=== Chaining Try-returning functions ===\n")
    result = chain_all_these_functions()
    print(f"\nResult: {result}")  # Success('HELLO WORLD FROM JOHN DOE!')


if __name__ == "__main__":
    main()
