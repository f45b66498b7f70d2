"""
Example: a pipeline of plain transformations on a Try.
"""

from __future__ import annotations

import random

from attempt import Try


def get_random_number_between_one_and_ten() -> int:
    return random.randint(1, 10)


def double(value: int) -> int:
    return value * 2


def triple(value: int) -> int:
    return value * 3


def divide_by_two(value: int) -> float:
    return value / 2


def do_some_transformations() -> Try[float]:
    return (
        Try.of(get_random_number_between_one_and_ten)
        .map(double)
        .map(triple)
        .map(divide_by_two)
        .and_then(print)
    )


if __name__ == "__main__":
    do_some_transformations().get()
