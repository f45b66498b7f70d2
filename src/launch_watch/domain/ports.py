"""
Ports — Protocol-based interfaces for the launch data source.

The pipeline depends on LaunchSource only; the SpaceX HTTP client satisfies
it structurally, and tests can hand in any object with the same methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from attempt import AsyncTry

from launch_watch.domain.models import Launch, Rocket


@runtime_checkable
class LaunchSource(Protocol):
    """
    Port: look up launches and rockets.

    Both methods return an AsyncTry that has not been awaited yet, so the
    caller decides when (and whether) the request actually runs.
    """

    def latest_launch(self) -> AsyncTry[Launch]: ...

    def rocket(self, rocket_id: str) -> AsyncTry[Rocket]: ...
