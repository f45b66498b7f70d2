"""
Domain models — immutable value objects parsed from SpaceX API payloads.

Parsing is strict: a payload missing a required key raises KeyError, and
the adapter's AsyncTry chain turns that into a failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Launch:
    """A single launch, as returned by /v5/launches/latest."""

    id: str
    name: str
    rocket_id: str
    flight_number: int
    date_utc: datetime
    success: bool | None = None

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> Launch:
        return Launch(
            id=payload["id"],
            name=payload["name"],
            rocket_id=payload["rocket"],
            flight_number=int(payload["flight_number"]),
            date_utc=datetime.fromisoformat(payload["date_utc"]),
            success=payload.get("success"),
        )


@dataclass(frozen=True, slots=True)
class Rocket:
    """A rocket, as returned by /v4/rockets/{id}."""

    id: str
    name: str
    active: bool = False

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> Rocket:
        return Rocket(
            id=payload["id"],
            name=payload["name"],
            active=bool(payload.get("active", False)),
        )


@dataclass(frozen=True, slots=True)
class LaunchReport:
    """The latest launch paired with the rocket that flew it."""

    launch: Launch
    rocket: Rocket

    def describe(self) -> str:
        outcome = {True: "success", False: "failure", None: "outcome unknown"}[self.launch.success]
        return (
            f"Flight {self.launch.flight_number} ({self.launch.name}, "
            f"{self.launch.date_utc:%Y-%m-%d}) flew on {self.rocket.name}: {outcome}"
        )
