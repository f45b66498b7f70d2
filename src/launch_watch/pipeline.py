"""
Pipeline — the latest-launch report as one AsyncTry chain.

Domain layer, no I/O of its own. The LaunchSource port does the fetching:

  latest_launch()
    → rocket(launch.rocket_id)
      → LaunchReport(launch, rocket)

flat_map joins the two lookups, so a failed launch lookup never issues the
rocket request. Every cause is normalized to an HttpError at the end.
"""

from __future__ import annotations

from attempt import AsyncTry, HttpError

from launch_watch.domain.models import Launch, LaunchReport
from launch_watch.domain.ports import LaunchSource


def _report_for(launch: Launch, source: LaunchSource) -> AsyncTry[LaunchReport]:
    return source.rocket(launch.rocket_id).map(lambda rocket: LaunchReport(launch=launch, rocket=rocket))


def latest_launch_report(source: LaunchSource) -> AsyncTry[LaunchReport]:
    """
    Build the report chain for the most recent launch.

    Nothing runs until the returned AsyncTry is settled. Settling it any
    number of times issues each request at most once.

    Returns AsyncTry[LaunchReport], or a failure carrying the HttpError of
    the first step that failed.
    """
    return (
        source.latest_launch()
        .flat_map(lambda launch: _report_for(launch, source))
        .map_failure(HttpError.cast)
    )
