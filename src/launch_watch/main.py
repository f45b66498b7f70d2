"""
Application entry point — wires dependencies and runs the report once.

Composition root: loads settings, configures structlog, creates the SpaceX
client and hands it to the pipeline.

Responsibilities:
  1. Load and validate configuration from environment
  2. Configure structlog (console or JSON lines)
  3. Create the SpaceXClient adapter
  4. Settle the report chain and print the outcome
  5. Turn the outcome into the process exit code
"""

from __future__ import annotations

import asyncio
import logging
import sys

import structlog
from attempt import HttpError

from launch_watch.adapters.spacex_client import SpaceXClient
from launch_watch.config import AppSettings
from launch_watch.domain.models import LaunchReport
from launch_watch.pipeline import latest_launch_report


def configure_structlog(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structlog for structured logging.

    json_logs=True: JSON lines to stdout (machine-readable).
    Otherwise: colored, human-readable console output.
    """
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_client(settings: AppSettings) -> SpaceXClient:
    """Instantiate the SpaceX adapter from application settings."""
    return SpaceXClient(
        base_url=settings.spacex.base_url,
        timeout=settings.spacex.timeout_seconds,
        retry_attempts=settings.retry.attempts,
        max_wait=settings.retry.max_wait_seconds,
    )


def _on_success(report: LaunchReport) -> int:
    print(report.describe())  # noqa: T201
    structlog.get_logger().info("app.completed", rocket=report.rocket.name)
    return 0


def _on_failure(error: BaseException) -> int:
    http_error = HttpError.cast(error)
    structlog.get_logger().error(
        "app.failed",
        status_code=http_error.status_code,
        error=http_error.message,
    )
    return 1


async def run(settings: AppSettings) -> int:
    """Settle the latest-launch report and return the process exit code."""
    outcome = await latest_launch_report(create_client(settings)).resolve()
    return outcome.fold(_on_failure, _on_success)


def main() -> None:
    """Wire dependencies, run the report, exit 0 on success and 1 on failure."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level, settings.json_logs)
    log = structlog.get_logger()
    log.info(
        "app.starting",
        version="0.1.0",
        log_level=settings.log_level,
        base_url=settings.spacex.base_url,
    )

    try:
        exit_code = asyncio.run(run(settings))
    except KeyboardInterrupt:
        log.info("app.shutdown", reason="signal received")
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
