"""Domain probe for application lifecycle and request failure events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application startup, shutdown and
unexpected request failures.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application lifecycle operations."""

    def application_starting(self, app_name: str, version: str) -> None:
        """Record that the application is starting."""
        ...

    def application_stopped(self, app_name: str) -> None:
        """Record that the application shut down."""
        ...

    def unhandled_error(self, method: str, path: str, error: Exception) -> None:
        """Record an exception that escaped every request handler."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def application_starting(self, app_name: str, version: str) -> None:
        """Record that the application is starting."""
        self._logger.info("application_starting", app_name=app_name, version=version)

    def application_stopped(self, app_name: str) -> None:
        """Record that the application shut down."""
        self._logger.info("application_stopped", app_name=app_name)

    def unhandled_error(self, method: str, path: str, error: Exception) -> None:
        """Record an exception that escaped every request handler.

        The full traceback is attached; the client only ever sees a
        generic 500.
        """
        self._logger.error(
            "unhandled_request_error",
            method=method,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
        )
