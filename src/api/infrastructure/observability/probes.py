"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database engine observability.

    This probe captures domain-significant events related to the database
    engine lifecycle without exposing logging implementation details.
    """

    def engine_created(self, connection_string: str, pool_size: int) -> None:
        """Record that the database engine was created."""
        ...

    def engine_disposed(self) -> None:
        """Record that the database engine and its pool were disposed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def engine_created(self, connection_string: str, pool_size: int) -> None:
        """Record that the database engine was created."""
        self._logger.info(
            "database_engine_created",
            connection=connection_string,
            pool_size=pool_size,
        )

    def engine_disposed(self) -> None:
        """Record that the database engine and its pool were disposed."""
        self._logger.info("database_engine_disposed")
