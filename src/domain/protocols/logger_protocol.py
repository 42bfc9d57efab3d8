"""Logging port used by behaviors, handlers and the unit of work.

Every call is a short constant message plus keyword context; values go in
the context, never in the message text. Levels as used by the catalog:

    debug     per-query details, repository cache hits
    info      committed transactions, saved changes, dispatched requests
    warning   requests slower than the configured threshold
    error     rolled back transactions, failed queries
    critical  unusable database or configuration

Example:
    logger = get_logger().bind(request_name="CreateProduct")
    logger.info("Transaction committed", duration_ms=12)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger.

    ``error`` and ``critical`` take an optional exception; implementations
    record its type and text as ``error_type`` and ``error_message``.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None: ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The original logger is not modified.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as ``bind``."""
        ...
