"""Performance behavior (outermost pipeline stage).

Times every request, including the ones rejected by validation, and logs a
warning when a request takes longer than the configured threshold. It never
changes the response and never swallows exceptions.
"""

import time
from typing import Any

from src.application.behaviors.pipeline import NextStep
from src.application.cqrs.requests import request_name
from src.core.config import settings
from src.domain.protocols.logger_protocol import LoggerProtocol


class PerformanceBehavior:
    """Log requests slower than threshold_ms.

    Args:
        logger: Structured logger.
        threshold_ms: Warning threshold in milliseconds (defaults to
            settings.slow_request_threshold_ms, 500).
    """

    def __init__(self, logger: LoggerProtocol, threshold_ms: float | None = None) -> None:
        self._logger = logger
        self._threshold_ms = (
            settings.slow_request_threshold_ms if threshold_ms is None else threshold_ms
        )

    async def handle(self, request: Any, next_: NextStep) -> Any:
        start = time.perf_counter()
        try:
            return await next_()
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if elapsed_ms > self._threshold_ms:
                self._logger.warning(
                    "Long running request",
                    request_name=request_name(request),
                    elapsed_ms=round(elapsed_ms, 2),
                    threshold_ms=self._threshold_ms,
                )
