"""Validation behavior.

Runs every validator registered for the request type and merges their
field-to-messages maps. If anything failed, the handler is NOT called and a
ValidationFailure is returned instead; no exception is raised.
"""

import asyncio
from collections.abc import Sequence
from typing import Any

from src.application.behaviors.pipeline import NextStep, Validator
from src.application.cqrs.requests import request_name
from src.core.result import ValidationFailure
from src.domain.protocols.logger_protocol import LoggerProtocol


class ValidationBehavior:
    """Short-circuit invalid requests with a ValidationFailure.

    Args:
        validators: Validators for this request type (may be empty).
        logger: Structured logger.
    """

    def __init__(self, validators: Sequence[Validator], logger: LoggerProtocol) -> None:
        self._validators = tuple(validators)
        self._logger = logger

    async def handle(self, request: Any, next_: NextStep) -> Any:
        if not self._validators:
            return await next_()

        results = await asyncio.gather(
            *(validator.validate(request) for validator in self._validators)
        )

        errors: dict[str, list[str]] = {}
        for result in results:
            for field_name, messages in result.items():
                if messages:
                    errors.setdefault(field_name, []).extend(messages)

        if errors:
            self._logger.info(
                "Request validation failed",
                request_name=request_name(request),
                fields=sorted(errors),
            )
            return ValidationFailure(errors=errors)

        return await next_()
