"""Unit tests for the pipeline behaviors.

Tests cover:
- build_pipeline ordering (outermost first, handler last)
- PerformanceBehavior threshold logging, exceptions still timed
- ValidationBehavior merge and short-circuit
- TransactionBehavior: queries bypass, commands commit, rollback on
  exceptions and on cancellation

Architecture:
- Unit tests with AsyncMock unit of work and MagicMock logger
- No database
"""

import asyncio
from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.behaviors import (
    PerformanceBehavior,
    TransactionBehavior,
    ValidationBehavior,
    build_pipeline,
)
from src.application.cqrs.requests import Command, Query
from src.core.errors import ConcurrencyConflictError
from src.core.result import Success, ValidationFailure
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol


# =============================================================================
# Test Fixtures
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RenameThing(Command[bool]):
    name: str


@dataclass(frozen=True, kw_only=True)
class GetThing(Query[str]):
    thing_id: int


class StaticValidator:
    def __init__(self, errors: dict[str, list[str]]) -> None:
        self._errors = errors
        self.calls = 0

    async def validate(self, request):
        self.calls += 1
        return self._errors


def create_unit_of_work(calls: list[str] | None = None) -> AsyncMock:
    """AsyncMock unit of work that records transaction calls in order."""
    uow = AsyncMock(spec=UnitOfWorkProtocol)
    uow.has_active_transaction = False
    log = calls if calls is not None else []

    async def begin():
        log.append("begin")
        uow.has_active_transaction = True

    async def commit():
        log.append("commit")
        uow.has_active_transaction = False

    async def rollback():
        log.append("rollback")
        uow.has_active_transaction = False

    uow.begin_transaction.side_effect = begin
    uow.commit_transaction.side_effect = commit
    uow.rollback_transaction.side_effect = rollback
    return uow


# =============================================================================
# build_pipeline
# =============================================================================


@pytest.mark.unit
async def test_pipeline_runs_behaviors_outermost_first():
    calls: list[str] = []

    class Recording:
        def __init__(self, name: str) -> None:
            self.name = name

        async def handle(self, request, next_):
            calls.append(f"{self.name}:before")
            response = await next_()
            calls.append(f"{self.name}:after")
            return response

    async def handler(request):
        calls.append("handler")
        return Success(value=request.thing_id)

    run = build_pipeline([Recording("outer"), Recording("inner")], handler)
    result = await run(GetThing(thing_id=7))

    assert result == Success(value=7)
    assert calls == [
        "outer:before",
        "inner:before",
        "handler",
        "inner:after",
        "outer:after",
    ]


@pytest.mark.unit
async def test_pipeline_without_behaviors_calls_handler():
    handler = AsyncMock(return_value=Success(value="ok"))

    result = await build_pipeline([], handler)(GetThing(thing_id=1))

    assert result == Success(value="ok")
    handler.assert_awaited_once()


# =============================================================================
# PerformanceBehavior
# =============================================================================


@pytest.mark.unit
class TestPerformanceBehavior:
    async def test_fast_request_is_not_logged(self, mock_logger):
        behavior = PerformanceBehavior(mock_logger, threshold_ms=10_000)
        next_ = AsyncMock(return_value=Success(value="x"))

        result = await behavior.handle(GetThing(thing_id=1), next_)

        assert result == Success(value="x")
        mock_logger.warning.assert_not_called()

    async def test_slow_request_logs_warning(self, mock_logger):
        behavior = PerformanceBehavior(mock_logger, threshold_ms=500)
        next_ = AsyncMock(return_value=Success(value="x"))

        with patch(
            "src.application.behaviors.performance_behavior.time.perf_counter",
            side_effect=[10.0, 10.75],
        ):
            result = await behavior.handle(GetThing(thing_id=1), next_)

        assert result == Success(value="x")
        mock_logger.warning.assert_called_once_with(
            "Long running request",
            request_name="GetThing",
            elapsed_ms=750.0,
            threshold_ms=500,
        )

    async def test_exactly_at_threshold_is_not_logged(self, mock_logger):
        behavior = PerformanceBehavior(mock_logger, threshold_ms=500)

        with patch(
            "src.application.behaviors.performance_behavior.time.perf_counter",
            side_effect=[0.0, 0.5],
        ):
            await behavior.handle(GetThing(thing_id=1), AsyncMock())

        mock_logger.warning.assert_not_called()

    async def test_exception_propagates_and_is_still_timed(self, mock_logger):
        behavior = PerformanceBehavior(mock_logger, threshold_ms=500)
        next_ = AsyncMock(side_effect=RuntimeError("db down"))

        with patch(
            "src.application.behaviors.performance_behavior.time.perf_counter",
            side_effect=[0.0, 2.0],
        ):
            with pytest.raises(RuntimeError, match="db down"):
                await behavior.handle(RenameThing(name="a"), next_)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["request_name"] == "RenameThing"

    def test_default_threshold_comes_from_settings(self, mock_logger):
        behavior = PerformanceBehavior(mock_logger)

        assert behavior._threshold_ms == 500


# =============================================================================
# ValidationBehavior
# =============================================================================


@pytest.mark.unit
class TestValidationBehavior:
    async def test_no_validators_calls_next(self, mock_logger):
        next_ = AsyncMock(return_value=Success(value=True))

        result = await ValidationBehavior([], mock_logger).handle(
            RenameThing(name="a"), next_
        )

        assert result == Success(value=True)
        next_.assert_awaited_once()

    async def test_passing_validators_call_next(self, mock_logger):
        validator = StaticValidator({})
        next_ = AsyncMock(return_value=Success(value=True))

        result = await ValidationBehavior([validator], mock_logger).handle(
            RenameThing(name="a"), next_
        )

        assert result == Success(value=True)
        assert validator.calls == 1

    async def test_failures_short_circuit_with_merged_errors(self, mock_logger):
        first = StaticValidator({"name": ["Name is required"]})
        second = StaticValidator(
            {"name": ["Name cannot exceed 10 characters"], "sku": ["SKU is required"]}
        )
        next_ = AsyncMock()

        result = await ValidationBehavior([first, second], mock_logger).handle(
            RenameThing(name=""), next_
        )

        assert isinstance(result, ValidationFailure)
        assert result.error == "Validation failed"
        assert dict(result.errors) == {
            "name": ("Name is required", "Name cannot exceed 10 characters"),
            "sku": ("SKU is required",),
        }
        next_.assert_not_awaited()

    async def test_fields_with_no_messages_are_ignored(self, mock_logger):
        next_ = AsyncMock(return_value=Success(value=True))

        result = await ValidationBehavior(
            [StaticValidator({"name": []})], mock_logger
        ).handle(RenameThing(name="a"), next_)

        assert result == Success(value=True)


# =============================================================================
# TransactionBehavior
# =============================================================================


@pytest.mark.unit
class TestTransactionBehavior:
    async def test_query_never_opens_transaction(self, mock_logger):
        uow = create_unit_of_work()
        next_ = AsyncMock(return_value=Success(value="thing"))

        result = await TransactionBehavior(uow, mock_logger).handle(
            GetThing(thing_id=1), next_
        )

        assert result == Success(value="thing")
        uow.begin_transaction.assert_not_awaited()
        uow.commit_transaction.assert_not_awaited()

    async def test_command_begins_handles_and_commits(self, mock_logger):
        calls: list[str] = []
        uow = create_unit_of_work(calls)

        async def next_():
            calls.append("handler")
            return Success(value=True)

        result = await TransactionBehavior(uow, mock_logger).handle(
            RenameThing(name="a"), next_
        )

        assert result == Success(value=True)
        assert calls == ["begin", "handler", "commit"]
        mock_logger.info.assert_called_once_with(
            "Transaction committed", request_name="RenameThing"
        )

    async def test_handler_exception_rolls_back_and_reraises(self, mock_logger):
        calls: list[str] = []
        uow = create_unit_of_work(calls)
        error = RuntimeError("constraint violated")

        with pytest.raises(RuntimeError) as exc_info:
            await TransactionBehavior(uow, mock_logger).handle(
                RenameThing(name="a"), AsyncMock(side_effect=error)
            )

        assert exc_info.value is error
        assert calls == ["begin", "rollback"]
        uow.commit_transaction.assert_not_awaited()
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["error"] is error

    async def test_cancellation_rolls_back(self, mock_logger):
        calls: list[str] = []
        uow = create_unit_of_work(calls)

        with pytest.raises(asyncio.CancelledError):
            await TransactionBehavior(uow, mock_logger).handle(
                RenameThing(name="a"), AsyncMock(side_effect=asyncio.CancelledError())
            )

        assert calls == ["begin", "rollback"]

    async def test_failed_commit_is_not_rolled_back_twice(self, mock_logger):
        calls: list[str] = []
        uow = create_unit_of_work(calls)

        async def failing_commit():
            calls.append("commit")
            # commit_transaction() already rolled back
            uow.has_active_transaction = False
            raise ConcurrencyConflictError("stale")

        uow.commit_transaction.side_effect = failing_commit

        with pytest.raises(ConcurrencyConflictError):
            await TransactionBehavior(uow, mock_logger).handle(
                RenameThing(name="a"), AsyncMock(return_value=Success(value=True))
            )

        assert calls == ["begin", "commit"]
        uow.rollback_transaction.assert_not_awaited()
