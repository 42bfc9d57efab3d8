"""Transaction behavior (innermost pipeline stage).

Queries pass straight through. A command runs inside an explicit
transaction on the request's unit of work: begin, run the handler, commit.
Any exception, including task cancellation, rolls the transaction back and
is re-raised unchanged.
"""

import asyncio
from typing import Any

from src.application.behaviors.pipeline import NextStep
from src.application.cqrs.requests import is_command, request_name
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol


class TransactionBehavior:
    """Wrap command handling in a unit-of-work transaction.

    Args:
        unit_of_work: Unit of work of the current request.
        logger: Structured logger.
    """

    def __init__(self, unit_of_work: UnitOfWorkProtocol, logger: LoggerProtocol) -> None:
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, request: Any, next_: NextStep) -> Any:
        if not is_command(request):
            return await next_()

        name = request_name(request)
        self._logger.debug("Beginning transaction", request_name=name)
        await self._unit_of_work.begin_transaction()

        try:
            response = await next_()
            await self._unit_of_work.commit_transaction()
        except (Exception, asyncio.CancelledError) as e:
            self._logger.error(
                "Transaction failed, rolling back",
                error=e,
                request_name=name,
            )
            # commit_transaction() rolls back on its own failures
            if self._unit_of_work.has_active_transaction:
                await self._unit_of_work.rollback_transaction()
            raise

        self._logger.info("Transaction committed", request_name=name)
        return response
