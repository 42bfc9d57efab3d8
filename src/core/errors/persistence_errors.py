"""Exceptions raised by the persistence layer.

Unlike ValidationError (returned as data), these are genuine exceptional
conditions. They propagate up the call stack; the transaction behavior rolls
back before re-raising them.

Exceptions:
- PersistenceError: Base class for unit-of-work failures.
- ConcurrencyConflictError: Row version mismatch detected while saving.
- TransactionStateError: Transaction boundary called in the wrong state
  (programmer error, e.g. nested begin).
"""


class PersistenceError(Exception):
    """Base class for persistence-layer exceptions."""


class ConcurrencyConflictError(PersistenceError):
    """Saved entity was modified by someone else since it was read.

    Raised by ``UnitOfWork.save_changes()`` when an UPDATE or DELETE matched
    no row for the expected row version. Never retried automatically; the
    caller may reload and try again.

    Attributes:
        entity_type: Name of the entity class involved, if known.
    """

    def __init__(self, message: str, *, entity_type: str | None = None) -> None:
        super().__init__(message)
        self.entity_type = entity_type


class TransactionStateError(PersistenceError):
    """Transaction boundary called in an invalid state.

    Examples: begin while a transaction is open, commit or rollback with no
    open transaction.
    """
