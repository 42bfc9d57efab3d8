"""Domain protocols (ports) package.

This package contains protocol definitions that the application layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import UnitOfWorkProtocol, LoggerProtocol
"""

from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.repository_protocol import RepositoryProtocol
from src.domain.protocols.unit_of_work_protocol import (
    TransactionState,
    UnitOfWorkProtocol,
)

__all__ = [
    "CurrentUserProtocol",
    "LoggerProtocol",
    "RepositoryProtocol",
    "TransactionState",
    "UnitOfWorkProtocol",
]
