"""Pipeline behaviors.

Cross-cutting stages composed around every handler in a fixed order:

    PerformanceBehavior -> ValidationBehavior -> TransactionBehavior -> handler

Usage:
    from src.application.behaviors import build_pipeline

    run = build_pipeline(
        [
            PerformanceBehavior(logger),
            ValidationBehavior(validators, logger),
            TransactionBehavior(unit_of_work, logger),
        ],
        handler.handle,
    )
    result = await run(request)
"""

from src.application.behaviors.performance_behavior import PerformanceBehavior
from src.application.behaviors.pipeline import (
    NextStep,
    PipelineBehavior,
    Validator,
    build_pipeline,
)
from src.application.behaviors.transaction_behavior import TransactionBehavior
from src.application.behaviors.validation_behavior import ValidationBehavior

__all__ = [
    "NextStep",
    "PerformanceBehavior",
    "PipelineBehavior",
    "TransactionBehavior",
    "ValidationBehavior",
    "Validator",
    "build_pipeline",
]
