"""Transaction correlation surfaces."""

from .correlator import (
    OUTCOME_ALREADY_CLOSED,
    OUTCOME_ANSWER_KIND_MISMATCH,
    OUTCOME_CLOSED,
    OUTCOME_OPENED,
    Transaction,
    TransactionCorrelator,
    TransactionResult,
    TransactionState,
)
from .errors import (
    DuplicateTransactionError,
    TransactionError,
    UnexpectedAnswerError,
    reason_code,
)

__all__ = [
    "DuplicateTransactionError",
    "OUTCOME_ALREADY_CLOSED",
    "OUTCOME_ANSWER_KIND_MISMATCH",
    "OUTCOME_CLOSED",
    "OUTCOME_OPENED",
    "Transaction",
    "TransactionCorrelator",
    "TransactionError",
    "TransactionResult",
    "TransactionState",
    "UnexpectedAnswerError",
    "reason_code",
]
