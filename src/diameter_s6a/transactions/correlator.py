"""Request/answer correlation keyed by Session-Id.

Per session id: absent -> OPEN (request seen) -> CLOSED (expected answer seen).
CLOSED is terminal. A session id is single-use for the lifetime of a
correlator: any later request for it is a duplicate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import threading

from diameter_s6a.messages import DiameterMessage, expected_answer_kind

from .errors import DuplicateTransactionError, UnexpectedAnswerError


logger = logging.getLogger("diameter_s6a.transactions.correlator")

OUTCOME_OPENED = "OPENED"
OUTCOME_CLOSED = "CLOSED"
OUTCOME_ANSWER_KIND_MISMATCH = "ANSWER_KIND_MISMATCH"
OUTCOME_ALREADY_CLOSED = "ALREADY_CLOSED"


class TransactionState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass
class Transaction:
    session_id: str
    request: DiameterMessage
    answer: DiameterMessage | None = None
    mismatched_answers: int = 0

    @property
    def state(self) -> TransactionState:
        return TransactionState.CLOSED if self.answer is not None else TransactionState.OPEN


@dataclass(frozen=True)
class TransactionResult:
    complete: int
    incomplete: int


class TransactionCorrelator:
    """Owns the session map and completion counters for one batch run."""

    def __init__(self) -> None:
        self._transactions: dict[str, Transaction] = {}
        self._complete = 0
        self._incomplete = 0
        self._lock = threading.Lock()

    def process_message(self, message: DiameterMessage) -> str:
        if message is None or message.session_id is None:
            raise ValueError("message and session id cannot be None")
        with self._lock:
            if message.is_request:
                return self._open(message)
            return self._answer(message)

    def transaction_result(self) -> TransactionResult:
        with self._lock:
            return TransactionResult(complete=self._complete, incomplete=self._incomplete)

    def transaction(self, session_id: str) -> Transaction | None:
        return self._transactions.get(session_id)

    def __len__(self) -> int:
        return len(self._transactions)

    def _open(self, request: DiameterMessage) -> str:
        session_id = request.session_id
        if session_id in self._transactions:
            raise DuplicateTransactionError(session_id)
        self._transactions[session_id] = Transaction(session_id=session_id, request=request)
        self._incomplete += 1
        logger.debug("Transaction opened session_id=%s kind=%s", session_id, request.kind.value)
        return OUTCOME_OPENED

    def _answer(self, answer: DiameterMessage) -> str:
        session_id = answer.session_id
        transaction = self._transactions.get(session_id)
        if transaction is None:
            raise UnexpectedAnswerError(session_id)
        expected = expected_answer_kind(transaction.request.kind)
        if answer.kind != expected:
            transaction.mismatched_answers += 1
            logger.warning(
                "Answer kind mismatch session_id=%s request=%s expected=%s received=%s",
                session_id,
                transaction.request.kind.value,
                expected.value if expected else None,
                answer.kind.value,
            )
            return OUTCOME_ANSWER_KIND_MISMATCH
        if transaction.state is TransactionState.CLOSED:
            logger.warning("Answer for closed transaction ignored session_id=%s", session_id)
            return OUTCOME_ALREADY_CLOSED
        transaction.answer = answer
        self._complete += 1
        self._incomplete -= 1
        logger.debug("Transaction closed session_id=%s kind=%s", session_id, answer.kind.value)
        return OUTCOME_CLOSED
