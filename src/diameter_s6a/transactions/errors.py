"""Correlation error taxonomy and helpers."""

from __future__ import annotations


class TransactionError(RuntimeError):
    """Correlation rejected; the message leaves every transaction untouched."""

    code = "TRANSACTION_ERROR"

    def __init__(self, session_id: str, detail: str) -> None:
        self.session_id = session_id
        self.detail = detail
        super().__init__(detail)


class DuplicateTransactionError(TransactionError):
    code = "DUPLICATE_TRANSACTION"

    def __init__(self, session_id: str) -> None:
        super().__init__(session_id, f"Transaction with session ID {session_id} already exists")


class UnexpectedAnswerError(TransactionError):
    code = "UNEXPECTED_ANSWER"

    def __init__(self, session_id: str) -> None:
        super().__init__(session_id, f"No existing transaction for session ID {session_id}")


def reason_code(exc: Exception) -> str:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    text = str(exc or "").strip()
    if ":" in text:
        head = text.split(":", 1)[0].strip()
        if head.isupper():
            return head
    return "INTERNAL_ERROR"
