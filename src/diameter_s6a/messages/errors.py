"""Message construction error taxonomy."""

from __future__ import annotations


class MessageConstructionError(ValueError):
    """Row could not be turned into a typed message; the row is skipped."""

    code = "MESSAGE_CONSTRUCTION_FAILED"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = f"{self.code}:{detail}" if detail else self.code
        super().__init__(message)


class UnsupportedMessageKindError(MessageConstructionError):
    code = "UNSUPPORTED_MESSAGE_KIND"

    def __init__(self, raw_kind: str) -> None:
        self.raw_kind = raw_kind
        super().__init__(f"Unsupported message type: {raw_kind}")


class PolarityMismatchError(MessageConstructionError):
    code = "POLARITY_MISMATCH"

    def __init__(self, kind: str, expected_request: bool) -> None:
        self.kind = kind
        self.expected_request = expected_request
        super().__init__(
            f"Type mismatch: {kind} expected is_request={str(expected_request).lower()}"
        )
