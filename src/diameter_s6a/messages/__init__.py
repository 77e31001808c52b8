"""S6a message model, factory, and validator."""

from .contracts import (
    DiameterMessage,
    authentication_information_answer,
    authentication_information_request,
    update_location_answer,
    update_location_request,
)
from .errors import (
    MessageConstructionError,
    PolarityMismatchError,
    UnsupportedMessageKindError,
)
from .factory import create_message
from .taxonomy import (
    ANSWER_KIND_BY_REQUEST,
    MessageKind,
    expected_answer_kind,
    is_expected_answer,
)
from .validation import RULES_BY_KIND, ValidationOutcome, validate_message

__all__ = [
    "ANSWER_KIND_BY_REQUEST",
    "DiameterMessage",
    "MessageConstructionError",
    "MessageKind",
    "PolarityMismatchError",
    "RULES_BY_KIND",
    "UnsupportedMessageKindError",
    "ValidationOutcome",
    "authentication_information_answer",
    "authentication_information_request",
    "create_message",
    "expected_answer_kind",
    "is_expected_answer",
    "update_location_answer",
    "update_location_request",
    "validate_message",
]
