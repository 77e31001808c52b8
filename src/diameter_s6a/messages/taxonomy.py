"""S6a message kinds, polarity, and request/answer pairing."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import UnsupportedMessageKindError


class MessageKind(str, Enum):
    AIR = "AIR"
    AIA = "AIA"
    ULR = "ULR"
    ULA = "ULA"

    @property
    def is_request(self) -> bool:
        return self in _REQUEST_KINDS

    @classmethod
    def parse(cls, raw: object) -> "MessageKind":
        if isinstance(raw, cls):
            return raw
        token = str(raw or "").strip()
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMessageKindError(token) from None


_REQUEST_KINDS = frozenset({MessageKind.AIR, MessageKind.ULR})

ANSWER_KIND_BY_REQUEST: Mapping[MessageKind, MessageKind] = MappingProxyType(
    {
        MessageKind.AIR: MessageKind.AIA,
        MessageKind.ULR: MessageKind.ULA,
    }
)

# AVP display names, in the order they are checked.
AVP_SESSION_ID = "Session-Id"
AVP_ORIGIN_HOST = "Origin-Host"
AVP_ORIGIN_REALM = "Origin-Realm"
AVP_USER_NAME = "User-Name"
AVP_VISITED_PLMN_ID = "Visited-PLMN-Id"
AVP_RESULT_CODE = "Result-Code"


def expected_answer_kind(kind: MessageKind) -> MessageKind | None:
    return ANSWER_KIND_BY_REQUEST.get(kind)


def is_expected_answer(request_kind: MessageKind, answer_kind: MessageKind) -> bool:
    expected = ANSWER_KIND_BY_REQUEST.get(request_kind)
    return expected is not None and expected == answer_kind
