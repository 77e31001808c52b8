"""Row -> typed message construction with polarity enforcement."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from .contracts import (
    DiameterMessage,
    authentication_information_answer,
    authentication_information_request,
    update_location_answer,
    update_location_request,
)
from .errors import PolarityMismatchError
from .taxonomy import MessageKind


class MessageRow(Protocol):
    message_type: Any
    is_request: bool
    session_id: str | None
    origin_host: str | None
    origin_realm: str | None
    user_name: str | None
    visited_plmn_id: str | None
    result_code: str | None


_BUILDERS: dict[MessageKind, Callable[[MessageRow], DiameterMessage]] = {
    MessageKind.AIR: lambda row: authentication_information_request(
        session_id=row.session_id,
        origin_host=row.origin_host,
        origin_realm=row.origin_realm,
        user_name=row.user_name,
    ),
    MessageKind.AIA: lambda row: authentication_information_answer(
        session_id=row.session_id,
        origin_host=row.origin_host,
        origin_realm=row.origin_realm,
        user_name=row.user_name,
        result_code=row.result_code,
    ),
    MessageKind.ULR: lambda row: update_location_request(
        session_id=row.session_id,
        origin_host=row.origin_host,
        origin_realm=row.origin_realm,
        user_name=row.user_name,
        visited_plmn_id=row.visited_plmn_id,
    ),
    MessageKind.ULA: lambda row: update_location_answer(
        session_id=row.session_id,
        origin_host=row.origin_host,
        origin_realm=row.origin_realm,
        user_name=row.user_name,
        result_code=row.result_code,
    ),
}


def create_message(row: MessageRow | None) -> DiameterMessage:
    """Build the message variant named by ``row.message_type``.

    Field values are copied verbatim, blanks included; the validator decides
    what is missing. Raises ``ValueError`` for an absent row or kind,
    ``UnsupportedMessageKindError`` for an unknown kind and
    ``PolarityMismatchError`` when ``row.is_request`` disagrees with the kind.
    """
    if row is None or getattr(row, "message_type", None) is None:
        raise ValueError("row or message type cannot be None")
    kind = MessageKind.parse(row.message_type)
    if bool(row.is_request) != kind.is_request:
        raise PolarityMismatchError(kind.value, kind.is_request)
    return _BUILDERS[kind](row)
