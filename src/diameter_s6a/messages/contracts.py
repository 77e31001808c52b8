"""Typed S6a message contract.

One frozen record covers all four kinds. Polarity is derived from the kind and
cannot be set independently. Kind-specific AVPs (Visited-PLMN-Id on ULR,
Result-Code on answers) are carried as optional fields; whether they are
present is a validation concern, never a construction one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .taxonomy import MessageKind


@dataclass(frozen=True)
class DiameterMessage:
    kind: MessageKind
    session_id: str | None
    origin_host: str | None
    origin_realm: str | None
    user_name: str | None
    visited_plmn_id: str | None = None
    result_code: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", MessageKind.parse(self.kind))

    @property
    def is_request(self) -> bool:
        return self.kind.is_request

    @property
    def is_answer(self) -> bool:
        return not self.kind.is_request

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message_type": self.kind.value,
            "is_request": self.is_request,
            "session_id": self.session_id,
            "origin_host": self.origin_host,
            "origin_realm": self.origin_realm,
            "user_name": self.user_name,
        }
        if self.kind is MessageKind.ULR:
            payload["visited_plmn_id"] = self.visited_plmn_id
        if self.is_answer:
            payload["result_code"] = self.result_code
        return payload


def authentication_information_request(
    *, session_id: str | None, origin_host: str | None, origin_realm: str | None, user_name: str | None
) -> DiameterMessage:
    return DiameterMessage(
        kind=MessageKind.AIR,
        session_id=session_id,
        origin_host=origin_host,
        origin_realm=origin_realm,
        user_name=user_name,
    )


def authentication_information_answer(
    *,
    session_id: str | None,
    origin_host: str | None,
    origin_realm: str | None,
    user_name: str | None = None,
    result_code: str | None,
) -> DiameterMessage:
    return DiameterMessage(
        kind=MessageKind.AIA,
        session_id=session_id,
        origin_host=origin_host,
        origin_realm=origin_realm,
        user_name=user_name,
        result_code=result_code,
    )


def update_location_request(
    *,
    session_id: str | None,
    origin_host: str | None,
    origin_realm: str | None,
    user_name: str | None,
    visited_plmn_id: str | None,
) -> DiameterMessage:
    return DiameterMessage(
        kind=MessageKind.ULR,
        session_id=session_id,
        origin_host=origin_host,
        origin_realm=origin_realm,
        user_name=user_name,
        visited_plmn_id=visited_plmn_id,
    )


def update_location_answer(
    *,
    session_id: str | None,
    origin_host: str | None,
    origin_realm: str | None,
    user_name: str | None = None,
    result_code: str | None,
) -> DiameterMessage:
    return DiameterMessage(
        kind=MessageKind.ULA,
        session_id=session_id,
        origin_host=origin_host,
        origin_realm=origin_realm,
        user_name=user_name,
        result_code=result_code,
    )
