"""Mandatory AVP presence checks, dispatched by message kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .contracts import DiameterMessage
from .taxonomy import (
    AVP_ORIGIN_HOST,
    AVP_ORIGIN_REALM,
    AVP_RESULT_CODE,
    AVP_SESSION_ID,
    AVP_USER_NAME,
    AVP_VISITED_PLMN_ID,
    MessageKind,
)


@dataclass(frozen=True)
class ValidationOutcome:
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class MandatoryAvp:
    avp_name: str
    read: Callable[[DiameterMessage], str | None]

    def error_for(self, message: DiameterMessage) -> str | None:
        if _is_blank(self.read(message)):
            return f"{self.avp_name} is mandatory"
        return None


_SESSION_ID = MandatoryAvp(AVP_SESSION_ID, lambda m: m.session_id)
_ORIGIN_HOST = MandatoryAvp(AVP_ORIGIN_HOST, lambda m: m.origin_host)
_ORIGIN_REALM = MandatoryAvp(AVP_ORIGIN_REALM, lambda m: m.origin_realm)
_USER_NAME = MandatoryAvp(AVP_USER_NAME, lambda m: m.user_name)
_VISITED_PLMN_ID = MandatoryAvp(AVP_VISITED_PLMN_ID, lambda m: m.visited_plmn_id)
_RESULT_CODE = MandatoryAvp(AVP_RESULT_CODE, lambda m: m.result_code)

_REQUEST_RULES: tuple[MandatoryAvp, ...] = (_SESSION_ID, _ORIGIN_HOST, _ORIGIN_REALM, _USER_NAME)
_ANSWER_RULES: tuple[MandatoryAvp, ...] = (_SESSION_ID, _ORIGIN_HOST, _ORIGIN_REALM, _RESULT_CODE)

RULES_BY_KIND: dict[MessageKind, tuple[MandatoryAvp, ...]] = {
    MessageKind.AIR: _REQUEST_RULES,
    MessageKind.ULR: _REQUEST_RULES + (_VISITED_PLMN_ID,),
    MessageKind.AIA: _ANSWER_RULES,
    MessageKind.ULA: _ANSWER_RULES,
}


def validate_message(message: DiameterMessage | None) -> ValidationOutcome:
    if message is None:
        raise ValueError("message cannot be None")
    errors: list[str] = []
    for rule in RULES_BY_KIND[message.kind]:
        error = rule.error_for(message)
        if error is not None:
            errors.append(error)
    return ValidationOutcome(errors=tuple(errors))


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()
