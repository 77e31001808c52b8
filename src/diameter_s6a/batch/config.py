"""Batch run profile loader."""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
import re
from typing import Any, Mapping

import yaml

from .rows import DEFAULT_DELIMITER


_ENV_PATTERN = re.compile(r"^\$\{([^}:]+)(?::-([^}]*))?\}$")


class BatchProfileError(ValueError):
    """Raised when a run profile payload is invalid."""


@dataclass(frozen=True)
class BatchProfile:
    profile_id: str = "local"
    input_path: str | None = None
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"
    metrics_path: str | None = None
    log_paths: tuple[str, ...] = ()
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Path) -> "BatchProfile":
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not isinstance(payload, Mapping):
            raise BatchProfileError("S6A_PROFILE_INVALID")
        s6a = payload.get("s6a") if isinstance(payload.get("s6a"), Mapping) else {}
        wiring = s6a.get("wiring") if isinstance(s6a.get("wiring"), Mapping) else {}
        delimiter = str(_env(wiring.get("delimiter")) or DEFAULT_DELIMITER)
        if len(delimiter) != 1:
            raise BatchProfileError(f"delimiter must be a single character, got {delimiter!r}")
        log_paths = wiring.get("log_paths") or []
        if not isinstance(log_paths, list):
            raise BatchProfileError("log_paths must be a list")
        return cls(
            profile_id=str(payload.get("profile_id") or "local"),
            input_path=_none_if_blank(_env(wiring.get("input_path"))),
            delimiter=delimiter,
            encoding=str(_env(wiring.get("encoding")) or "utf-8"),
            metrics_path=_none_if_blank(_env(wiring.get("metrics_path"))),
            log_paths=tuple(str(_env(item)) for item in log_paths if _none_if_blank(_env(item))),
            log_level=str(_env(wiring.get("log_level")) or "INFO").strip().upper(),
        )

    def with_overrides(self, **overrides: Any) -> "BatchProfile":
        applied = {key: value for key, value in overrides.items() if value not in (None, "")}
        return replace(self, **applied)


def _env(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    match = _ENV_PATTERN.fullmatch(value.strip())
    if not match:
        return value
    return os.getenv(match.group(1), match.group(2) or "")


def _none_if_blank(value: Any) -> str | None:
    text = str(value or "").strip()
    return text or None
