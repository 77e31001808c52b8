"""Batch run counters and JSON export."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Any


_REQUIRED_COUNTERS: tuple[str, ...] = (
    "messages_total",
    "messages_valid",
    "messages_invalid",
    "construction_errors",
    "validation_failures",
    "correlation_errors",
    "duplicate_transactions",
    "unexpected_answers",
    "answer_kind_mismatches",
    "transactions_completed",
    "transactions_incomplete",
)


@dataclass
class BatchRunMetrics:
    run_id: str
    input_ref: str | None = None
    counters: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.run_id = _required(self.run_id, "run_id")
        for key in _REQUIRED_COUNTERS:
            self.counters.setdefault(key, 0)

    def bump(self, key: str, delta: int = 1) -> None:
        if key not in self.counters:
            raise ValueError(f"unsupported metric counter: {key}")
        self.counters[key] = int(self.counters.get(key, 0)) + int(delta)

    def set(self, key: str, value: int) -> None:
        if key not in self.counters:
            raise ValueError(f"unsupported metric counter: {key}")
        self.counters[key] = int(value)

    def snapshot(self) -> dict[str, Any]:
        return {
            "generated_at_utc": _utc_now(),
            "run_id": self.run_id,
            "input_ref": self.input_ref,
            "metrics": dict(self.counters),
        }

    def export(self, path: str | Path) -> dict[str, Any]:
        payload = self.snapshot()
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(payload, sort_keys=True, ensure_ascii=True, indent=2) + "\n", encoding="utf-8")
        return payload


def _required(value: Any, field_name: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError(f"{field_name} is required")
    return text


def _utc_now() -> str:
    return datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
