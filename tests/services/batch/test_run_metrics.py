from __future__ import annotations

import json
from pathlib import Path

import pytest

from diameter_s6a.batch import BatchRunMetrics


def test_metrics_initialise_required_counters() -> None:
    metrics = BatchRunMetrics(run_id="run-1")
    assert metrics.counters["messages_total"] == 0
    assert metrics.counters["answer_kind_mismatches"] == 0


def test_metrics_reject_unknown_counter() -> None:
    metrics = BatchRunMetrics(run_id="run-1")
    with pytest.raises(ValueError):
        metrics.bump("bogus")
    with pytest.raises(ValueError):
        metrics.set("bogus", 1)


def test_metrics_require_run_id() -> None:
    with pytest.raises(ValueError):
        BatchRunMetrics(run_id=" ")


def test_metrics_export_writes_snapshot(tmp_path: Path) -> None:
    metrics = BatchRunMetrics(run_id="run-1", input_ref="batch.csv")
    metrics.bump("messages_total", 2)
    metrics.set("transactions_completed", 1)
    path = tmp_path / "out" / "metrics.json"
    payload = metrics.export(path)
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored == payload
    assert stored["run_id"] == "run-1"
    assert stored["input_ref"] == "batch.csv"
    assert stored["metrics"]["messages_total"] == 2
    assert stored["metrics"]["transactions_completed"] == 1
