"""Human-readable batch summary."""

from __future__ import annotations

import sys
from typing import TextIO

from .orchestrator import BatchRunResult, BatchSummary


class SummaryReporter:
    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @staticmethod
    def render(summary: BatchSummary) -> str:
        return (
            f"Total messages: {summary.total}\n"
            f"Valid messages: {summary.valid}\n"
            f"Invalid messages: {summary.invalid}\n"
            f"Completed transactions: {summary.completed}\n"
            f"Incomplete transactions: {summary.incomplete}"
        )

    def report(self, run: BatchRunResult) -> None:
        out = self._out or sys.stdout
        err = self._err or sys.stderr
        print(self.render(run.summary), file=out)
        print("\nErrors:", file=out)
        for message in run.error_messages:
            print(message, file=err)
