"""Batch sequencing: row -> message -> validation -> correlation -> counts."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Iterable
import uuid

from diameter_s6a.messages import (
    MessageConstructionError,
    create_message,
    validate_message,
)
from diameter_s6a.transactions import (
    OUTCOME_ANSWER_KIND_MISMATCH,
    DuplicateTransactionError,
    TransactionCorrelator,
    TransactionError,
    TransactionResult,
    UnexpectedAnswerError,
    reason_code,
)

from .observability import BatchRunMetrics
from .reader import read_lines
from .rows import DEFAULT_DELIMITER, CsvRow, CsvRowParser


logger = logging.getLogger("diameter_s6a.batch.orchestrator")

RESULT_SUCCESS = "SUCCESS"
RESULT_VALIDATION_FAILURE = "VALIDATION_FAILURE"
RESULT_ERROR = "ERROR"


@dataclass(frozen=True)
class ProcessingResult:
    status: str
    error_message: str | None = None
    validation_errors: tuple[str, ...] = ()
    outcome: str | None = None
    line_number: int | None = None

    @classmethod
    def success(cls, outcome: str | None = None, *, line_number: int | None = None) -> "ProcessingResult":
        return cls(status=RESULT_SUCCESS, outcome=outcome, line_number=line_number)

    @classmethod
    def validation_failure(
        cls, errors: Iterable[str] = (), *, line_number: int | None = None
    ) -> "ProcessingResult":
        return cls(status=RESULT_VALIDATION_FAILURE, validation_errors=tuple(errors), line_number=line_number)

    @classmethod
    def error(cls, message: str, *, line_number: int | None = None) -> "ProcessingResult":
        return cls(status=RESULT_ERROR, error_message=message, line_number=line_number)

    @property
    def is_valid(self) -> bool:
        return self.status == RESULT_SUCCESS


@dataclass(frozen=True)
class BatchSummary:
    total: int
    valid: int
    invalid: int
    completed: int
    incomplete: int


@dataclass
class BatchRunResult:
    results: list[ProcessingResult]
    transaction_result: TransactionResult
    metrics: BatchRunMetrics
    summary: BatchSummary = field(init=False)

    def __post_init__(self) -> None:
        total = len(self.results)
        valid = sum(1 for item in self.results if item.is_valid)
        self.summary = BatchSummary(
            total=total,
            valid=valid,
            invalid=total - valid,
            completed=self.transaction_result.complete,
            incomplete=self.transaction_result.incomplete,
        )

    @property
    def error_messages(self) -> list[str]:
        return [item.error_message for item in self.results if item.error_message is not None]


class BatchOrchestrator:
    def __init__(
        self,
        *,
        correlator: TransactionCorrelator | None = None,
        parser: CsvRowParser | None = None,
        run_id: str | None = None,
    ) -> None:
        self.correlator = correlator if correlator is not None else TransactionCorrelator()
        self.parser = parser if parser is not None else CsvRowParser(DEFAULT_DELIMITER)
        self.run_id = run_id or uuid.uuid4().hex

    def run(self, path: str | Path, *, encoding: str = "utf-8") -> BatchRunResult:
        lines = read_lines(path, encoding=encoding)
        rows = self.parser.parse(lines)
        logger.info("Batch %s loaded rows=%s from %s", self.run_id, len(rows), path)
        return self.process_rows(rows, input_ref=str(path))

    def process_rows(self, rows: Iterable[CsvRow], *, input_ref: str | None = None) -> BatchRunResult:
        metrics = BatchRunMetrics(run_id=self.run_id, input_ref=input_ref)
        results: list[ProcessingResult] = []
        for row in rows:
            result = self.process_row(row, metrics)
            results.append(result)
            metrics.bump("messages_total")
            metrics.bump("messages_valid" if result.is_valid else "messages_invalid")

        transaction_result = self.correlator.transaction_result()
        metrics.set("transactions_completed", transaction_result.complete)
        metrics.set("transactions_incomplete", transaction_result.incomplete)
        run = BatchRunResult(results=results, transaction_result=transaction_result, metrics=metrics)
        logger.info(
            "Batch %s done total=%s valid=%s invalid=%s completed=%s incomplete=%s",
            self.run_id,
            run.summary.total,
            run.summary.valid,
            run.summary.invalid,
            run.summary.completed,
            run.summary.incomplete,
        )
        return run

    def process_row(self, row: CsvRow, metrics: BatchRunMetrics) -> ProcessingResult:
        line_number = getattr(row, "line_number", None)
        try:
            message = create_message(row)
        except MessageConstructionError as exc:
            metrics.bump("construction_errors")
            logger.warning("Line %s rejected: %s", line_number, exc.detail or exc)
            return ProcessingResult.error(str(exc.detail or exc), line_number=line_number)

        outcome = validate_message(message)
        if not outcome.is_valid:
            metrics.bump("validation_failures")
            logger.info(
                "Line %s invalid %s session_id=%s: %s",
                line_number,
                message.kind.value,
                message.session_id,
                "; ".join(outcome.errors),
            )
            return ProcessingResult.validation_failure(outcome.errors, line_number=line_number)

        try:
            correlation = self.correlator.process_message(message)
        except TransactionError as exc:
            metrics.bump("correlation_errors")
            if isinstance(exc, DuplicateTransactionError):
                metrics.bump("duplicate_transactions")
            elif isinstance(exc, UnexpectedAnswerError):
                metrics.bump("unexpected_answers")
            logger.warning("Line %s correlation rejected (%s): %s", line_number, reason_code(exc), exc)
            return ProcessingResult.error(str(exc), line_number=line_number)

        if correlation == OUTCOME_ANSWER_KIND_MISMATCH:
            metrics.bump("answer_kind_mismatches")
        return ProcessingResult.success(correlation, line_number=line_number)
