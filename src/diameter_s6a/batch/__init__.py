"""Batch run surfaces: row parsing, orchestration, reporting."""

from .config import BatchProfile, BatchProfileError
from .observability import BatchRunMetrics
from .orchestrator import (
    RESULT_ERROR,
    RESULT_SUCCESS,
    RESULT_VALIDATION_FAILURE,
    BatchOrchestrator,
    BatchRunResult,
    BatchSummary,
    ProcessingResult,
)
from .reader import BatchInputError, read_lines
from .reporter import SummaryReporter
from .rows import CsvColumn, CsvRow, CsvRowParser, CsvValidationError

__all__ = [
    "BatchInputError",
    "BatchOrchestrator",
    "BatchProfile",
    "BatchProfileError",
    "BatchRunMetrics",
    "BatchRunResult",
    "BatchSummary",
    "CsvColumn",
    "CsvRow",
    "CsvRowParser",
    "CsvValidationError",
    "ProcessingResult",
    "RESULT_ERROR",
    "RESULT_SUCCESS",
    "RESULT_VALIDATION_FAILURE",
    "SummaryReporter",
    "read_lines",
]
