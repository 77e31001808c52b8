"""Delimited-text row model and header-driven parser."""

from __future__ import annotations

import csv
from enum import Enum
import logging
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


logger = logging.getLogger("diameter_s6a.batch.rows")

DEFAULT_DELIMITER = ","


class CsvColumn(str, Enum):
    MESSAGE_TYPE = "message_type"
    IS_REQUEST = "is_request"
    SESSION_ID = "session_id"
    ORIGIN_HOST = "origin_host"
    ORIGIN_REALM = "origin_realm"
    USER_NAME = "user_name"
    VISITED_PLMN_ID = "visited_plmn_id"
    RESULT_CODE = "result_code"


class CsvValidationError(ValueError):
    """Raised when the header or a single data line is malformed."""


class CsvRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    message_type: str
    is_request: bool
    session_id: Optional[str] = None
    origin_host: Optional[str] = None
    origin_realm: Optional[str] = None
    user_name: Optional[str] = None
    visited_plmn_id: Optional[str] = None
    result_code: Optional[str] = None
    line_number: Optional[int] = None

    @field_validator("message_type", mode="before")
    @classmethod
    def _message_type(cls, value: object) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("message_type is empty")
        return text

    @field_validator("is_request", mode="before")
    @classmethod
    def _strict_bool(cls, value: object) -> bool:
        if isinstance(value, bool):
            return value
        text = str(value or "").strip().lower()
        if text not in {"true", "false"}:
            raise ValueError(f"is_request must be true or false, got {value!r}")
        return text == "true"

    @field_validator(
        "session_id",
        "origin_host",
        "origin_realm",
        "user_name",
        "visited_plmn_id",
        "result_code",
        mode="before",
    )
    @classmethod
    def _empty_to_none(cls, value: object) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class CsvRowParser:
    """Maps header names to positions, then turns each data line into a CsvRow.

    Header problems fail the whole input. A malformed data line is logged and
    skipped, it never reaches the message factory.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self.delimiter = delimiter

    def parse(self, lines: Iterable[str] | None) -> list[CsvRow]:
        materialized = list(lines) if lines is not None else []
        if not materialized:
            raise CsvValidationError("CSV file is empty")
        header_map = self._header_map(materialized[0])
        rows: list[CsvRow] = []
        for index, line in enumerate(materialized[1:], start=2):
            if not line.strip():
                continue
            try:
                rows.append(self._parse_line(line, index, header_map))
            except CsvValidationError as exc:
                logger.warning("Skipping invalid line %s: %s", index, exc)
        return rows

    def _header_map(self, header_line: str) -> dict[CsvColumn, int]:
        if not header_line or not header_line.strip():
            raise CsvValidationError("CSV header is missing or empty")
        header_map: dict[CsvColumn, int] = {}
        for position, name in enumerate(self._split(header_line)):
            try:
                column = CsvColumn(name.strip().lower())
            except ValueError:
                raise CsvValidationError(f"Unknown CSV column: {name}") from None
            header_map[column] = position
        for required in CsvColumn:
            if required not in header_map:
                raise CsvValidationError(f"Missing required column: {required.value}")
        return header_map

    def _parse_line(self, line: str, line_number: int, header_map: dict[CsvColumn, int]) -> CsvRow:
        parts = self._split(line)
        if len(parts) < len(header_map):
            raise CsvValidationError(f"Line {line_number} has fewer columns than expected")
        values = {column.value: parts[position].strip() for column, position in header_map.items()}
        try:
            return CsvRow(line_number=line_number, **values)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
            )
            raise CsvValidationError(f"Invalid values at line {line_number}: {details}") from exc

    def _split(self, line: str) -> list[str]:
        return next(csv.reader([line.rstrip("\r\n")], delimiter=self.delimiter), [])
