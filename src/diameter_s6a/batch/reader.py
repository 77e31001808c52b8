"""Input file access for a batch run."""

from __future__ import annotations

from pathlib import Path


class BatchInputError(RuntimeError):
    """The input batch could not be obtained; fatal for the run."""


def read_lines(path: str | Path, *, encoding: str = "utf-8") -> list[str]:
    csv_path = Path(path)
    try:
        return csv_path.read_text(encoding=encoding).splitlines()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise BatchInputError(f"Failed to read CSV file: {csv_path}") from exc
