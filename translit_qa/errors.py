"""Exception hierarchy for the harness."""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for failures that abort a phase of the run."""


class SetupFailure(HarnessError):
    """The target page could not be prepared (load failed or elements missing)."""


class FixtureError(HarnessError):
    """The fixture workbook is missing, unreadable or malformed."""

    def __init__(self, message: str, path: str | None = None, row: int | None = None):
        self.path = path
        self.row = row
        location = ""
        if path:
            location = f" [{path}" + (f", row {row}" if row is not None else "") + "]"
        super().__init__(f"{message}{location}")


class ReportWriteError(HarnessError):
    """A report artefact could not be written."""
