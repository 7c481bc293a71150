"""
Pydantic models for session state.

SessionRecord is written to disk between ``ego start`` and ``ego end``;
SessionSummary is built at the end and only ever displayed.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, NonNegativeInt, field_validator

RECORD_VERSION = 1


class SessionRecord(BaseModel):
    """Start-of-session measurement of one project directory."""

    version: int = RECORD_VERSION
    project_path: str
    start_time: datetime
    initial_line_count: NonNegativeInt
    initial_char_count: NonNegativeInt = 0
    include_hidden: bool = True
    file_fingerprints: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("start_time")
    @classmethod
    def _require_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("start_time must be timezone-aware")
        return value


class SessionSummary(BaseModel):
    """Outcome of a finished session."""

    project_path: str
    start_time: datetime
    end_time: datetime
    duration: timedelta
    initial_line_count: NonNegativeInt
    final_line_count: NonNegativeInt
    lines_delta: int
    initial_char_count: NonNegativeInt = 0
    final_char_count: NonNegativeInt = 0
    chars_delta: int = 0
    files_created: list[str] = Field(default_factory=list)
    files_modified: list[str] = Field(default_factory=list)
    files_deleted: list[str] = Field(default_factory=list)
    warnings: NonNegativeInt = 0

    @property
    def lines_per_hour(self) -> float:
        """Net lines per hour of wall-clock time (0.0 for an empty interval)."""
        hours = self.duration.total_seconds() / 3600
        if hours <= 0:
            return 0.0
        return self.lines_delta / hours
