"""Absende-Modul: Payload bauen (SubmissionBuilder) und senden (requests)."""

from submit.builder import SubmissionBuilder, SubmissionPayload
from submit.errors import (
    EmptySelectionError,
    ScheduleValidationError,
    SubmissionError,
    SubmissionInProgressError,
    TransportError,
)
from submit.submitter import Submitter, SubmitOutcome

__all__ = [
    "SubmissionBuilder",
    "SubmissionPayload",
    "SubmissionError",
    "EmptySelectionError",
    "ScheduleValidationError",
    "TransportError",
    "SubmissionInProgressError",
    "Submitter",
    "SubmitOutcome",
]
