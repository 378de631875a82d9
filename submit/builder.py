"""SubmissionBuilder: prüft den Modellzustand und baut den Request-Body.

Beim Absenden werden ALLE sieben Tage neu validiert, unabhängig von
zwischengespeicherten Fehleranzeigen der UI.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from analysis.interval_validator import validate_intervals
from models.schedule_model import WEEKDAYS, ScheduleModel, ScheduleSnapshot
from models.selection import TimeRange
from submit.errors import EmptySelectionError, ScheduleValidationError

logger = logging.getLogger(__name__)

NO_LINES = "Please select at least one train line."
NO_RANGES = "Please add at least one time range."


class SubmissionPayload(BaseModel):
    """Kanonischer Request-Body.

    Intern ``tags``/``schedule``, auf dem Draht ``lines``/``times``.
    """

    model_config = ConfigDict(frozen=True)

    tags: tuple[str, ...] = Field(serialization_alias="lines")
    schedule: dict[str, tuple[TimeRange, ...]] = Field(serialization_alias="times")

    def to_wire(self) -> dict:
        """JSON-fähiges dict in Drahtform."""
        return self.model_dump(mode="json", by_alias=True)


class SubmissionBuilder:
    """Torwächter zwischen Modell und Netzwerk."""

    def build(self, model: ScheduleModel) -> SubmissionPayload:
        """Baut den Payload oder wirft einen SubmissionError."""
        return self.build_from_snapshot(model.snapshot())

    def build_from_snapshot(self, snap: ScheduleSnapshot) -> SubmissionPayload:
        if not snap.tags:
            raise EmptySelectionError(NO_LINES)

        for day in WEEKDAYS:
            result = validate_intervals(snap.day(day).intervals)
            if not result.is_valid:
                logger.info(f"Absenden abgelehnt: {day}: {result.message}")
                raise ScheduleValidationError(day, result.message)

        schedule: dict[str, tuple[TimeRange, ...]] = {}
        for day in WEEKDAYS:
            ranges = tuple(
                TimeRange(start=iv.start_label, end=iv.end_label)
                for iv in snap.day(day).complete_intervals
            )
            if ranges:
                schedule[day] = ranges

        if not schedule:
            raise EmptySelectionError(NO_RANGES)

        return SubmissionPayload(tags=snap.tags, schedule=schedule)
