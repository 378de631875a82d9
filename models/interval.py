"""Datenmodell für einen Zeitbereich [start, end) innerhalb eines Wochentags."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.time_of_day import MINUTES_PER_DAY, format_time

Endpoint = Literal["start", "end"]


class Interval(BaseModel):
    """Ein vom Nutzer angelegter Zeitbereich.

    Immutable (frozen=True): Änderungen erzeugen eine neue Instanz via
    model_copy, damit Snapshots nie nachträglich verändert werden.
    """

    model_config = ConfigDict(frozen=True)

    # Stabile Identität, nur zur Zuordnung von Fehlern zur UI
    id: str
    # Minuten seit Mitternacht; None = nicht (gültig) ausgefüllt
    start: Optional[int] = Field(default=None, ge=0, lt=MINUTES_PER_DAY)
    end: Optional[int] = Field(default=None, ge=0, lt=MINUTES_PER_DAY)

    @property
    def is_complete(self) -> bool:
        """True wenn beide Endpunkte gesetzt sind."""
        return self.start is not None and self.end is not None

    @property
    def start_label(self) -> str:
        return format_time(self.start) if self.start is not None else ""

    @property
    def end_label(self) -> str:
        return format_time(self.end) if self.end is not None else ""

    def __str__(self) -> str:
        return f"{self.start_label or '--:--'}–{self.end_label or '--:--'}"
