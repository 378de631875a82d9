"""Validierung der Zeitbereiche eines Wochentags.

Prüft Reihenfolge (start < end) und Überschneidungsfreiheit der
vollständigen Zeitbereiche. Unvollständige Bereiche werden ignoriert.
Die Prüfung bricht beim ersten Fehler ab (nur eine Meldung pro Tag).
"""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from models.interval import Endpoint, Interval

END_BEFORE_START = "End time must be after start time."
OVERLAP = "Time ranges cannot overlap."


class OffendingEndpoint(BaseModel):
    """Ein fehlerhaftes Eingabefeld: Zeitbereich + welcher Endpunkt."""

    model_config = ConfigDict(frozen=True)

    interval_id: str
    endpoint: Endpoint


class ValidationResult(BaseModel):
    """Ergebnis der Validierung eines Tages."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str = ""
    offending: tuple[OffendingEndpoint, ...] = ()

    def flags(self, interval_id: str, endpoint: Endpoint) -> bool:
        """True wenn das Feld als fehlerhaft markiert werden soll."""
        return OffendingEndpoint(interval_id=interval_id, endpoint=endpoint) in self.offending

    def print_rich(self, day: Optional[str] = None) -> None:
        """Gibt das Ergebnis formatiert über Rich aus."""
        from rich.console import Console

        console = Console()
        prefix = f"[bold]{day}:[/bold] " if day else ""
        if self.is_valid:
            console.print(f"{prefix}[green]✓ OK[/green]")
        else:
            console.print(f"{prefix}[red]✗ {self.message}[/red]")


VALID = ValidationResult(is_valid=True)


def validate_intervals(intervals: Iterable[Interval]) -> ValidationResult:
    """Validiert die Zeitbereiche eines Tages.

    1. Nur vollständige Bereiche werden geprüft.
    2. Stabil nach Startzeit sortieren (Einfügereihenfolge bleibt bei
       gleichem Start erhalten → deterministisch).
    3. Für jeden Bereich start < end, für jedes Nachbarpaar
       prior.end <= next.start (Berühren ist erlaubt).
    """
    ranges = sorted((iv for iv in intervals if iv.is_complete), key=lambda iv: iv.start)

    for i, current in enumerate(ranges):
        if current.start >= current.end:
            return ValidationResult(
                is_valid=False,
                message=END_BEFORE_START,
                offending=(OffendingEndpoint(interval_id=current.id, endpoint="end"),),
            )

        if i < len(ranges) - 1:
            nxt = ranges[i + 1]
            if current.end > nxt.start:
                return ValidationResult(
                    is_valid=False,
                    message=OVERLAP,
                    offending=(
                        OffendingEndpoint(interval_id=current.id, endpoint="end"),
                        OffendingEndpoint(interval_id=nxt.id, endpoint="start"),
                    ),
                )

    return VALID
