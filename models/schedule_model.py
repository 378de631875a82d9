"""ScheduleModel: Linienauswahl + Zeitbereiche aller sieben Wochentage.

Einzige Quelle der Wahrheit für den Editor. Jede Mutation läuft strikt
sequentiell ab: ändern → Tag neu validieren → Listener benachrichtigen →
Ergebnis zurückgeben. Der Renderer sieht dadurch nie ein veraltetes
Validierungsergebnis.
"""

import itertools
import logging
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from analysis.interval_validator import ValidationResult, validate_intervals
from models.interval import Interval
from models.selection import SavedSelection, TimeRange
from models.time_of_day import parse_time

logger = logging.getLogger(__name__)

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# (day, result): day=None bei Änderungen der Linienauswahl
Listener = Callable[[Optional[str], Optional[ValidationResult]], None]


class UnknownDayError(ValueError):
    """Wochentag ist nicht einer der sieben WEEKDAYS."""


class UnknownIntervalError(KeyError):
    """Zeitbereich mit dieser ID existiert am Tag nicht."""


class DaySchedule(BaseModel):
    """Zeitbereiche eines Tages in Einfügereihenfolge (nicht Zeitreihenfolge)."""

    model_config = ConfigDict(frozen=True)

    day: str
    intervals: tuple[Interval, ...] = ()

    @property
    def complete_intervals(self) -> tuple[Interval, ...]:
        return tuple(iv for iv in self.intervals if iv.is_complete)


class ScheduleSnapshot(BaseModel):
    """Unveränderliche Kopie des Modellzustands für den SubmissionBuilder."""

    model_config = ConfigDict(frozen=True)

    tags: tuple[str, ...]
    days: tuple[DaySchedule, ...]

    def day(self, name: str) -> DaySchedule:
        for ds in self.days:
            if ds.day == name:
                return ds
        raise UnknownDayError(f"Unbekannter Wochentag: {name!r}")


class ScheduleModel:
    """Veränderbarer Zustand des Editors."""

    def __init__(self, line_order: Optional[Sequence[str]] = None) -> None:
        # Reihenfolge des Linienkatalogs; bestimmt die Ausgabe-Reihenfolge
        self._line_order = {tag: i for i, tag in enumerate(line_order or ())}
        # dict als geordnete Menge (Einfügereihenfolge)
        self._tags: dict[str, None] = {}
        self._days: dict[str, list[Interval]] = {day: [] for day in WEEKDAYS}
        self._ids = itertools.count(1)
        self._listeners: list[Listener] = []
        self.tags_dirty = False

    @classmethod
    def from_selection(
        cls, selection: SavedSelection, line_order: Optional[Sequence[str]] = None
    ) -> "ScheduleModel":
        """Erzeugt ein Modell, vorbelegt mit einem gespeicherten Stand.

        Unbekannte Wochentage werden übersprungen, nicht parsebare Zeiten
        bleiben als leere Endpunkte erhalten.
        """
        model = cls(line_order)
        for tag in selection.lines:
            model._tags[tag] = None
        for day, ranges in selection.times.items():
            if day not in model._days:
                logger.warning(f"Gespeicherter Stand enthält unbekannten Tag {day!r} – ignoriert")
                continue
            for r in ranges:
                model._days[day].append(Interval(
                    id=model._next_id(),
                    start=parse_time(r.start),
                    end=parse_time(r.end),
                ))
        return model

    # ─── Beobachter ───

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registriert einen Listener. Gibt eine Abmelde-Funktion zurück."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, day: Optional[str], result: Optional[ValidationResult]) -> None:
        for listener in list(self._listeners):
            listener(day, result)

    # ─── Linien ───

    def toggle_tag(self, tag_id: str) -> bool:
        """Schaltet eine Linie um. Gibt True zurück wenn sie jetzt gewählt ist."""
        if tag_id in self._tags:
            del self._tags[tag_id]
            selected = False
        else:
            self._tags[tag_id] = None
            selected = True
        self.tags_dirty = True
        logger.debug(f"Linie {tag_id}: {'gewählt' if selected else 'abgewählt'}")
        self._notify(None, None)
        return selected

    def is_selected(self, tag_id: str) -> bool:
        return tag_id in self._tags

    def selected_tags(self) -> tuple[str, ...]:
        """Gewählte Linien in Katalog-Reihenfolge, unbekannte dahinter."""
        fallback = len(self._line_order)
        insertion = {tag: i for i, tag in enumerate(self._tags)}
        return tuple(sorted(
            self._tags,
            key=lambda t: (self._line_order.get(t, fallback), insertion[t]),
        ))

    def mark_clean(self) -> None:
        """Renderer hat die Linienauswahl neu gezeichnet."""
        self.tags_dirty = False

    # ─── Zeitbereiche ───

    def intervals(self, day: str) -> tuple[Interval, ...]:
        return tuple(self._day(day))

    def add_interval(self, day: str) -> str:
        """Hängt einen leeren Zeitbereich an und gibt dessen ID zurück."""
        intervals = self._day(day)
        interval = Interval(id=self._next_id())
        intervals.append(interval)
        logger.debug(f"{day}: Zeitbereich {interval.id} angelegt")
        self._notify(day, self.validate_day(day))
        return interval.id

    def remove_interval(self, day: str, interval_id: str) -> ValidationResult:
        """Entfernt einen Zeitbereich. Unbekannte ID ist kein Fehler
        (doppelte Klick-Events der UI)."""
        intervals = self._day(day)
        remaining = [iv for iv in intervals if iv.id != interval_id]
        if len(remaining) != len(intervals):
            intervals[:] = remaining
            logger.debug(f"{day}: Zeitbereich {interval_id} entfernt")
        result = self.validate_day(day)
        self._notify(day, result)
        return result

    def set_endpoint(self, day: str, interval_id: str, which: str, value: str) -> ValidationResult:
        """Setzt Start oder Ende eines Zeitbereichs aus "HH:MM" (leer = nicht gesetzt)."""
        if which not in ("start", "end"):
            raise ValueError(f"Endpunkt muss 'start' oder 'end' sein, nicht {which!r}")
        intervals = self._day(day)
        for i, iv in enumerate(intervals):
            if iv.id == interval_id:
                intervals[i] = iv.model_copy(update={which: parse_time(value)})
                break
        else:
            raise UnknownIntervalError(f"{day}: kein Zeitbereich mit ID {interval_id!r}")

        result = self.validate_day(day)
        self._notify(day, result)
        return result

    def validate_day(self, day: str) -> ValidationResult:
        return validate_intervals(self._day(day))

    # ─── Snapshot ───

    def snapshot(self) -> ScheduleSnapshot:
        """Unveränderliche Kopie; spätere Mutationen wirken sich nicht aus."""
        return ScheduleSnapshot(
            tags=self.selected_tags(),
            days=tuple(
                DaySchedule(day=day, intervals=tuple(self._days[day]))
                for day in WEEKDAYS
            ),
        )

    def to_selection(self) -> SavedSelection:
        """Aktueller Stand als SavedSelection (nur vollständige Bereiche)."""
        times: dict[str, list[TimeRange]] = {}
        for day in WEEKDAYS:
            ranges = [
                TimeRange(start=iv.start_label, end=iv.end_label)
                for iv in self._days[day] if iv.is_complete
            ]
            if ranges:
                times[day] = ranges
        return SavedSelection(lines=list(self.selected_tags()), times=times)

    # ─── Intern ───

    def _day(self, day: str) -> list[Interval]:
        try:
            return self._days[day]
        except KeyError:
            raise UnknownDayError(f"Unbekannter Wochentag: {day!r}") from None

    def _next_id(self) -> str:
        return f"iv{next(self._ids)}"
