"""Interaktiver Terminal-Editor für Linien und Zeitbereiche.

Konkreter Renderer: setzt Nutzereingaben in Befehle an das
ScheduleModel um und zeigt dessen Ergebnisse an. Validiert nie selbst.
"""

from typing import Optional

from rich.prompt import Confirm, IntPrompt, Prompt

from analysis.interval_validator import ValidationResult
from config.schema import LineDef
from models.schedule_model import WEEKDAYS, ScheduleModel
from render.console import console, show_error, show_lines, show_week
from submit.errors import SubmissionError
from submit.submitter import Submitter, SubmitOutcome


class ScheduleEditor:
    """Menügesteuerte Bearbeitung eines ScheduleModel."""

    def __init__(
        self,
        model: ScheduleModel,
        lines: list[LineDef],
        submitter: Optional[Submitter] = None,
    ) -> None:
        self.model = model
        self.lines = lines
        self.submitter = submitter
        self.outcome: Optional[SubmitOutcome] = None
        self._unsubscribe = model.subscribe(self._on_change)

    def _on_change(self, day: Optional[str], result: Optional[ValidationResult]) -> None:
        """Listener: meldet Fehler des gerade bearbeiteten Tages sofort."""
        if day is not None and result is not None and not result.is_valid:
            console.print(f"[red]⚠ {day}: {result.message}[/red]")

    def close(self) -> None:
        self._unsubscribe()

    # ─── Hauptschleife ───

    def run(self) -> Optional[SubmitOutcome]:
        """Läuft bis Beenden oder erfolgreichem Absenden."""
        try:
            while True:
                console.print()
                show_lines(self.model, self.lines)
                show_week(self.model)
                console.print("  [bold]1.[/bold] Linie umschalten")
                console.print("  [bold]2.[/bold] Zeitbereich hinzufügen")
                console.print("  [bold]3.[/bold] Beginn/Ende setzen")
                console.print("  [bold]4.[/bold] Zeitbereich entfernen")
                if self.submitter is not None:
                    console.print("  [bold]5.[/bold] Absenden")
                console.print("  [bold]0.[/bold] Beenden")

                choice = Prompt.ask("\nAuswahl", default="0")
                if choice == "1":
                    self._toggle_line()
                elif choice == "2":
                    day = self._ask_day()
                    self.model.add_interval(day)
                elif choice == "3":
                    self._edit_endpoint()
                elif choice == "4":
                    self._remove_interval()
                elif choice == "5" and self.submitter is not None:
                    if self._submit():
                        return self.outcome
                elif choice == "0":
                    return None
                else:
                    console.print("[yellow]Ungültige Auswahl.[/yellow]")
        finally:
            self.close()

    # ─── Einzelne Befehle ───

    def _toggle_line(self) -> None:
        ids = [line.id for line in self.lines]
        line_id = Prompt.ask("Linie", choices=ids, show_choices=False)
        self.model.toggle_tag(line_id)

    def _ask_day(self) -> str:
        return Prompt.ask("Tag", choices=list(WEEKDAYS), default="Monday")

    def _pick_interval(self, day: str) -> Optional[str]:
        intervals = self.model.intervals(day)
        if not intervals:
            console.print(f"[yellow]{day} hat keine Zeitbereiche.[/yellow]")
            return None
        nr = IntPrompt.ask("Nr.", default=len(intervals))
        if not 1 <= nr <= len(intervals):
            console.print("[yellow]Ungültige Nummer.[/yellow]")
            return None
        return intervals[nr - 1].id

    def _edit_endpoint(self) -> None:
        day = self._ask_day()
        interval_id = self._pick_interval(day)
        if interval_id is None:
            return
        which = Prompt.ask("Endpunkt", choices=["start", "end"], default="start")
        value = Prompt.ask("Uhrzeit (HH:MM, leer = löschen)", default="")
        result = self.model.set_endpoint(day, interval_id, which, value)
        if result.is_valid:
            console.print(f"[green]✓[/green] {day} OK")

    def _remove_interval(self) -> None:
        day = self._ask_day()
        interval_id = self._pick_interval(day)
        if interval_id is None:
            return
        self.model.remove_interval(day, interval_id)

    def _submit(self) -> bool:
        if not Confirm.ask("Auswahl jetzt absenden?", default=True):
            return False
        try:
            self.outcome = self.submitter.submit(self.model)
        except SubmissionError as e:
            show_error(e.message)
            return False
        console.print("[bold green]Auswahl gespeichert![/bold green]")
        if self.outcome.action == "redirect":
            console.print(f"Weiter zu: [bold]{self.outcome.target}[/bold]")
        return True
