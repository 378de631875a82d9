"""Terminal-Darstellung von Linienauswahl und Wochenplan (Rich).

Wird von ``main.py`` (validate/payload) und vom ScheduleEditor verwendet.
Enthält keine eigene Validierungslogik: Fehlermarkierungen kommen
ausschließlich aus ``ScheduleModel.validate_day``.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from config.schema import LineDef
from models.schedule_model import WEEKDAYS, ScheduleModel

console = Console()


def line_badge(line: LineDef, selected: bool) -> Text:
    """Farbiges Linien-Kürzel; gewählte Linien gefüllt, andere nur farbig."""
    if selected:
        return Text(f" {line.id} ", style=f"bold white on {line.color}")
    return Text(f" {line.id} ", style=line.color)


def show_lines(model: ScheduleModel, lines: list[LineDef]) -> None:
    """Zeigt den Linienkatalog mit Auswahlstatus an."""
    row = Text()
    for line in lines:
        row.append_text(line_badge(line, model.is_selected(line.id)))
        row.append(" ")
    selected = model.selected_tags()
    console.print(Panel(
        row,
        title="Linien",
        subtitle=f"{len(selected)} gewählt",
        border_style="cyan",
    ))
    model.mark_clean()


def show_week(model: ScheduleModel) -> None:
    """Zeigt alle sieben Tage als Tabelle, fehlerhafte Felder rot markiert."""
    table = Table(title="Zeitbereiche", box=box.ROUNDED, show_lines=True)
    table.add_column("Tag", style="bold", width=10)
    table.add_column("Nr.", width=4)
    table.add_column("Beginn", width=8)
    table.add_column("Ende", width=8)
    table.add_column("Hinweis")

    for day in WEEKDAYS:
        intervals = model.intervals(day)
        result = model.validate_day(day)
        if not intervals:
            table.add_row(day, "", "[dim]—[/dim]", "[dim]—[/dim]", "")
            continue
        for i, iv in enumerate(intervals, start=1):
            start = iv.start_label or "--:--"
            end = iv.end_label or "--:--"
            if result.flags(iv.id, "start"):
                start = f"[red bold]{start}[/red bold]"
            if result.flags(iv.id, "end"):
                end = f"[red bold]{end}[/red bold]"
            note = ""
            if i == 1 and not result.is_valid:
                note = f"[red]{result.message}[/red]"
            elif not iv.is_complete:
                note = "[dim]unvollständig[/dim]"
            table.add_row(day if i == 1 else "", str(i), start, end, note)
    console.print(table)


def show_error(message: str) -> None:
    """Blockierende Fehlermeldung (Ersatz für alert())."""
    console.print(Panel(f"[red]{message}[/red]", title="Fehler", border_style="red"))
