"""Linienabo: Haupt-CLI.

Verwendung:
  python main.py lines                          Linienkatalog anzeigen
  python main.py config init                    Konfiguration anlegen
  python main.py config show                    Konfiguration anzeigen
  python main.py validate <auswahl.json>        Zeitbereiche prüfen
  python main.py payload <auswahl.json>         Request-Body anzeigen
  python main.py submit <auswahl.json> -t TOKEN Auswahl absenden
  python main.py edit [<auswahl.json>]          Interaktiver Editor
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config(variant: Optional[str] = None):
    """Lädt die Konfiguration (oder Defaults) und bricht bei Fehlern ab.

    ``--variant`` überschreibt nur den Einsatzort und die Aktion nach dem
    Absenden; Endpunkt, CSRF-Header und Timeout bleiben wie konfiguriert.
    """
    from config.manager import ConfigManager
    from config.schema import Variant

    mgr = ConfigManager()
    try:
        config = mgr.load_or_default(variant=Variant(variant or "dashboard"))
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{e}")
        sys.exit(1)
    if variant is not None and config.variant.value != variant:
        from config.defaults import default_submit_config
        post_submit = default_submit_config(Variant(variant)).post_submit
        config = config.model_copy(update={
            "variant": Variant(variant),
            "submit": config.submit.model_copy(update={"post_submit": post_submit}),
        })
    return config


def _load_model(path: Path, config):
    """Lädt eine gespeicherte Auswahl als ScheduleModel."""
    from models.schedule_model import ScheduleModel
    from models.selection import SavedSelection

    try:
        selection = SavedSelection.load_json(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red bold]Auswahl konnte nicht geladen werden:[/red bold]\n{e}")
        sys.exit(1)
    if selection.is_empty:
        console.print(f"[yellow]Auswahl in {path} ist leer.[/yellow]")
    unknown = [tag for tag in selection.lines if config.get_line(tag) is None]
    if unknown:
        console.print(
            f"[yellow]Nicht im Linienkatalog:[/yellow] {', '.join(unknown)}"
        )
    return ScheduleModel.from_selection(selection, line_order=config.line_ids)


_VARIANT_OPTION = click.option(
    "--variant", type=click.Choice(["dashboard", "onboarding"]), default=None,
    help="Einsatzort (überschreibt die Konfiguration).",
)


# ─── LINES ────────────────────────────────────────────────────────────────────

@click.command("lines")
def cmd_lines():
    """Zeigt den konfigurierten Linienkatalog an."""
    from render.console import line_badge

    config = _load_config()
    table = Table(title="Linien", box=box.ROUNDED)
    table.add_column("Nr.", style="bold")
    table.add_column("Linie")
    table.add_column("Farbe")
    for i, line in enumerate(config.lines, start=1):
        table.add_row(str(i), line_badge(line, selected=True), line.color)
    console.print(table)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config()
    sc = config.submit
    console.print(Panel(
        f"[bold]{config.variant.value}[/bold]  |  {len(config.lines)} Linien\n"
        f"Endpunkt: {sc.endpoint}\n"
        f"CSRF-Header: {sc.csrf_header}  |  Nach Absenden: {sc.post_submit.value}"
        + (f" (Feld '{sc.redirect_field}')" if sc.post_submit.value == "redirect" else "")
        + f"\nTimeout: {sc.timeout_seconds:g}s",
        title="Konfiguration",
        border_style="cyan",
    ))


@cmd_config.command("init")
@click.option("--variant", type=click.Choice(["dashboard", "onboarding"]),
              default="dashboard", help="Einsatzort.")
@click.option("--endpoint", default=None, help="URL des Formular-Endpunkts.")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(variant: str, endpoint: Optional[str], force: bool):
    """Legt eine Konfiguration mit Standardwerten an."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager
    from config.schema import Variant

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        sys.exit(1)

    config = default_app_config(Variant(variant))
    if endpoint:
        try:
            submit = config.submit.model_validate(
                {**config.submit.model_dump(), "endpoint": endpoint}
            )
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            sys.exit(1)
        config = config.model_copy(update={"submit": submit})
    mgr.save(config)


# ─── VALIDATE ─────────────────────────────────────────────────────────────────

@click.command("validate")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
def cmd_validate(datei: Path):
    """Prüft die Zeitbereiche einer gespeicherten Auswahl."""
    from models.schedule_model import WEEKDAYS
    from render.console import show_lines, show_week
    from submit.builder import SubmissionBuilder
    from submit.errors import SubmissionError

    config = _load_config()
    model = _load_model(datei, config)
    show_lines(model, config.lines)
    show_week(model)

    for day in WEEKDAYS:
        if model.intervals(day):
            model.validate_day(day).print_rich(day)

    try:
        SubmissionBuilder().build(model)
    except SubmissionError as e:
        console.print(f"\n[red bold]✗ Nicht absendbar:[/red bold] {e}")
        sys.exit(1)
    console.print("\n[bold green]✓ Auswahl ist absendbar.[/bold green]")


# ─── PAYLOAD ──────────────────────────────────────────────────────────────────

@click.command("payload")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
def cmd_payload(datei: Path):
    """Gibt den Request-Body aus, der gesendet würde."""
    from submit.builder import SubmissionBuilder
    from submit.errors import SubmissionError

    config = _load_config()
    model = _load_model(datei, config)
    try:
        payload = SubmissionBuilder().build(model)
    except SubmissionError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    click.echo(json.dumps(payload.to_wire(), indent=2))


# ─── SUBMIT ───────────────────────────────────────────────────────────────────

@click.command("submit")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
@click.option("--csrf-token", "-t", required=True, help="Anti-Forgery-Token.")
@click.option("--endpoint", default=None, help="Endpunkt (überschreibt Config).")
@_VARIANT_OPTION
def cmd_submit(datei: Path, csrf_token: str, endpoint: Optional[str],
               variant: Optional[str]):
    """Sendet eine gespeicherte Auswahl an den Server."""
    from submit.errors import SubmissionError
    from submit.submitter import Submitter

    config = _load_config(variant)
    submit_cfg = config.submit
    if endpoint:
        submit_cfg = submit_cfg.model_copy(update={"endpoint": endpoint})
    model = _load_model(datei, config)

    submitter = Submitter(submit_cfg, csrf_token)
    try:
        outcome = submitter.submit(model)
    except SubmissionError as e:
        console.print(f"[red bold]Absenden fehlgeschlagen:[/red bold] {e.message}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Auswahl gesendet ({outcome.status_code}).")
    if outcome.action == "redirect":
        console.print(f"Weiter zu: [bold]{outcome.target}[/bold]")


# ─── EDIT ─────────────────────────────────────────────────────────────────────

@click.command("edit")
@click.argument("datei", required=False, type=click.Path(path_type=Path))
@click.option("--save", "save_path", default=None, type=click.Path(path_type=Path),
              help="Auswahl beim Beenden als JSON speichern.")
@click.option("--csrf-token", "-t", default=None,
              help="Anti-Forgery-Token (aktiviert Absenden).")
@_VARIANT_OPTION
def cmd_edit(datei: Optional[Path], save_path: Optional[Path],
             csrf_token: Optional[str], variant: Optional[str]):
    """Bearbeitet Linien und Zeitbereiche interaktiv."""
    from models.schedule_model import ScheduleModel
    from render.editor import ScheduleEditor
    from submit.submitter import Submitter

    config = _load_config(variant)
    if datei is not None and datei.exists():
        model = _load_model(datei, config)
    else:
        model = ScheduleModel(line_order=config.line_ids)

    submitter = Submitter(config.submit, csrf_token) if csrf_token else None
    editor = ScheduleEditor(model, config.lines, submitter)
    outcome = editor.run()

    target = save_path or datei
    if outcome is None and target is not None:
        model.to_selection().save_json(target)
        console.print(f"[green]✓[/green] Auswahl gespeichert: {target}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe.")
def cli(verbose: bool):
    """Linienabo: Linien und Zeitfenster pro Wochentag auswählen und absenden."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_lines)
cli.add_command(cmd_config)
cli.add_command(cmd_validate)
cli.add_command(cmd_payload)
cli.add_command(cmd_submit)
cli.add_command(cmd_edit)


if __name__ == "__main__":
    main()
