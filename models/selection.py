"""Gespeicherte Auswahl: Linien + Zeitbereiche pro Wochentag (Pydantic v2).

Entspricht dem JSON-Block, mit dem das Dashboard den bisherigen Stand des
Nutzers vorbelegt: ``{"lines": [...], "times": {"Monday": [...]}}``.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TimeRange(BaseModel):
    """Ein Zeitbereich in Drahtform ("HH:MM")."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str


class SavedSelection(BaseModel):
    """Vorheriger Stand des Nutzers zum Vorbelegen des ScheduleModel."""

    lines: list[str] = Field(default_factory=list)
    times: dict[str, list[TimeRange]] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.lines and not any(self.times.values())

    # ─── Persistenz ───

    def save_json(self, path: Path) -> None:
        """Speichert die Auswahl als JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    @classmethod
    def load_json(cls, path: Path) -> "SavedSelection":
        """Lädt eine Auswahl aus JSON. FileNotFoundError wenn nicht vorhanden."""
        if not path.exists():
            raise FileNotFoundError(f"Auswahl-Datei nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return cls.model_validate(raw)
