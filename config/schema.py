import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class Variant(str, Enum):
    """Einsatzort des Editors. Beide teilen denselben Kern."""
    DASHBOARD = "dashboard"
    ONBOARDING = "onboarding"


class PostSubmitAction(str, Enum):
    """Verhalten nach erfolgreichem Absenden."""
    # Seite neu laden, Zustand kommt frisch vom Server
    RELOAD = "reload"
    # Weiterleitung an ein vom Server geliefertes Ziel (JSON-Feld)
    REDIRECT = "redirect"


# ─── LINIEN ───

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class LineDef(BaseModel):
    """Eine auswählbare Linie (z.B. U-Bahn-Linie "A")."""
    # Bezeichner der Linie, wird unverändert übertragen
    id: str = Field(min_length=1, max_length=8)
    # Anzeigefarbe im Format "#RRGGBB"
    color: str = "#A7A9AC"

    @field_validator("color")
    @classmethod
    def check_color(cls, v: str) -> str:
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Farbe muss im Format #RRGGBB sein, nicht {v!r}")
        return v.upper()


# ─── ABSENDEN ───

class SubmitConfig(BaseModel):
    """Ziel und Verhalten beim Absenden der Auswahl."""
    # URL des Formular-Endpunkts (POST, JSON-Body)
    endpoint: str = Field("http://localhost:8000/dashboard/",
        description="URL des Formular-Endpunkts")
    # Header-Name für das CSRF-Token
    csrf_header: str = Field("X-CSRFToken",
        description="Header-Name für das CSRF-Token")
    # Was nach erfolgreichem Absenden passiert
    post_submit: PostSubmitAction = Field(PostSubmitAction.RELOAD)
    # JSON-Feld mit dem Weiterleitungsziel (nur bei REDIRECT)
    redirect_field: str = Field("redirect",
        description="JSON-Feld mit dem Weiterleitungsziel")
    # Timeout für den Request in Sekunden
    timeout_seconds: float = Field(10.0, gt=0, le=120,
        description="Timeout für den Request (Sekunden)")

    @field_validator("endpoint")
    @classmethod
    def check_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpunkt muss eine http(s)-URL sein: {v!r}")
        return v


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration des Editors."""
    # Einsatzort (dashboard oder onboarding)
    variant: Variant = Field(Variant.DASHBOARD)
    # Linienkatalog in Anzeigereihenfolge
    lines: list[LineDef] = Field(
        description="Linienkatalog in Anzeigereihenfolge")
    # Absende-Konfiguration
    submit: SubmitConfig = Field(default_factory=SubmitConfig)

    @model_validator(mode='after')
    def validate_unique_lines(self):
        """Prüfe dass jede Linie nur einmal im Katalog steht."""
        seen: set[str] = set()
        for line in self.lines:
            if line.id in seen:
                raise ValueError(f"Linie {line.id!r} ist doppelt im Katalog")
            seen.add(line.id)
        return self

    @property
    def line_ids(self) -> list[str]:
        """Linien-IDs in Katalog-Reihenfolge."""
        return [line.id for line in self.lines]

    def get_line(self, line_id: str) -> Optional[LineDef]:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None
