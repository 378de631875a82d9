"""Fehlerklassen beim Zusammenstellen und Absenden der Auswahl.

Jeder Fehler trägt eine für den Nutzer bestimmte Meldung (``message``).
Keiner davon verändert das ScheduleModel.
"""

from typing import Optional


class SubmissionError(Exception):
    """Basisklasse: Absenden nicht möglich, Meldung für den Nutzer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptySelectionError(SubmissionError):
    """Keine Linie gewählt oder kein vollständiger Zeitbereich vorhanden."""


class ScheduleValidationError(SubmissionError):
    """Ein Tag verletzt Reihenfolge oder Überschneidungsfreiheit."""

    USER_MESSAGE = "Please fix the time errors highlighted in red."

    def __init__(self, day: str, detail: str) -> None:
        super().__init__(self.USER_MESSAGE)
        self.day = day
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.message} ({self.day}: {self.detail})"


class TransportError(SubmissionError):
    """Netzwerkfehler oder Ablehnung durch den Server."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SubmissionInProgressError(SubmissionError):
    """Es läuft bereits ein Request; doppeltes Absenden wird abgewiesen."""

    def __init__(self) -> None:
        super().__init__("A submission is already in progress.")
