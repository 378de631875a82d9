"""Renderer-Modul: Terminal-Darstellung (rich) und interaktiver Editor."""

from render.console import show_error, show_lines, show_week
from render.editor import ScheduleEditor

__all__ = ["show_error", "show_lines", "show_week", "ScheduleEditor"]
