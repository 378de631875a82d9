"""Uhrzeit als Minute des Tages: Parsen und kanonische Darstellung.

Eine Uhrzeit ist eine ganze Zahl in [0, 1440). Ungültige oder leere
Eingaben werden zu ``None`` (= nicht gesetzt), NIE stillschweigend zu 0.
"""

import re
from typing import Optional

MINUTES_PER_DAY = 24 * 60

# HTML-Zeitfelder liefern "HH:MM", manche Browser auch "HH:MM:SS"
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_time(value: Optional[str]) -> Optional[int]:
    """Wandelt "HH:MM" in Minuten seit Mitternacht um.

    Gibt None zurück bei leerem, fehlerhaftem oder außerhalb des Tages
    liegendem Wert.
    """
    if value is None:
        return None
    m = _TIME_RE.match(value.strip())
    if m is None:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        return None
    if m.group(3) is not None and int(m.group(3)) > 59:
        return None
    return hours * 60 + minutes


def format_time(minutes: int) -> str:
    """Kanonische Form: 24h, zweistellig, z.B. 540 → "09:00"."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"Minute des Tages außerhalb [0, {MINUTES_PER_DAY}): {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
