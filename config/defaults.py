from config.schema import (
    AppConfig,
    LineDef,
    PostSubmitAction,
    SubmitConfig,
    Variant,
)

# Linienkatalog (ID → Anzeigefarbe), Reihenfolge = Anzeigereihenfolge
LINE_COLORS: dict[str, str] = {
    "1": "#EE352E",
    "2": "#EE352E",
    "3": "#EE352E",
    "4": "#00933C",
    "5": "#00933C",
    "6": "#00933C",
    "7": "#B933AD",
    "A": "#0039A6",
    "C": "#0039A6",
    "E": "#0039A6",
    "B": "#FF6319",
    "D": "#FF6319",
    "F": "#FF6319",
    "M": "#FF6319",
    "G": "#6CBE45",
    "N": "#FCCC0A",
    "Q": "#FCCC0A",
    "R": "#FCCC0A",
    "W": "#FCCC0A",
    "L": "#A7A9AC",
    "J": "#996633",
    "Z": "#996633",
}


def default_lines() -> list[LineDef]:
    """Standard-Linienkatalog (22 Linien)."""
    return [LineDef(id=line_id, color=color) for line_id, color in LINE_COLORS.items()]


def default_submit_config(variant: Variant = Variant.DASHBOARD) -> SubmitConfig:
    """Absende-Konfiguration der beiden Einsatzorte.

    Dashboard:  bestehende Auswahl bearbeiten → nach Erfolg neu laden.
    Onboarding: Ersteinrichtung → nach Erfolg Weiterleitung laut Server.
    """
    if variant == Variant.ONBOARDING:
        return SubmitConfig(
            endpoint="http://localhost:8000/onboarding/",
            post_submit=PostSubmitAction.REDIRECT,
        )
    return SubmitConfig(
        endpoint="http://localhost:8000/dashboard/",
        post_submit=PostSubmitAction.RELOAD,
    )


def default_app_config(variant: Variant = Variant.DASHBOARD) -> AppConfig:
    """Vollständige Default-Konfiguration für einen Einsatzort."""
    return AppConfig(
        variant=variant,
        lines=default_lines(),
        submit=default_submit_config(variant),
    )
