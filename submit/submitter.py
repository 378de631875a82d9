"""Submitter: sendet den Payload als JSON-POST an den konfigurierten Endpunkt.

Einziger blockierender Schritt des Systems. Während ein Request läuft,
wird ein zweites Absenden abgewiesen (SubmissionInProgressError).
"""

import logging
import threading
from typing import Literal, Optional

import requests
from pydantic import BaseModel

from config.schema import PostSubmitAction, SubmitConfig
from models.schedule_model import ScheduleModel
from submit.builder import SubmissionBuilder, SubmissionPayload
from submit.errors import SubmissionInProgressError, TransportError

logger = logging.getLogger(__name__)


class SubmitOutcome(BaseModel):
    """Was der Renderer nach erfolgreichem Absenden tun soll."""

    action: Literal["reload", "redirect"]
    # Nur bei action="redirect"
    target: Optional[str] = None
    status_code: int


class Submitter:
    """Schickt eine SubmissionPayload an den Server."""

    def __init__(
        self,
        config: SubmitConfig,
        csrf_token: str,
        session: Optional[requests.Session] = None,
        builder: Optional[SubmissionBuilder] = None,
    ) -> None:
        self.config = config
        self._csrf_token = csrf_token
        self._session = session or requests.Session()
        self._builder = builder or SubmissionBuilder()
        self._in_flight = threading.Lock()

    def submit(self, model: ScheduleModel) -> SubmitOutcome:
        """Baut den Payload und sendet ihn.

        Schlägt der Build fehl, wird KEIN Request abgeschickt; der
        SubmissionError geht unverändert an den Aufrufer.
        """
        payload = self._builder.build(model)
        return self.send(payload)

    def send(self, payload: SubmissionPayload) -> SubmitOutcome:
        """Ein einzelner POST. Kein automatischer Retry."""
        if not self._in_flight.acquire(blocking=False):
            raise SubmissionInProgressError()
        try:
            return self._post(payload)
        finally:
            self._in_flight.release()

    @property
    def in_flight(self) -> bool:
        return self._in_flight.locked()

    def _post(self, payload: SubmissionPayload) -> SubmitOutcome:
        cfg = self.config
        body = payload.to_wire()
        logger.info(
            f"Sende Auswahl an {cfg.endpoint}: {len(body['lines'])} Linien, "
            f"{len(body['times'])} Tage"
        )
        try:
            res = self._session.post(
                cfg.endpoint,
                json=body,
                headers={
                    "Content-Type": "application/json",
                    cfg.csrf_header: self._csrf_token,
                },
                timeout=cfg.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.warning(f"Request an {cfg.endpoint} fehlgeschlagen: {e}")
            raise TransportError(f"Could not reach the server: {e}") from e

        if not res.ok:
            # Antworttext unverändert anzeigen; danach KEINE Weiterleitung
            logger.warning(f"Server lehnt Auswahl ab ({res.status_code})")
            raise TransportError(
                res.text or f"Server rejected the selection (HTTP {res.status_code}).",
                status_code=res.status_code,
            )

        if cfg.post_submit == PostSubmitAction.RELOAD:
            return SubmitOutcome(action="reload", status_code=res.status_code)

        try:
            data = res.json()
        except ValueError as e:
            raise TransportError(
                "Server response is not valid JSON.", status_code=res.status_code
            ) from e
        target = data.get(cfg.redirect_field) if isinstance(data, dict) else None
        if not isinstance(target, str) or not target:
            raise TransportError(
                f"Server response has no '{cfg.redirect_field}' target.",
                status_code=res.status_code,
            )
        logger.info(f"Weiterleitung nach {target}")
        return SubmitOutcome(action="redirect", target=target, status_code=res.status_code)
