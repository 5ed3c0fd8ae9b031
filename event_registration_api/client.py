"""Event registration API client.

A thin wrapper around the REST API served by
``event_registration_api.app``, intended for scripts, bots and
integration tests.  It uses the ``requests`` library internally.

Every public method returns a tuple ``(data, error)``.  On success
``data`` holds the decoded JSON body and ``error`` is ``None``; on
failure ``data`` is ``None`` (or an empty list for listings) and
``error`` is a dictionary with the keys ``status_code`` and
``message``, the latter taken from the ``erro`` field of the response.

Example::

    client = EventRegistrationClient(base_url="http://localhost:3000")
    event, error = client.create_event(
        {"nome": "Talk", "data": "2025-01-01", "local": "Hall", "numero_vagas": 2}
    )
    if error is None:
        client.enroll(event["id"], participant_id)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EventRegistrationClient:
    """Client for the ``/api`` endpoints of the event registration service."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api`` prefix is added by the client.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``/api<path>``."""
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                body = response.json()
                message = body.get("erro") if isinstance(body, dict) else None
            except ValueError:
                message = None
            message = message or response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return all events ordered by date."""
        return self._list("/eventos")

    def get_event(self, event_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/eventos/{event_id}")

    def create_event(self, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an event from ``nome``, ``data``, ``local``, ``numero_vagas`` and ``descricao``."""
        return self._request("POST", "/eventos", json_body=fields)

    def update_event(self, event_id: Any, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update; omitted fields stay unchanged on the server."""
        return self._request("PUT", f"/eventos/{event_id}", json_body=changes)

    def delete_event(self, event_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/eventos/{event_id}")

    def list_event_participants(self, event_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/eventos/{event_id}/participantes")

    def capacity_status(self, event_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return ``total_vagas``, ``vagas_ocupadas``, ``vagas_disponiveis`` and ``tem_vagas``."""
        return self._request("GET", f"/eventos/{event_id}/vagas")

    # ------------------------------------------------------------------
    # Participants
    # ------------------------------------------------------------------
    def list_participants(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/participantes")

    def get_participant(self, participant_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/participantes/{participant_id}")

    def create_participant(self, nome: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/participantes", json_body={"nome": nome, "email": email})

    def update_participant(
        self, participant_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/participantes/{participant_id}", json_body=changes)

    def delete_participant(self, participant_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/participantes/{participant_id}")

    def list_participant_events(self, participant_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/participantes/{participant_id}/eventos")

    # ------------------------------------------------------------------
    # Enrollments
    # ------------------------------------------------------------------
    def enroll(self, event_id: Any, participant_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Enroll a participant.

        On success the result contains ``mensagem``, ``inscricao``,
        ``evento`` and ``participante``.
        """
        payload = {"evento_id": event_id, "participante_id": participant_id}
        return self._request("POST", "/inscricoes", json_body=payload)

    def cancel_enrollment(self, enrollment_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/inscricoes/{enrollment_id}")

    def cancel_enrollment_by_pair(
        self, event_id: Any, participant_id: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/inscricoes/evento/{event_id}/participante/{participant_id}")

    def list_enrollments(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return every enrollment, most recent first."""
        return self._list("/inscricoes")
