"""
Tests for ``EventRegistrationClient``.

The FastAPI ``TestClient`` accepts the same ``request`` call as a
``requests.Session``, so it is passed in as the client's session and
the requests go to the in-process app.
"""

import requests

from event_registration_api.app.core.db import connection_factory
from event_registration_api.app.services import build_services
from event_registration_api.client import EventRegistrationClient


def _client(api_client):
    return EventRegistrationClient(base_url="http://testserver/", session=api_client)


def test_enrollment_round_trip(api_client, event_payload):
    client = _client(api_client)

    event, error = client.create_event(event_payload(numero_vagas=1))
    assert error is None
    participant, error = client.create_participant("Ana", "ana@example.com")
    assert error is None

    admission, error = client.enroll(event["id"], participant["id"])
    assert error is None
    assert admission["mensagem"] == "Inscrição realizada com sucesso"

    status, _ = client.capacity_status(event["id"])
    assert status["tem_vagas"] is False

    enrollments, error = client.list_enrollments()
    assert error is None
    assert [e["participantes"]["email"] for e in enrollments] == ["ana@example.com"]

    result, error = client.cancel_enrollment_by_pair(event["id"], participant["id"])
    assert result == {"mensagem": "Inscrição cancelada com sucesso"}
    assert client.list_event_participants(event["id"]) == ([], None)


def test_error_carries_status_and_message(api_client):
    client = _client(api_client)

    data, error = client.get_event(123)

    assert data is None
    assert error == {"status_code": 404, "message": "Evento não encontrado"}


def test_update_and_delete(api_client, event_payload):
    client = _client(api_client)
    event, _ = client.create_event(event_payload())

    updated, error = client.update_event(event["id"], {"local": "Sala 2"})
    assert error is None
    assert updated["local"] == "Sala 2"

    deleted, error = client.delete_event(event["id"])
    assert deleted == {"mensagem": "Evento removido com sucesso"}
    events, error = client.list_events()
    assert (events, error) == ([], None)


def test_participant_calls(api_client):
    client = _client(api_client)
    created, _ = client.create_participant("Ana", "ana@example.com")

    updated, error = client.update_participant(created["id"], {"nome": "Ana Maria"})
    assert error is None
    assert updated == {"id": created["id"], "nome": "Ana Maria", "email": "ana@example.com"}
    assert client.get_participant(created["id"])[0] == updated
    assert client.list_participant_events(created["id"]) == ([], None)

    _, error = client.create_participant("Outra", "ana@example.com")
    assert error["status_code"] == 400

    client.delete_participant(created["id"])
    assert client.list_participants() == ([], None)


def test_listing_failure_returns_empty_list(api_client, tmp_path):
    client = _client(api_client)
    api_client.app.state.services = build_services(connection_factory(str(tmp_path / "empty.db")))

    events, error = client.list_events()

    assert events == []
    assert error["status_code"] == 500


class _BrokenSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_connection_failure():
    client = EventRegistrationClient(base_url="http://localhost:1", session=_BrokenSession())

    data, error = client.list_enrollments()

    assert data == []
    assert error == {"status_code": None, "message": "connection refused"}
