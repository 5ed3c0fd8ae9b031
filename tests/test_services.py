"""Tests for the service layer against a real (temporary) SQLite store.

Run with: pytest tests/test_services.py -v
"""

import pytest

from event_registration_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from event_registration_api.app.models import Enrollment
from event_registration_api.app.repositories import EnrollmentRepository

pytestmark = pytest.mark.anyio


async def _participant(services, nome="Ana", email="ana@example.com"):
    return await services.participants.create_participant({"nome": nome, "email": email})


class TestEventService:
    async def test_create_then_get_round_trip(self, services, event_payload):
        created = await services.events.create_event(event_payload())
        fetched = await services.events.get_event(created.id)
        assert created.id is not None
        assert fetched.to_dict() == {"id": created.id, **event_payload()}

    async def test_create_invalid_event_stores_nothing(self, services, event_payload):
        with pytest.raises(ValidationError):
            await services.events.create_event(event_payload(nome=""))
        assert await services.events.list_events() == []

    async def test_list_is_ordered_by_date(self, services, event_payload):
        await services.events.create_event(event_payload(nome="B", data="2025-03-01"))
        await services.events.create_event(event_payload(nome="A", data="2025-01-15"))
        await services.events.create_event(event_payload(nome="C", data="2025-02-01"))
        names = [e.nome for e in await services.events.list_events()]
        assert names == ["A", "C", "B"]

    async def test_list_orders_mixed_date_formats_chronologically(self, services, event_payload):
        await services.events.create_event(event_payload(nome="Marco", data="2025-03-01"))
        await services.events.create_event(event_payload(nome="Fevereiro", data="20250201"))
        await services.events.create_event(event_payload(nome="Noite", data="2025-02-28T22:00:00"))
        await services.events.create_event(event_payload(nome="Madrugada", data="2025-03-01T02:00:00+05:00"))
        names = [e.nome for e in await services.events.list_events()]
        assert names == ["Fevereiro", "Madrugada", "Noite", "Marco"]

    async def test_get_missing_event_raises_not_found(self, services):
        with pytest.raises(NotFoundError, match="Evento não encontrado"):
            await services.events.get_event(404)

    async def test_partial_update_keeps_other_fields(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        updated = await services.events.update_event(event.id, {"local": "Sala 2"})
        assert updated.local == "Sala 2"
        assert updated.nome == "Talk"
        assert (await services.events.get_event(event.id)).local == "Sala 2"

    async def test_invalid_update_is_not_persisted(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        with pytest.raises(ValidationError):
            await services.events.update_event(event.id, {"numero_vagas": -1})
        assert (await services.events.get_event(event.id)).numero_vagas == 2

    async def test_update_missing_event_raises_not_found(self, services):
        with pytest.raises(NotFoundError):
            await services.events.update_event(7, {"nome": "X"})

    async def test_capacity_status_counts_enrollments(self, services, event_payload):
        event = await services.events.create_event(event_payload(numero_vagas=3))
        ana = await _participant(services)
        await services.enrollments.enroll(event.id, ana.id)
        status = await services.events.capacity_status(event.id)
        assert (status.total_vagas, status.vagas_ocupadas, status.vagas_disponiveis) == (3, 1, 2)
        assert status.tem_vagas is True

    async def test_capacity_status_missing_event(self, services):
        with pytest.raises(NotFoundError):
            await services.events.capacity_status(1)

    async def test_delete_cascades_enrollments(self, services, connect, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        await services.enrollments.enroll(event.id, ana.id)

        result = await services.events.delete_event(event.id)

        assert result == {"mensagem": "Evento removido com sucesso"}
        with pytest.raises(NotFoundError):
            await services.events.get_event(event.id)
        assert await services.enrollments.list_enrollments() == []
        assert await services.participants.list_events(ana.id) == []

    async def test_delete_missing_event_raises_not_found(self, services):
        with pytest.raises(NotFoundError):
            await services.events.delete_event(3)

    async def test_list_participants_annotates_enrollment(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        admission = await services.enrollments.enroll(event.id, ana.id)
        participants = await services.events.list_participants(event.id)
        assert participants == [
            {
                "inscricao_id": admission.enrollment.id,
                "data_inscricao": admission.enrollment.data_inscricao,
                "id": ana.id,
                "nome": "Ana",
                "email": "ana@example.com",
            }
        ]


class TestParticipantService:
    async def test_duplicate_email_is_rejected(self, services):
        await _participant(services)
        with pytest.raises(ConflictError, match="Email já cadastrado"):
            await _participant(services, nome="Outra Ana")
        assert len(await services.participants.list_participants()) == 1

    async def test_invalid_email_creates_nothing(self, services):
        with pytest.raises(ValidationError):
            await _participant(services, email="bad-email")
        assert await services.participants.list_participants() == []

    async def test_list_is_ordered_by_name(self, services):
        await _participant(services, nome="Carla", email="carla@example.com")
        await _participant(services, nome="Bruno", email="bruno@example.com")
        names = [p.nome for p in await services.participants.list_participants()]
        assert names == ["Bruno", "Carla"]

    async def test_update_to_foreign_email_is_rejected(self, services):
        ana = await _participant(services)
        bruno = await _participant(services, nome="Bruno", email="bruno@example.com")
        with pytest.raises(ConflictError, match="Email já cadastrado para outro participante"):
            await services.participants.update_participant(bruno.id, {"email": ana.email})
        assert (await services.participants.get_participant(bruno.id)).email == "bruno@example.com"

    async def test_update_keeping_own_email_succeeds(self, services):
        ana = await _participant(services)
        updated = await services.participants.update_participant(
            ana.id, {"nome": "Ana Maria", "email": ana.email}
        )
        assert updated.nome == "Ana Maria"
        assert updated.email == ana.email

    async def test_update_missing_participant(self, services):
        with pytest.raises(NotFoundError, match="Participante não encontrado"):
            await services.participants.update_participant(9, {"nome": "X"})

    async def test_delete_cascades_enrollments(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        await services.enrollments.enroll(event.id, ana.id)

        result = await services.participants.delete_participant(ana.id)

        assert result == {"mensagem": "Participante removido com sucesso"}
        assert (await services.events.capacity_status(event.id)).vagas_ocupadas == 0
        with pytest.raises(NotFoundError):
            await services.participants.get_participant(ana.id)

    async def test_list_events_annotates_enrollment(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        admission = await services.enrollments.enroll(event.id, ana.id)
        events = await services.participants.list_events(ana.id)
        assert len(events) == 1
        assert events[0]["id"] == event.id
        assert events[0]["numero_vagas"] == 2
        assert events[0]["inscricao_id"] == admission.enrollment.id


class TestEnrollmentService:
    async def test_enroll_returns_enrollment_event_and_participant(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        admission = await services.enrollments.enroll(event.id, ana.id)
        assert admission.enrollment.evento_id == event.id
        assert admission.enrollment.participante_id == ana.id
        assert admission.enrollment.data_inscricao
        assert admission.event == event
        assert admission.participant == ana

    async def test_unknown_event_or_participant(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        with pytest.raises(NotFoundError, match="Evento não encontrado"):
            await services.enrollments.enroll(999, ana.id)
        with pytest.raises(NotFoundError, match="Participante não encontrado"):
            await services.enrollments.enroll(event.id, 999)

    async def test_duplicate_enrollment_is_rejected(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        await services.enrollments.enroll(event.id, ana.id)
        with pytest.raises(ConflictError, match="Participante já inscrito neste evento"):
            await services.enrollments.enroll(event.id, ana.id)
        assert len(await services.events.list_participants(event.id)) == 1

    async def test_full_event_rejects_without_creating_row(self, services, event_payload):
        event = await services.events.create_event(event_payload(numero_vagas=0))
        ana = await _participant(services)
        with pytest.raises(ConflictError, match="Não há vagas disponíveis para este evento"):
            await services.enrollments.enroll(event.id, ana.id)
        assert await services.enrollments.list_enrollments() == []

    async def test_capacity_one_scenario(self, services, event_payload):
        event = await services.events.create_event(event_payload(numero_vagas=1))
        ana = await _participant(services)
        bruno = await _participant(services, nome="Bruno", email="bruno@example.com")

        first = await services.enrollments.enroll(event.id, ana.id)
        assert (await services.events.capacity_status(event.id)).tem_vagas is False

        with pytest.raises(ConflictError, match="Não há vagas"):
            await services.enrollments.enroll(event.id, bruno.id)

        await services.enrollments.cancel(first.enrollment.id)
        assert (await services.events.capacity_status(event.id)).tem_vagas is True

        second = await services.enrollments.enroll(event.id, bruno.id)
        assert second.participant.id == bruno.id

    async def test_cancel_missing_enrollment(self, services):
        with pytest.raises(NotFoundError, match="Inscrição não encontrada"):
            await services.enrollments.cancel(42)

    async def test_cancel_by_pair(self, services, event_payload):
        event = await services.events.create_event(event_payload())
        ana = await _participant(services)
        await services.enrollments.enroll(event.id, ana.id)

        result = await services.enrollments.cancel_by_pair(event.id, ana.id)

        assert result == {"mensagem": "Inscrição cancelada com sucesso"}
        with pytest.raises(NotFoundError):
            await services.enrollments.cancel_by_pair(event.id, ana.id)

    async def test_list_is_newest_first(self, services, event_payload):
        talk = await services.events.create_event(event_payload())
        workshop = await services.events.create_event(event_payload(nome="Workshop", data="2025-02-01"))
        ana = await _participant(services)
        bruno = await _participant(services, nome="Bruno", email="bruno@example.com")

        await services.enrollments.enroll(talk.id, ana.id)
        await services.enrollments.enroll(workshop.id, bruno.id)

        listed = await services.enrollments.list_enrollments()
        assert [item["eventos"]["nome"] for item in listed] == ["Workshop", "Talk"]
        assert listed[0]["participantes"] == {"id": bruno.id, "nome": "Bruno", "email": "bruno@example.com"}
        assert listed[0]["data_inscricao"] >= listed[1]["data_inscricao"]


class TestEnrollmentStoreGuards:
    """The insert itself enforces capacity and pair uniqueness."""

    async def test_conditional_insert_refuses_full_event(self, services, connect, event_payload):
        event = await services.events.create_event(event_payload(numero_vagas=1))
        ana = await _participant(services)
        bruno = await _participant(services, nome="Bruno", email="bruno@example.com")
        repository = EnrollmentRepository(connect)

        assert repository.create(Enrollment.new(event.id, ana.id)) is not None
        assert repository.create(Enrollment.new(event.id, bruno.id)) is None
        assert (await services.events.capacity_status(event.id)).vagas_ocupadas == 1

    async def test_unique_index_refuses_second_row_for_pair(self, services, connect, event_payload):
        event = await services.events.create_event(event_payload(numero_vagas=5))
        ana = await _participant(services)
        repository = EnrollmentRepository(connect)

        repository.create(Enrollment.new(event.id, ana.id))
        with pytest.raises(ConflictError, match="Participante já inscrito neste evento"):
            repository.create(Enrollment.new(event.id, ana.id))
