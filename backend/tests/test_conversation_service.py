import pytest
from fastapi import HTTPException

from roadtrip_ai.models.domain import Role
from roadtrip_ai.models.schemas import SaveMessageRequest
from roadtrip_ai.services.conversation_service import ConversationService
from roadtrip_ai.storage.repository import InMemoryRepository


def test_incomplete_message_is_refused():
    service = ConversationService(repository=InMemoryRepository())
    with pytest.raises(HTTPException) as excinfo:
        service.save_message("u1", SaveMessageRequest(role=Role.user, content="Salut"))
    assert excinfo.value.status_code == 400


def test_history_is_grouped_by_conversation():
    repository = InMemoryRepository()
    service = ConversationService(repository=repository)
    service.save_message("u1", SaveMessageRequest(role=Role.user, content="Roadtrip ?", conversation_id="c1"))
    service.save_message("u1", SaveMessageRequest(role=Role.assistant, content="Oui !", conversation_id="c1"))
    service.save_message("u1", SaveMessageRequest(role=Role.user, content="Autre", conversation_id="c2"))
    service.save_message("u2", SaveMessageRequest(role=Role.user, content="Pas moi", conversation_id="c1"))

    history = service.history("u1")

    assert set(history) == {"c1", "c2"}
    assert [m.content for m in history["c1"]] == ["Roadtrip ?", "Oui !"]


def test_delete_conversation_only_touches_owner():
    repository = InMemoryRepository()
    service = ConversationService(repository=repository)
    service.save_message("u1", SaveMessageRequest(role=Role.user, content="a", conversation_id="c1"))
    service.save_message("u2", SaveMessageRequest(role=Role.user, content="b", conversation_id="c1"))

    response = service.delete_conversation("u1", "c1")

    assert response.deleted_count == 1
    assert service.conversation("u2", "c1")[0].content == "b"
    assert service.delete_history("u2").deleted_count == 1
