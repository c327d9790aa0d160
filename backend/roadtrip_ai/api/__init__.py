from fastapi import Depends, HTTPException
from starlette.requests import Request

from roadtrip_ai.services.advisor_service import AdvisorService
from roadtrip_ai.services.conversation_service import ConversationService
from roadtrip_ai.storage.repository import InMemoryRepository


def get_repository(request: Request) -> InMemoryRepository:
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Repository not initialized")
    return repository


def get_advisor_service(request: Request) -> AdvisorService:
    service = getattr(request.app.state, "advisor_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="Advisor service not initialized")
    return service


def get_conversation_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> ConversationService:
    return ConversationService(repository=repository)
