from typing import Dict, List

from fastapi import APIRouter, Depends

from roadtrip_ai.api import get_conversation_service
from roadtrip_ai.core.config import settings
from roadtrip_ai.models.schemas import (
    DeleteResponse,
    MessageSchema,
    SaveMessageRequest,
    SaveMessageResponse,
)
from roadtrip_ai.services.conversation_service import ConversationService

router = APIRouter()


@router.post("/messages", response_model=SaveMessageResponse, status_code=201)
def save_message(
    payload: SaveMessageRequest,
    service: ConversationService = Depends(get_conversation_service),
) -> SaveMessageResponse:
    return service.save_message(user_id=settings.default_user_id, data=payload)


@router.get("/history", response_model=Dict[str, List[MessageSchema]])
def get_history(
    service: ConversationService = Depends(get_conversation_service),
) -> Dict[str, List[MessageSchema]]:
    return service.history(user_id=settings.default_user_id)


@router.delete("/history", response_model=DeleteResponse)
def delete_history(
    service: ConversationService = Depends(get_conversation_service),
) -> DeleteResponse:
    return service.delete_history(user_id=settings.default_user_id)


@router.get("/conversations/{conversation_id}", response_model=List[MessageSchema])
def get_conversation(
    conversation_id: str,
    service: ConversationService = Depends(get_conversation_service),
) -> List[MessageSchema]:
    return service.conversation(user_id=settings.default_user_id, conversation_id=conversation_id)


@router.delete("/conversations/{conversation_id}", response_model=DeleteResponse)
def delete_conversation(
    conversation_id: str,
    service: ConversationService = Depends(get_conversation_service),
) -> DeleteResponse:
    return service.delete_conversation(
        user_id=settings.default_user_id, conversation_id=conversation_id
    )
