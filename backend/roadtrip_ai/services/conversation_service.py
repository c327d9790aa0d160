import logging
from typing import Dict, List

from fastapi import HTTPException

from roadtrip_ai.models.domain import Message
from roadtrip_ai.models.schemas import (
    DeleteResponse,
    MessageSchema,
    SaveMessageRequest,
    SaveMessageResponse,
)
from roadtrip_ai.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)

DEFAULT_CONVERSATION = "default"


class ConversationService:
    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def save_message(self, user_id: str, data: SaveMessageRequest) -> SaveMessageResponse:
        if not data.role or not data.content or not data.conversation_id:
            logger.warning(
                "Incomplete message for user %s (role=%s, content=%s, conversation=%s)",
                user_id,
                bool(data.role),
                bool(data.content),
                bool(data.conversation_id),
            )
            raise HTTPException(status_code=400, detail="Données de conversation incomplètes.")

        message = Message(
            role=data.role,
            content=data.content,
            conversation_id=data.conversation_id,
        )
        self.repository.save_message(user_id, message)
        logger.info(
            "Saved %s message %s in conversation %s (%d chars)",
            message.role.value,
            message.id,
            message.conversation_id,
            len(message.content),
        )
        return SaveMessageResponse(success=True, message=MessageSchema.from_domain(message))

    def history(self, user_id: str) -> Dict[str, List[MessageSchema]]:
        grouped: Dict[str, List[MessageSchema]] = {}
        for message in self.repository.list_messages_for_user(user_id):
            key = message.conversation_id or DEFAULT_CONVERSATION
            grouped.setdefault(key, []).append(MessageSchema.from_domain(message))
        logger.info("History for %s: %d conversations", user_id, len(grouped))
        return grouped

    def conversation(self, user_id: str, conversation_id: str) -> List[MessageSchema]:
        messages = self.repository.list_messages_for_conversation(user_id, conversation_id)
        return [MessageSchema.from_domain(m) for m in messages]

    def delete_history(self, user_id: str) -> DeleteResponse:
        count = self.repository.delete_messages_for_user(user_id)
        logger.warning("Deleted whole history of %s (%d messages)", user_id, count)
        return DeleteResponse(success=True, deleted_count=count)

    def delete_conversation(self, user_id: str, conversation_id: str) -> DeleteResponse:
        count = self.repository.delete_conversation(user_id, conversation_id)
        logger.warning("Deleted conversation %s of %s (%d messages)", conversation_id, user_id, count)
        return DeleteResponse(
            success=True,
            deleted_count=count,
            message="Conversation supprimée avec succès.",
        )
