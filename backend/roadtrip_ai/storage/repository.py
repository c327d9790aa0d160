from __future__ import annotations

from typing import Dict, List

from roadtrip_ai.models.domain import Message, MessageRecord


class InMemoryRepository:
    def __init__(self) -> None:
        self.messages: Dict[str, MessageRecord] = {}

    def save_message(self, user_id: str, message: Message) -> Message:
        self.messages[message.id] = MessageRecord(user_id=user_id, message=message)
        return message

    def list_messages_for_user(self, user_id: str) -> List[Message]:
        return [r.message for r in self.messages.values() if r.user_id == user_id]

    def list_messages_for_conversation(
        self, user_id: str, conversation_id: str
    ) -> List[Message]:
        return [
            r.message
            for r in self.messages.values()
            if r.user_id == user_id and r.message.conversation_id == conversation_id
        ]

    def delete_messages_for_user(self, user_id: str) -> int:
        doomed = [mid for mid, r in self.messages.items() if r.user_id == user_id]
        for mid in doomed:
            del self.messages[mid]
        return len(doomed)

    def delete_conversation(self, user_id: str, conversation_id: str) -> int:
        doomed = [
            mid
            for mid, r in self.messages.items()
            if r.user_id == user_id and r.message.conversation_id == conversation_id
        ]
        for mid in doomed:
            del self.messages[mid]
        return len(doomed)
