"""Collaborators the conversation session talks to.

The session only depends on ``AssistantGateway``; the HTTP implementation
lives in ``http_gateway`` and tests plug in fakes.
"""
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional, Protocol

from roadtrip_ai.models.domain import Message, Role

logger = logging.getLogger(__name__)


class AssistantGateway(Protocol):
    async def persist_message(self, role: Role, content: str, conversation_id: str) -> None:
        ...

    async def generate(self, query: str, include_weather: bool, conversation_id: str) -> Any:
        ...

    async def load_conversation(self, conversation_id: str) -> Any:
        ...


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now(timezone.utc)


def message_from_dict(data: Any, conversation_id: str) -> Optional[Message]:
    if not isinstance(data, dict):
        return None
    try:
        role = Role(data.get("role"))
    except ValueError:
        return None
    content = data.get("content")
    if not isinstance(content, str):
        return None

    fields = {
        "role": role,
        "content": content,
        "conversation_id": data.get("conversationId") or data.get("conversation_id") or conversation_id,
        "created_at": _parse_timestamp(data.get("createdAt") or data.get("created_at")),
    }
    message_id = data.get("_id") or data.get("id")
    if message_id:
        fields["id"] = str(message_id)
    return Message(**fields)


def messages_from_payload(payload: Any, conversation_id: str) -> List[Message]:
    """Accept a bare list, ``{"messages": [...]}`` or ``{"data": [...]}``."""
    if isinstance(payload, dict):
        payload = payload.get("messages") or payload.get("data") or []
    if not isinstance(payload, list):
        return []

    messages = []
    for item in payload:
        message = message_from_dict(item, conversation_id)
        if message is None:
            logger.warning("Skipping malformed message in conversation %s", conversation_id)
            continue
        messages.append(message)
    return messages
