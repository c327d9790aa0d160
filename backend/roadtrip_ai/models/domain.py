from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4


class Role(str, Enum):
    user = "user"
    assistant = "assistant"


class SessionState(str, Enum):
    idle = "idle"
    active = "active"
    submitting = "submitting"


class SessionSignal(str, Enum):
    scroll_to_bottom = "scroll_to_bottom"
    scroll_to_message_start = "scroll_to_message_start"
    submitting_changed = "submitting_changed"
    notice_success = "notice_success"
    notice_error = "notice_error"


class ErrorKind(str, Enum):
    validation = "validation"
    generation = "generation"
    persistence = "persistence"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    role: Role
    content: str
    conversation_id: str
    id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ValidationResult:
    days: Optional[int] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ErrorDescriptor:
    kind: ErrorKind
    reason: str


@dataclass(frozen=True)
class SessionEvent:
    signal: SessionSignal
    detail: Optional[str] = None


@dataclass
class AdvisorRequest:
    query: str
    location: Optional[str] = None
    duration: Optional[int] = None
    budget: Optional[str] = None
    travel_style: Optional[str] = None
    interests: List[str] = field(default_factory=list)
    include_weather: bool = True
    conversation_id: Optional[str] = None


@dataclass
class MessageRecord:
    user_id: str
    message: Message
