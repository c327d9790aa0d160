"""
Client-side state for one assistant conversation.

The session owns the ordered message list and the single in-flight
submission. Everything it learns from the network ends up as a message the
user can see; nothing raised by a collaborator escapes ``submit``.
"""
import json
import logging
from typing import Any, Callable, List, Optional, Tuple
from uuid import uuid4

from roadtrip_ai.core.errors import PersistenceFailure
from roadtrip_ai.formatting.response_formatter import format_response
from roadtrip_ai.chat.gateway import AssistantGateway, messages_from_payload
from roadtrip_ai.models.domain import (
    ErrorDescriptor,
    ErrorKind,
    Message,
    Role,
    SessionEvent,
    SessionSignal,
    SessionState,
)

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionEvent], None]

INVALID_RESULT = "❌ Réponse invalide reçue de l'assistant."
UNKNOWN_ERROR = "Erreur inconnue"
SUCCESS_NOTICE = "Message envoyé avec succès"
ERROR_NOTICE = "Erreur lors de l'appel à l'IA"
LOAD_ERROR_NOTICE = "Erreur lors du chargement de la conversation."
DEFAULT_TITLE = "Conversation"


def new_conversation_id() -> str:
    return str(uuid4())


def render_result(result: Any) -> str:
    """Display text for whatever the generation call returned."""
    if isinstance(result, str):
        try:
            parsed = json.loads(result)
        except ValueError:
            return result
        return format_response(parsed)
    if isinstance(result, (dict, list)):
        return format_response(result)
    return INVALID_RESULT


def error_content(exc: BaseException) -> str:
    reason = str(exc) or UNKNOWN_ERROR
    return f"❌ **Erreur technique**\n\nDétails : {reason}\n\nVeuillez réessayer."


class ConversationSession:
    def __init__(
        self,
        gateway: AssistantGateway,
        conversation_id: Optional[str] = None,
        listener: Optional[SessionListener] = None,
        include_weather: bool = True,
    ) -> None:
        self.gateway = gateway
        self.conversation_id = conversation_id or new_conversation_id()
        self.listener = listener
        self.include_weather = include_weather
        self.messages: Tuple[Message, ...] = ()
        self.submitting = False
        self.last_error: Optional[ErrorDescriptor] = None
        # Bumped by start_new_session so replies for a dropped conversation are ignored.
        self._epoch = 0

    @property
    def state(self) -> SessionState:
        if self.submitting:
            return SessionState.submitting
        if self.messages:
            return SessionState.active
        return SessionState.idle

    def _emit(self, signal: SessionSignal, detail: Optional[str] = None) -> None:
        if self.listener is None:
            return
        try:
            self.listener(SessionEvent(signal=signal, detail=detail))
        except Exception:  # noqa: BLE001
            logger.exception("Session listener failed on %s", signal.value)

    def _append(self, message: Message) -> Message:
        self.messages = self.messages + (message,)
        if message.role is Role.assistant:
            self._emit(SessionSignal.scroll_to_message_start, message.id)
        else:
            self._emit(SessionSignal.scroll_to_bottom, message.id)
        return message

    def _set_submitting(self, value: bool) -> None:
        self.submitting = value
        self._emit(SessionSignal.submitting_changed, "true" if value else "false")

    async def submit(self, text: Any) -> bool:
        """
        Send one user prompt and record the outcome.

        Returns False when the call was ignored (blank text or a submission
        already pending). Otherwise the user message is appended before any
        network call, followed by exactly one assistant message: the
        formatted answer, or an error bubble.
        """
        if not isinstance(text, str) or not text.strip() or self.submitting:
            return False

        epoch = self._epoch
        conversation_id = self.conversation_id
        self._append(Message(role=Role.user, content=text, conversation_id=conversation_id))
        self._set_submitting(True)

        stage = ErrorKind.persistence
        try:
            await self.gateway.persist_message(Role.user, text, conversation_id)
            stage = ErrorKind.generation
            result = await self.gateway.generate(
                text, include_weather=self.include_weather, conversation_id=conversation_id
            )
            if epoch != self._epoch:
                logger.info("Dropping reply for abandoned conversation %s", conversation_id)
                return True

            formatted = render_result(result)
            self._append(
                Message(role=Role.assistant, content=formatted, conversation_id=conversation_id)
            )
            stage = ErrorKind.persistence
            await self.gateway.persist_message(Role.assistant, formatted, conversation_id)
            if epoch == self._epoch:
                self._emit(SessionSignal.notice_success, SUCCESS_NOTICE)
        except Exception as exc:  # noqa: BLE001
            if epoch != self._epoch:
                logger.info("Ignoring failure for abandoned conversation %s: %s", conversation_id, exc)
                return True
            kind = ErrorKind.persistence if isinstance(exc, PersistenceFailure) else stage
            logger.error("Submission failed in conversation %s (%s): %s", conversation_id, kind.value, exc)
            self.last_error = ErrorDescriptor(kind=kind, reason=str(exc) or UNKNOWN_ERROR)
            self._append(
                Message(role=Role.assistant, content=error_content(exc), conversation_id=conversation_id)
            )
            self._emit(SessionSignal.notice_error, ERROR_NOTICE)
        finally:
            if epoch == self._epoch:
                self._set_submitting(False)
        return True

    async def load(self) -> List[Message]:
        """Replace the history with what the gateway has stored."""
        epoch = self._epoch
        try:
            payload = await self.gateway.load_conversation(self.conversation_id)
        except Exception as exc:  # noqa: BLE001
            logger.error("Could not load conversation %s: %s", self.conversation_id, exc)
            if epoch == self._epoch:
                self.last_error = ErrorDescriptor(kind=ErrorKind.persistence, reason=str(exc) or UNKNOWN_ERROR)
                self.messages = ()
                self._emit(SessionSignal.notice_error, LOAD_ERROR_NOTICE)
            return []

        if epoch != self._epoch:
            return []
        loaded = messages_from_payload(payload, self.conversation_id)
        self.messages = tuple(loaded)
        self.last_error = None
        if loaded:
            self._emit(SessionSignal.scroll_to_bottom, loaded[-1].id)
        return loaded

    def start_new_session(self, welcome: Optional[str] = None) -> str:
        self._epoch += 1
        self.conversation_id = new_conversation_id()
        self.messages = ()
        self.last_error = None
        if self.submitting:
            self._set_submitting(False)
        if welcome:
            self._append(
                Message(role=Role.assistant, content=welcome, conversation_id=self.conversation_id)
            )
        logger.info("New conversation %s", self.conversation_id)
        return self.conversation_id

    def title(self, max_length: int = 35) -> str:
        for message in self.messages:
            if message.role is Role.user:
                content = message.content
                return f"{content[:max_length]}..." if len(content) > max_length else content
        return DEFAULT_TITLE
