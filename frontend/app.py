import asyncio

import streamlit as st

from roadtrip_ai.chat.http_gateway import HttpAssistantGateway
from roadtrip_ai.chat.session import ConversationSession
from roadtrip_ai.core.config import settings
from roadtrip_ai.core.defaults import NEW_SESSION_MESSAGE, WELCOME_MESSAGE
from roadtrip_ai.core.logging import configure_logging
from roadtrip_ai.models.domain import SessionEvent, SessionSignal


def record_notice(event: SessionEvent) -> None:
    if event.signal in (SessionSignal.notice_success, SessionSignal.notice_error):
        st.session_state.setdefault("notices", []).append(event)


def get_session() -> ConversationSession:
    session = st.session_state.get("session")
    if session is None:
        configure_logging()
        gateway = HttpAssistantGateway(base_url=settings.backend_url)
        session = ConversationSession(gateway=gateway, listener=record_notice)
        session.start_new_session(welcome=WELCOME_MESSAGE)
        st.session_state["session"] = session
    return session


st.set_page_config(page_title="Roadtrip Assistant", layout="centered")
session = get_session()

with st.sidebar:
    st.subheader("Conversation")
    st.caption(session.title())
    session.include_weather = st.toggle("Météo des premiers jours", value=session.include_weather)
    if st.button("Nouvelle session", disabled=session.submitting):
        session.start_new_session(welcome=NEW_SESSION_MESSAGE)

st.title("Roadtrip Assistant")
st.caption(f"Backend: {settings.backend_url}")

for message in session.messages:
    with st.chat_message(message.role.value):
        st.markdown(message.content)

prompt = st.chat_input("Décrivez votre roadtrip (ex: 10 jours en Islande)", disabled=session.submitting)
if prompt:
    with st.chat_message("user"):
        st.markdown(prompt)
    with st.spinner("L'assistant prépare votre itinéraire..."):
        asyncio.run(session.submit(prompt))
    st.rerun()

for notice in st.session_state.pop("notices", []):
    icon = "✅" if notice.signal is SessionSignal.notice_success else "❌"
    st.toast(notice.detail, icon=icon)
