from __future__ import annotations

from typing import Optional

import streamlit as st

from data.mock_data import MockStore
from data.session import AdminSession

SESSION_KEY = "admin_session"
MOCK_STORE_KEY = "mock_store"


def get_session() -> AdminSession:
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = AdminSession()
        st.session_state[SESSION_KEY] = session
    return session


def set_session(session: AdminSession) -> AdminSession:
    st.session_state[SESSION_KEY] = session
    return session


def get_mock_store() -> MockStore:
    # one mock store per browser session so deletes stick across reruns
    store: Optional[MockStore] = st.session_state.get(MOCK_STORE_KEY)
    if store is None:
        store = MockStore()
        st.session_state[MOCK_STORE_KEY] = store
    return store
