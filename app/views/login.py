from __future__ import annotations

import streamlit as st

from components.session_state import get_mock_store, get_session, set_session
from config import AppConfig
from data.errors import GateRejected
from data.service import get_store, store_label
from data.session import attempt_unlock, refresh

SOURCE_KEY = "store_source"


def render(cfg: AppConfig, use_mock: bool) -> None:
    session = get_session()

    _, mid, _ = st.columns([1, 1.2, 1])
    with mid:
        st.markdown(
            """
<div class="gate-card">
  <div class="gate-icon">🔒</div>
  <div class="gate-title">Admin Access</div>
  <div class="gate-body">Enter the access code to continue.</div>
</div>
            """,
            unsafe_allow_html=True,
        )
        candidate = st.text_input(
            "Access Code",
            type="password",
            key="gate_password",
            placeholder="Access Code",
            label_visibility="collapsed",
        )
        submitted = st.button("Enter Dashboard", key="gate_submit", type="primary", use_container_width=True)

        if submitted:
            session, ok = attempt_unlock(session, candidate, cfg.admin_password)
            if ok:
                store = get_store(cfg, use_mock, get_mock_store() if use_mock else None)
                session = refresh(session, store, cfg.recent_limit)
                st.session_state[SOURCE_KEY] = store_label(use_mock)
                set_session(session)
                st.rerun()
            set_session(session)

        if isinstance(session.error, GateRejected):
            st.error(str(session.error))
