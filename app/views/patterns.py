from __future__ import annotations

import streamlit as st

from components.pattern_table import render_pattern_table
from components.session_state import get_mock_store, get_session, set_session
from config import AppConfig
from data.errors import AdminError, DeleteError, FetchError
from data.patterns import records_to_frame
from data.service import get_store, store_label
from data.session import cancel_delete, confirm_and_delete, lock, refresh, request_delete
from views.login import SOURCE_KEY


def describe_error(err: AdminError) -> str:
    if isinstance(err, DeleteError):
        return f"Error deleting: {err}"
    if isinstance(err, FetchError):
        return f"Error fetching patterns: {err}"
    return str(err)


def render(cfg: AppConfig, use_mock: bool) -> None:
    session = get_session()
    store = get_store(cfg, use_mock, get_mock_store() if use_mock else None)

    # Data source switched in the sidebar: the old list belongs to the other store.
    source = store_label(use_mock)
    if st.session_state.get(SOURCE_KEY) != source:
        st.session_state[SOURCE_KEY] = source
        session = set_session(refresh(session, store, cfg.recent_limit))

    _, c_refresh, c_logout = st.columns([6, 1, 1])
    if c_refresh.button("⟳ Refresh", key="refresh", disabled=not session.can_refresh, use_container_width=True):
        set_session(refresh(session, store, cfg.recent_limit))
        st.rerun()
    if c_logout.button("Logout", key="logout", use_container_width=True):
        set_session(lock(session))
        st.rerun()

    if session.error is not None:
        st.error(describe_error(session.error))

    st.caption(f"{len(session.patterns)} most recent patterns (max {cfg.recent_limit}), newest first")

    action = render_pattern_table(session, cfg.viewer_base_url)
    if action is not None:
        if action.kind == "delete":
            session = request_delete(session, action.voicing_id)
        elif action.kind == "confirm":
            session = confirm_and_delete(session, store, action.voicing_id)
        else:
            session = cancel_delete(session)
        set_session(session)
        st.rerun()

    if session.patterns:
        with st.expander("Show underlying data"):
            st.dataframe(
                records_to_frame(session.patterns),
                hide_index=True,
                column_config={
                    "image_url": st.column_config.ImageColumn("image"),
                },
            )
