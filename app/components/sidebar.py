from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    use_mock: bool


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🛡️ Patterning Admin")
        st.caption("Review and delete recent patterns")

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, the app reads and deletes against the Supabase project.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**Pattern store**")
            st.code(cfg.supabase_url or "(SUPABASE_URL not set)", language="text")

            st.markdown("**Viewer**")
            st.code(cfg.viewer_base_url, language="text")

        if cfg.admin_password_is_fallback:
            st.warning("ADMIN_PASSWORD is not set. The default access code is in use.")
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(use_mock=use_mock)
