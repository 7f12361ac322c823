"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from components.session_state import get_session  # noqa: E402
from config import get_config  # noqa: E402
from data.gate import warn_if_fallback_secret  # noqa: E402

from views import login, patterns  # noqa: E402


def _configure_logging(level: str) -> None:
    # Streamlit reruns this script on every interaction; basicConfig is a no-op after the first call.
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    apply_theme()
    cfg = get_config()
    _configure_logging(cfg.log_level)
    if "fallback_warned" not in st.session_state:
        st.session_state["fallback_warned"] = warn_if_fallback_secret(cfg)

    state = render_sidebar(cfg)
    session = get_session()

    # Routing only
    if not session.unlocked:
        login.render(cfg, state.use_mock)
        return

    render_header(
        app_name="Patterning Admin",
        subtitle="Recent voicings, newest first",
        right_pill=f"Data: {'Mock' if state.use_mock else 'Supabase'}",
    )
    patterns.render(cfg, state.use_mock)


if __name__ == "__main__":
    main()
