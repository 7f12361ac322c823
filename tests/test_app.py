"""Drives app/app.py end to end on mock data."""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app" / "app.py")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD", "abc")
    monkeypatch.setenv("USE_MOCK_DATA", "true")
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def _unlock(at: AppTest, code: str) -> AppTest:
    at.text_input(key="gate_password").input(code)
    at.button(key="gate_submit").click()
    return at.run()


def test_starts_locked(app):
    assert not app.exception
    assert app.session_state["admin_session"].unlocked is False


def test_wrong_code_is_rejected(app):
    _unlock(app, "abd")

    assert not app.exception
    assert app.session_state["admin_session"].unlocked is False
    assert app.error[0].value == "Incorrect password"


def test_unlock_fetches_recent_patterns(app):
    _unlock(app, "abc")

    assert not app.exception
    session = app.session_state["admin_session"]
    assert session.unlocked is True
    assert len(session.patterns) == 50


def test_delete_needs_confirmation(app):
    _unlock(app, "abc")
    target = app.session_state["admin_session"].patterns[0].id

    app.button(key=f"delete_{target}").click()
    app.run()
    assert target in app.session_state["admin_session"].ids()

    app.button(key=f"confirm_{target}").click()
    app.run()

    assert not app.exception
    session = app.session_state["admin_session"]
    assert target not in session.ids()
    assert len(session.patterns) == 49


def test_logout_locks(app):
    _unlock(app, "abc")
    app.button(key="logout").click()
    app.run()

    assert app.session_state["admin_session"].unlocked is False


def test_failed_delete_is_shown_and_record_kept(app):
    _unlock(app, "abc")
    before = app.session_state["admin_session"].ids()
    target = before[0]

    app.button(key=f"delete_{target}").click()
    app.run()
    app.session_state["mock_store"].fail_next = "denied"
    app.button(key=f"confirm_{target}").click()
    app.run()

    assert not app.exception
    assert app.error[0].value == "Error deleting: denied"
    assert app.session_state["admin_session"].ids() == before


def test_failed_refresh_is_shown_and_list_kept(app):
    _unlock(app, "abc")
    before = app.session_state["admin_session"].ids()

    app.session_state["mock_store"].fail_next = "net down"
    app.button(key="refresh").click()
    app.run()

    assert not app.exception
    assert app.error[0].value == "Error fetching patterns: net down"
    assert app.session_state["admin_session"].ids() == before
