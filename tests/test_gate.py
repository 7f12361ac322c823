from __future__ import annotations

import dataclasses
import logging

from data.gate import secret_matches, warn_if_fallback_secret


def test_secret_matches_exactly():
    assert secret_matches("abc", "abc")
    assert not secret_matches("abd", "abc")
    assert not secret_matches("abc\n", "abc")


def test_fallback_secret_is_logged(cfg, caplog):
    cfg = dataclasses.replace(cfg, admin_password="admin123", admin_password_is_fallback=True)

    with caplog.at_level(logging.WARNING, logger="data.gate"):
        assert warn_if_fallback_secret(cfg) is True

    assert "ADMIN_PASSWORD is not set" in caplog.text
    assert "admin123" not in caplog.text


def test_configured_secret_is_quiet(cfg, caplog):
    with caplog.at_level(logging.WARNING, logger="data.gate"):
        assert warn_if_fallback_secret(cfg) is False
    assert caplog.text == ""


def test_lone_surrogate_is_a_mismatch_not_a_crash():
    assert not secret_matches("\ud800", "abc")
