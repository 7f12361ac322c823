"""
Access gate for the admin view.

This deters casual access only. There is no lockout, no rate limiting and
no hashing, and when ADMIN_PASSWORD is unset the fallback literal in
config.py opens the gate. The comparison runs in the Streamlit server
process, so the secret itself never reaches the browser.

The locked/unlocked flag lives on data.session.AdminSession.
"""

from __future__ import annotations

import hmac
import logging

from config import AppConfig

logger = logging.getLogger(__name__)


def secret_matches(candidate: str, secret: str) -> bool:
    """Exact, case-sensitive match. No trimming."""
    return hmac.compare_digest(candidate.encode("utf-8", "surrogatepass"), secret.encode("utf-8", "surrogatepass"))


def warn_if_fallback_secret(cfg: AppConfig) -> bool:
    if cfg.admin_password_is_fallback:
        logger.warning("ADMIN_PASSWORD is not set; the admin gate is using the built-in fallback code")
    return cfg.admin_password_is_fallback
