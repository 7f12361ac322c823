from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (slate + indigo admin styling)
# - Centralized here; components/styles.py turns them into CSS variables.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F8FAFC",     # page background (slate-50)
    "bg_secondary": "#FFFFFF",   # sidebar / header surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#4F46E5",    # indigo-600
    "accent_secondary": "#4338CA",  # indigo-700 (hover)
    "accent_soft": "#EEF2FF",       # indigo-50
    # Text + borders
    "text_primary": "#0F172A",
    "text_secondary": "#64748B",
    "text_muted": "#94A3B8",
    "border_color": "#E2E8F0",
    "shadow": "0 1px 3px rgba(15,23,42,0.08)",
    "radius_px": 12,
    # Status colors
    "success": "#067647",
    "danger": "#DC2626",
}

# Used when ADMIN_PASSWORD is not configured. Anyone who reads this file can
# get in, so deployments must set ADMIN_PASSWORD.
FALLBACK_ADMIN_PASSWORD = "admin123"

DEFAULT_VIEWER_BASE_URL = "https://patterning-web-production.up.railway.app"

# Single bounded page of recent records.
RECENT_LIMIT = 50


@dataclass(frozen=True)
class AppConfig:
    # Required for "real data" mode (Supabase / PostgREST)
    supabase_url: Optional[str]
    supabase_key: Optional[str]

    # Gate secret. Never shipped to the browser; compared server-side only.
    admin_password: str
    admin_password_is_fallback: bool

    # External pattern viewer, linked as <viewer_base_url>/v/<id>
    viewer_base_url: str

    # Defaults
    default_use_mock: bool
    store_timeout_seconds: float
    recent_limit: int
    log_level: str

    @property
    def rest_url(self) -> str:
        # PostgREST root of the Supabase project
        return f"{(self.supabase_url or '').rstrip('/')}/rest/v1"

    @property
    def store_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Process environment wins over `.env`
    """
    load_dotenv(override=False)

    supabase_url = _getenv("SUPABASE_URL")
    password = _getenv("ADMIN_PASSWORD")

    return AppConfig(
        supabase_url=supabase_url,
        supabase_key=_getenv("SUPABASE_ANON_KEY") or _getenv("SUPABASE_KEY"),
        admin_password=password if password is not None else FALLBACK_ADMIN_PASSWORD,
        admin_password_is_fallback=password is None,
        viewer_base_url=_getenv("VIEWER_BASE_URL", DEFAULT_VIEWER_BASE_URL) or DEFAULT_VIEWER_BASE_URL,
        default_use_mock=(_getenv("USE_MOCK_DATA", "false" if supabase_url else "true") or "true").lower() == "true",
        store_timeout_seconds=_getfloat("STORE_TIMEOUT_SECONDS", 30.0),
        recent_limit=RECENT_LIMIT,
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
