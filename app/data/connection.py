from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from config import AppConfig
from data.errors import StoreAuthError, StoreError

logger = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> str:
    """PostgREST puts a human readable `message` in its JSON error bodies."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    text = (resp.text or "").strip()
    return text or f"HTTP {resp.status_code}"


@dataclass(frozen=True)
class StoreClient:
    cfg: AppConfig

    def _headers(self) -> dict[str, str]:
        if not self.cfg.store_configured:
            raise StoreAuthError(
                "Missing SUPABASE_URL / SUPABASE_ANON_KEY for the pattern store. "
                "Set both, or switch on mock data."
            )
        key = self.cfg.supabase_key or ""
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    def _send(self, method: str, table: str, params: dict[str, str], extra_headers: Optional[dict[str, str]] = None):
        headers = self._headers()
        if extra_headers:
            headers.update(extra_headers)
        url = f"{self.cfg.rest_url}/{table}"
        try:
            resp = requests.request(
                method,
                url,
                params=params,
                headers=headers,
                timeout=self.cfg.store_timeout_seconds,
            )
        except requests.RequestException as e:
            raise StoreError(f"{method} {table} failed: {e}") from e

        if resp.status_code >= 300:
            raise StoreError(_error_message(resp), status_code=resp.status_code)
        return resp

    def select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """
        Runs a PostgREST read (select / order / limit live in `params`)
        and returns the decoded rows.
        """
        resp = self._send("GET", table, params)
        try:
            rows = resp.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON from {table}: {e}") from e
        if not isinstance(rows, list):
            raise StoreError(f"Expected a list of rows from {table}, got {type(rows).__name__}")
        logger.debug("select %s returned %d rows", table, len(rows))
        return rows

    def delete(self, table: str, filters: dict[str, str]) -> None:
        if not filters:
            # PostgREST refuses unfiltered deletes too, fail before the round trip.
            raise StoreError(f"Refusing to delete from {table} without a filter")
        self._send("DELETE", table, filters, extra_headers={"Prefer": "return=minimal"})


def get_store_client(cfg: AppConfig) -> StoreClient:
    return StoreClient(cfg=cfg)
