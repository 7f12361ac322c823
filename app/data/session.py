"""
Admin session state.

One immutable AdminSession per browser session (kept in st.session_state by
the views). Every transition is a plain function taking the current session
and returning the next one; the views never mutate fields directly.

Fetches are tagged with a generation number: a completion whose generation
is no longer current is dropped, so an older fetch can't overwrite the list
after a newer one was started.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from data.errors import AdminError, GateRejected
from data.gate import secret_matches
from data.patterns import PatternRecord
from data.service import DeleteResult, FetchResult, PatternStore, delete_by_id, fetch_recent


@dataclass(frozen=True)
class AdminSession:
    unlocked: bool = False
    patterns: tuple[PatternRecord, ...] = ()
    loading: bool = False
    fetch_generation: int = 0
    deleting: Optional[str] = None
    confirm_delete: Optional[str] = None
    error: Optional[AdminError] = None

    @property
    def can_refresh(self) -> bool:
        return self.unlocked and not self.loading

    @property
    def can_delete(self) -> bool:
        return self.unlocked and self.deleting is None

    @property
    def show_empty_state(self) -> bool:
        return not self.loading and not self.patterns

    def ids(self) -> list[str]:
        return [p.id for p in self.patterns]


# --- gate ---


def attempt_unlock(session: AdminSession, candidate: str, secret: str) -> tuple[AdminSession, bool]:
    if secret_matches(candidate, secret):
        return replace(session, unlocked=True, error=None), True
    return replace(session, error=GateRejected("Incorrect password")), False


def lock(session: AdminSession) -> AdminSession:
    # Fetched records are left alone; the next unlock refetches anyway.
    return replace(session, unlocked=False, confirm_delete=None, error=None)


# --- fetch ---


def fetch_started(session: AdminSession) -> tuple[AdminSession, int]:
    generation = session.fetch_generation + 1
    return replace(session, loading=True, fetch_generation=generation), generation


def fetch_finished(session: AdminSession, generation: int, result: FetchResult) -> AdminSession:
    if generation != session.fetch_generation:
        return session
    if result.ok:
        return replace(session, patterns=result.records, loading=False, error=None)
    # a failed refresh keeps whatever was already on screen
    return replace(session, loading=False, error=result.error)


# --- delete ---


def request_delete(session: AdminSession, voicing_id: str) -> AdminSession:
    if not session.can_delete or voicing_id not in session.ids():
        return session
    return replace(session, confirm_delete=voicing_id)


def cancel_delete(session: AdminSession) -> AdminSession:
    return replace(session, confirm_delete=None)


def delete_started(session: AdminSession, voicing_id: str) -> AdminSession:
    return replace(session, deleting=voicing_id, confirm_delete=None)


def delete_finished(session: AdminSession, result: DeleteResult) -> AdminSession:
    if result.ok:
        remaining = tuple(p for p in session.patterns if p.id != result.voicing_id)
        return replace(session, patterns=remaining, deleting=None, error=None)
    return replace(session, deleting=None, error=result.error)


# --- commands (run the store call between the two transitions) ---


def refresh(session: AdminSession, store: PatternStore, limit: int) -> AdminSession:
    session, generation = fetch_started(session)
    return fetch_finished(session, generation, fetch_recent(store, limit))


def confirm_and_delete(session: AdminSession, store: PatternStore, voicing_id: str) -> AdminSession:
    if session.confirm_delete != voicing_id or not session.can_delete:
        return session
    session = delete_started(session, voicing_id)
    return delete_finished(session, delete_by_id(store, voicing_id))
