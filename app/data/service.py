from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from config import AppConfig
from data import queries
from data.connection import get_store_client
from data.errors import DeleteError, FetchError, StoreError
from data.mock_data import MockStore
from data.patterns import PatternRecord, flatten_voicings

logger = logging.getLogger(__name__)


class PatternStore(Protocol):
    def select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]: ...

    def delete(self, table: str, filters: dict[str, str]) -> None: ...


@dataclass(frozen=True)
class FetchResult:
    records: tuple[PatternRecord, ...] = ()
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DeleteResult:
    voicing_id: str
    error: Optional[DeleteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_store(cfg: AppConfig, use_mock: bool, mock_store: Optional[MockStore] = None) -> PatternStore:
    if use_mock:
        return mock_store if mock_store is not None else MockStore()
    return get_store_client(cfg)


def store_label(use_mock: bool) -> str:
    return "mock" if use_mock else "supabase"


def fetch_recent(store: PatternStore, limit: int) -> FetchResult:
    """
    One read of the newest voicings (layer, essences and images embedded),
    flattened in store order. Failures come back as FetchError, never raised.
    """
    try:
        rows = store.select(queries.VOICINGS_TABLE, queries.q_recent_voicings(limit))
        records = flatten_voicings(rows)
    except (StoreError, AttributeError, TypeError, ValueError) as e:
        # AttributeError/TypeError/ValueError: payload that isn't a list of row objects
        logger.error("Error fetching patterns: %s", e)
        return FetchResult(error=FetchError(str(e)))

    logger.info("fetched %d patterns", len(records))
    return FetchResult(records=records)


def delete_by_id(store: PatternStore, voicing_id: str) -> DeleteResult:
    """
    Deletes one voicings row. The caller has already asked the operator to
    confirm; this does not check whether the id still exists.
    """
    try:
        store.delete(queries.VOICINGS_TABLE, queries.q_delete_voicing(voicing_id))
    except StoreError as e:
        logger.error("Error deleting voicing %s: %s", voicing_id, e)
        return DeleteResult(voicing_id=voicing_id, error=DeleteError(str(e)))

    logger.info("deleted voicing %s", voicing_id)
    return DeleteResult(voicing_id=voicing_id)
