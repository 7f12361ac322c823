from __future__ import annotations

import copy
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from faker import Faker

from data.errors import StoreError
from data.queries import VOICINGS_TABLE

logger = logging.getLogger(__name__)


WORDS = ["river", "ember", "lantern", "harbor", "meadow", "thistle", "echo", "quartz", "willow", "drift"]


def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f+00:00")


def voicings_mock(n_rows: int = 60, seed: int = 17, now: Optional[datetime] = None) -> list[dict[str, Any]]:
    """
    Raw voicing joins shaped like the PostgREST embed, newest first.
    Every few rows drop a relation so the fallbacks are visible.
    """
    fake = Faker()
    fake.seed_instance(seed)
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)

    rows = []
    for i in range(n_rows):
        created = now - timedelta(hours=6 * i, minutes=rng.randint(0, 300))

        if i % 7 == 3:
            layer = None
        else:
            layer = {"word": rng.choice(WORDS)}

        if i % 5 == 4:
            essences = []
        else:
            essences = []
            for j in range(1 + (i % 3 == 0)):
                images = [] if (i + j) % 4 == 2 else [{"image_url": fake.image_url(width=256, height=256)}]
                essences.append({"content": fake.sentence(nb_words=5).rstrip("."), "images": images})

        rows.append(
            {
                "id": str(fake.uuid4()),
                "content": fake.sentence(nb_words=12),
                "created_at": _iso(created),
                "layer": layer,
                "essences": essences,
            }
        )
    rows.sort(key=lambda r: r["created_at"], reverse=True)
    return rows


class MockStore:
    """
    In-memory stand-in for the remote store with the same select/delete
    contract as data.connection.StoreClient.
    """

    def __init__(self, rows: Optional[list[dict[str, Any]]] = None):
        self._rows = {VOICINGS_TABLE: list(rows) if rows is not None else voicings_mock()}
        self.fail_next: Optional[str] = None

    def _maybe_fail(self) -> None:
        if self.fail_next:
            message, self.fail_next = self.fail_next, None
            raise StoreError(message)

    def _table(self, table: str) -> list[dict[str, Any]]:
        if table not in self._rows:
            raise StoreError(f'relation "public.{table}" does not exist', status_code=404)
        return self._rows[table]

    def select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        self._maybe_fail()
        rows = list(self._table(table))
        order = params.get("order")
        if order:
            col, _, direction = order.partition(".")
            rows.sort(key=lambda r: r.get(col) or "", reverse=direction == "desc")
        if params.get("limit"):
            rows = rows[: int(params["limit"])]
        return copy.deepcopy(rows)

    def delete(self, table: str, filters: dict[str, str]) -> None:
        self._maybe_fail()
        if not filters:
            raise StoreError(f"Refusing to delete from {table} without a filter")
        rows = self._table(table)
        keep = [r for r in rows if not all(f"eq.{r.get(k)}" == v for k, v in filters.items())]
        logger.debug("mock delete from %s removed %d rows", table, len(rows) - len(keep))
        self._rows[table] = keep
