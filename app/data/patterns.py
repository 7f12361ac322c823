from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import quote

import pandas as pd


UNKNOWN_WORD = "Unknown"


@dataclass(frozen=True)
class PatternRecord:
    """One voicing flattened together with its word, first essence and first image."""

    id: str
    word: str
    voicing: str
    essence: str
    image_url: str
    created_at: str  # ISO 8601, formatted by the render layer

    def viewer_url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/v/{quote(self.id, safe='')}"


def _first(seq: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(seq, list) and seq and isinstance(seq[0], Mapping):
        return seq[0]
    return None


def _layer_word(layer: Any) -> str:
    # PostgREST embeds to-one relations as an object, but falls back to a
    # list when it can't prove the relation is to-one.
    if isinstance(layer, list):
        layer = _first(layer)
    if isinstance(layer, Mapping) and layer.get("word"):
        return str(layer["word"])
    return UNKNOWN_WORD


def flatten_voicing(raw: Mapping[str, Any]) -> PatternRecord:
    """
    Flatten one voicings row (with embedded layer / essences / images).
    Missing or empty nested relations fall back to "Unknown" / "" and
    never raise.
    """
    essence = _first(raw.get("essences"))
    image = _first(essence.get("images")) if essence else None

    return PatternRecord(
        id=str(raw.get("id") or ""),
        word=_layer_word(raw.get("layer")),
        voicing=raw.get("content") or "",
        essence=(essence.get("content") or "") if essence else "",
        image_url=(image.get("image_url") or "") if image else "",
        created_at=raw.get("created_at") or "",
    )


def flatten_voicings(rows: Iterable[Mapping[str, Any]]) -> tuple[PatternRecord, ...]:
    # store order (created_at desc) is kept as-is
    return tuple(flatten_voicing(r) for r in rows)


RECORD_COLUMNS = [f.name for f in fields(PatternRecord)]


def records_to_frame(records: Iterable[PatternRecord]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in records], columns=RECORD_COLUMNS)
