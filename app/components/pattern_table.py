from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import streamlit as st

from data.patterns import PatternRecord
from data.session import AdminSession


COLUMN_WIDTHS = [1.2, 1.0, 3.6, 1.2, 1.6]
HEADINGS = ["Word", "Image", "Voicing", "Created", "Actions"]


@dataclass(frozen=True)
class RowAction:
    kind: str  # "delete" | "confirm" | "cancel"
    voicing_id: str


def format_created(created_at: str) -> str:
    """ISO timestamp -> YYYY-MM-DD (UTC). Unparseable values are shown as-is."""
    ts = pd.to_datetime(created_at, utc=True, errors="coerce")
    if pd.isna(ts):
        return created_at
    return ts.strftime("%Y-%m-%d")


def _render_row(p: PatternRecord, session: AdminSession, viewer_base_url: str) -> Optional[RowAction]:
    action = None
    c_word, c_img, c_voice, c_date, c_actions = st.columns(COLUMN_WIDTHS, vertical_alignment="center")

    c_word.markdown(f'<span class="pattern-word">{html.escape(p.word)}</span>', unsafe_allow_html=True)
    if p.image_url:
        c_img.image(p.image_url, width=48)
    else:
        c_img.markdown('<span class="no-image">No Image</span>', unsafe_allow_html=True)
    c_voice.markdown(f'<div class="pattern-voicing">{html.escape(p.voicing)}</div>', unsafe_allow_html=True)
    c_date.markdown(f'<span class="pattern-date">{format_created(p.created_at)}</span>', unsafe_allow_html=True)

    with c_actions:
        a1, a2 = st.columns(2)
        a1.link_button("👁", p.viewer_url(viewer_base_url), help="Open in viewer")
        if a2.button(
            "🗑",
            key=f"delete_{p.id}",
            help="Delete this voicing",
            disabled=not session.can_delete,
        ):
            action = RowAction("delete", p.id)

    if session.confirm_delete == p.id:
        st.warning("Are you sure you want to delete this voicing? This cannot be undone.")
        b1, b2, _ = st.columns([1, 1, 4])
        if b1.button("Delete", key=f"confirm_{p.id}", type="primary"):
            action = RowAction("confirm", p.id)
        if b2.button("Cancel", key=f"cancel_{p.id}"):
            action = RowAction("cancel", p.id)
    return action


def render_pattern_table(session: AdminSession, viewer_base_url: str) -> Optional[RowAction]:
    """
    Draws one row per record and returns the row action clicked on this
    run, if any.
    """
    head = st.columns(COLUMN_WIDTHS)
    for c, label in zip(head, HEADINGS):
        c.markdown(f'<span class="table-head">{label}</span>', unsafe_allow_html=True)
    st.divider()

    action = None
    for p in session.patterns:
        clicked = _render_row(p, session, viewer_base_url)
        action = clicked or action

    if session.show_empty_state:
        st.markdown('<div class="empty-state">No patterns found.</div>', unsafe_allow_html=True)
    return action
