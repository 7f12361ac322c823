from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Patterning Admin"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🛡️",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --indigo-600: __INDIGO_600__;
  --indigo-700: __INDIGO_700__;
  --indigo-50: __INDIGO_50__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --text-muted: __TEXT_MUTED__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}

.block-container{
  padding-top: 0.75rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.admin-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 16px;
  margin: 0 0 14px 0;
}
.admin-title{
  font-size: 20px;
  font-weight: 700;
  letter-spacing: -0.01em;
  color: var(--text-primary);
}
.admin-subtitle{
  font-size: 13px;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  background: var(--indigo-50);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--indigo-700);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--indigo-600);
  display:inline-block;
}

/* Gate card */
.gate-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 24px;
  text-align: center;
  margin-top: 12vh;
}
.gate-icon{
  width: 48px;
  height: 48px;
  border-radius: 999px;
  background: var(--indigo-50);
  color: var(--indigo-600);
  display:flex;
  align-items:center;
  justify-content:center;
  margin: 0 auto 10px auto;
  font-size: 22px;
}
.gate-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--text-primary);
}
.gate-body{
  font-size: 14px;
  color: var(--text-secondary);
}

/* Pattern rows */
.table-head{
  font-size: 12px;
  font-weight: 600;
  text-transform: uppercase;
  letter-spacing: 0.05em;
  color: var(--text-secondary);
}
.pattern-word{
  font-weight: 600;
  text-transform: capitalize;
  color: var(--text-primary);
}
.pattern-voicing{
  color: var(--text-secondary);
  display: -webkit-box;
  -webkit-line-clamp: 2;
  -webkit-box-orient: vertical;
  overflow: hidden;
}
.pattern-date{
  color: var(--text-secondary);
  white-space: nowrap;
}
.no-image{
  font-size: 12px;
  color: var(--text-muted);
}
.empty-state{
  padding: 48px 0;
  text-align: center;
  color: var(--text-muted);
}

/* Buttons */
div.stButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
}
div.stButton > button[kind="primary"]{
  background: var(--indigo-600) !important;
  border-color: var(--indigo-600) !important;
}
div.stButton > button[kind="primary"]:hover{
  background: var(--indigo-700) !important;
}
div[data-baseweb="input"] input{
  border-radius: 10px !important;
}
</style>
"""

    tokens = {
        "__INDIGO_600__": str(THEME["accent_primary"]),
        "__INDIGO_700__": str(THEME["accent_secondary"]),
        "__INDIGO_50__": str(THEME["accent_soft"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__TEXT_MUTED__": str(THEME["text_muted"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
