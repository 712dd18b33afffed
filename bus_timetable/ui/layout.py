"""
Layout helpers for the Streamlit application (header, controls, footer).
"""

from __future__ import annotations

import streamlit as st

from bus_timetable.config import (
    ACTIVE_VIEW_KEY,
    CONTACT_EMAIL,
    CONTACT_PHONE,
    DISCLAIMER_TEXT,
    INTRO_TEXT,
    PAGE_SUBTITLE,
    PAGE_TITLE,
    SEARCH_KEY,
    SEARCH_PLACEHOLDER,
    VIEWS,
    VIEWS_BY_KEY,
)
from bus_timetable.ui.components.formatting import format_email_link, format_phone_link

BASE_CSS = """
<style>
.bt-header {background-image: linear-gradient(to right, #059669, #15803d); color: #ffffff;
            padding: 2.5rem 1rem; border-radius: 16px; text-align: center; margin-bottom: 1.5rem;}
.bt-header h1 {color: #ffffff; font-weight: 800; margin: 0;}
.bt-header p {font-style: italic; opacity: 0.9; margin: 0.75rem 0 0;}
.bt-card {background: #ffffff; border-top: 4px solid #10b981; border-radius: 16px;
          padding: 1.5rem; box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 1.5rem; color: #4b5563;}
.bt-table-wrap {overflow-x: auto;}
.bt-table {width: 100%; border-collapse: collapse;}
.bt-table th {background: #d1fae5; color: #065f46; text-transform: uppercase; font-size: 0.85rem;
              text-align: left; padding: 0.75rem 1rem;}
.bt-table td {padding: 0.75rem 1rem; border-top: 1px solid #f3f4f6; white-space: nowrap; color: #111827;}
.bt-table tr:hover td {background: #ecfdf5;}
.bt-table td.bt-empty {text-align: center; color: #6b7280; font-style: italic;}
.bt-contact-link {color: #059669; font-weight: 500;}
.bt-loading {display: flex; justify-content: center; align-items: center; padding: 4rem 0; color: #6b7280;}
.bt-spinner {border: 4px solid rgba(0,0,0,0.1); width: 36px; height: 36px; border-radius: 50%;
             border-left-color: #059669; animation: bt-spin 1s ease infinite; margin-right: 1rem;}
@keyframes bt-spin {0% {transform: rotate(0deg);} 100% {transform: rotate(360deg);}}
.bt-error {background: #fee2e2; color: #b91c1c; padding: 1rem; border-radius: 12px; text-align: center;}
.bt-footer {background: #1f2937; color: #ffffff; padding: 2rem 1rem; border-radius: 16px;
            text-align: center; font-size: 0.85rem; margin-top: 2rem;}
.bt-footer a {color: #ffffff; text-decoration: underline;}
</style>
"""


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":bus:",
    )
    _inject_base_styles()


def _inject_base_styles() -> None:
    # Re-emitted on every run; elements not written during a rerun are dropped
    st.markdown(BASE_CSS, unsafe_allow_html=True)


def render_header() -> None:
    st.markdown(
        f'<div class="bt-header"><h1>{PAGE_TITLE}</h1><p>{PAGE_SUBTITLE}</p></div>',
        unsafe_allow_html=True,
    )
    st.markdown(f'<div class="bt-card">{INTRO_TEXT}</div>', unsafe_allow_html=True)


def search_input() -> str:
    return st.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )


def view_selector() -> str:
    """Return the key of the active record set."""
    return st.radio(
        "Timetable",
        options=[view.key for view in VIEWS],
        format_func=lambda key: VIEWS_BY_KEY[key].label,
        horizontal=True,
        key=ACTIVE_VIEW_KEY,
        label_visibility="collapsed",
    )


def render_footer() -> None:
    st.markdown(
        f"""
        <div class="bt-footer">
          <p>{DISCLAIMER_TEXT}</p>
          <p>Official Contact:</p>
          <p>Email: {format_email_link(CONTACT_EMAIL)}</p>
          <p>Phone: {format_phone_link(CONTACT_PHONE, css_class="")}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
