"""Timetable section: loading, error, or the filtered table for the active set."""

from __future__ import annotations

import html

import pandas as pd
import streamlit as st

from bus_timetable.config import VIEWS, VIEWS_BY_KEY, ViewConfig
from bus_timetable.data.filters import filter_records
from bus_timetable.data.loader import DashboardState
from bus_timetable.ui.components.tables import render_table

ARRIVALS, DEPARTURES = VIEWS


def _active_records(state: DashboardState, view: ViewConfig) -> pd.DataFrame:
    if view.key == DEPARTURES.key:
        return state.dataset.departures
    return state.dataset.arrivals


def render(state: DashboardState, active_view: str, search_term: str) -> None:
    if state.loading:
        st.markdown(
            '<div class="bt-loading"><div class="bt-spinner"></div><p>Loading data...</p></div>',
            unsafe_allow_html=True,
        )
        return

    if state.error:
        st.markdown(
            f'<div class="bt-error"><p><strong>Error:</strong></p><p>{html.escape(state.error)}</p></div>',
            unsafe_allow_html=True,
        )
        return

    if state.dataset is None:
        return

    view = VIEWS_BY_KEY.get(active_view, ARRIVALS)
    records = filter_records(_active_records(state, view), search_term)
    render_table(records, state.headers, title=view.title)
