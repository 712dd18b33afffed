import streamlit as st

from bus_timetable.config import STATE_KEY
from bus_timetable.data.loader import DashboardState, load_dashboard_state
from bus_timetable.ui.layout import (
    render_footer,
    render_header,
    search_input,
    setup_page,
    view_selector,
)
from bus_timetable.ui.pages import timetable


def _dashboard_state(placeholder, active_view: str, search_term: str) -> DashboardState:
    """Fetch once per session; later reruns reuse the stored state."""
    state = st.session_state.get(STATE_KEY)
    if state is None:
        with placeholder.container():
            timetable.render(DashboardState.pending(), active_view, search_term)
        state = load_dashboard_state()
        st.session_state[STATE_KEY] = state
    return state


def main() -> None:
    setup_page()
    render_header()

    search_term = search_input()
    active_view = view_selector()

    section = st.empty()
    state = _dashboard_state(section, active_view, search_term)
    with section.container():
        timetable.render(state, active_view, search_term)

    render_footer()


if __name__ == "__main__":
    main()
