"""
Application-wide configuration constants.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ViewConfig:
    key: str
    label: str
    title: str


SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQOCNTuhTVjDh6OcGoKiToV6xq0DYt_prUvxo1zbDzyfaCnpJccUQNIHs7y6XN1fEiNAPpFsKNywmyq"
    "/pub?gid=0&single=true&output=csv"
)

TIME_COLUMN = "Time"
CONTACT_COLUMN = "Driver Contact"
ARRIVAL_MARKER = "AM"
DEPARTURE_MARKER = "PM"

# Ordered selector choices; the first one is active on page load
VIEWS: List[ViewConfig] = [
    ViewConfig("arrivals", "Morning Arrivals", "Morning Arrivals to NSBM"),
    ViewConfig("departures", "Evening Departures", "Evening Departures from NSBM"),
]
VIEWS_BY_KEY = {view.key: view for view in VIEWS}

PAGE_TITLE = "NSBM Green University Bus Timetable"
PAGE_SUBTITLE = "25.2 group community resource"
INTRO_TEXT = (
    "Welcome to the unofficial NSBM Green University bus timetable. This schedule is a "
    "community-driven resource based on common bus routes and times. Please note that these "
    "times are subject to change due to traffic, road conditions, and other factors. It is "
    "always best to arrive early and check with the official university transport office for "
    "the most up-to-date information."
)
DISCLAIMER_TEXT = (
    "Disclaimer: The times listed are unofficial estimates and are subject to change without "
    "prior notice. For the most current and official schedule, please contact the university's "
    "transport office directly."
)
CONTACT_EMAIL = "transport@nsbm.lk"
CONTACT_PHONE = "+94 11 544 5000"
SEARCH_PLACEHOLDER = "Search by bus type, time, or location..."
FETCH_ERROR_PREFIX = (
    "Failed to fetch bus data. Please check the spreadsheet URL and sharing settings. "
)

# st.session_state keys
STATE_KEY = "bt_dashboard_state"
SEARCH_KEY = "bt_search_term"
ACTIVE_VIEW_KEY = "bt_active_view"
