"""
Fetch the published timetable sheet and build the dashboard state from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import requests

from bus_timetable.config import FETCH_ERROR_PREFIX, SHEET_CSV_URL
from bus_timetable.data.classifier import ClassifiedDataset, classify
from bus_timetable.data.parser import parse_csv
from bus_timetable.errors import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    loading: bool = False
    error: Optional[str] = None
    headers: List[str] = field(default_factory=list)
    dataset: Optional[ClassifiedDataset] = None

    @classmethod
    def pending(cls) -> "DashboardState":
        return cls(loading=True)

    @classmethod
    def failed(cls, message: str) -> "DashboardState":
        return cls(error=message)


def fetch_csv_text(url: str = SHEET_CSV_URL, session: Optional[requests.Session] = None) -> str:
    """Single GET of the sheet. Raises NetworkError on any failure."""
    client = session if session is not None else requests
    logger.debug("Fetching timetable sheet from %s", url)
    try:
        response = client.get(url)
    except requests.RequestException as exc:
        raise NetworkError(str(exc)) from exc

    if not response.ok:
        raise NetworkError("Network response was not ok")

    # Published sheets without a declared charset are still UTF-8
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    text = response.text
    logger.info("Fetched timetable sheet (%d bytes)", len(response.content))
    return text


def build_state(text: str) -> DashboardState:
    sheet = parse_csv(text)
    dataset = classify(sheet.to_frame())
    logger.info(
        "Parsed %d records: %d arrivals, %d departures",
        len(sheet.records),
        len(dataset.arrivals),
        len(dataset.departures),
    )
    return DashboardState(headers=sheet.headers, dataset=dataset)


def load_dashboard_state(url: str = SHEET_CSV_URL, session: Optional[requests.Session] = None) -> DashboardState:
    """
    Run fetch, parse and classify once and return a terminal state.

    A failed fetch yields an error state with no headers and no dataset.
    """
    try:
        text = fetch_csv_text(url, session=session)
    except NetworkError as err:
        logger.exception("Error fetching bus data")
        return DashboardState.failed(FETCH_ERROR_PREFIX + str(err))
    return build_state(text)
