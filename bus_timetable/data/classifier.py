"""
Split parsed timetable records into morning arrivals and evening departures.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from bus_timetable.config import ARRIVAL_MARKER, DEPARTURE_MARKER, TIME_COLUMN


@dataclass
class ClassifiedDataset:
    arrivals: pd.DataFrame
    departures: pd.DataFrame


def _marker_mask(times: pd.Series, marker: str) -> pd.Series:
    return times.str.contains(marker.upper(), regex=False)


def classify(df: pd.DataFrame, time_column: str = TIME_COLUMN) -> ClassifiedDataset:
    """
    Records whose time value contains "AM" are arrivals, "PM" departures.

    The two sets are independent filters, so a value carrying both markers
    lands in both. Records without a time value are in neither.
    """
    if time_column not in df.columns:
        empty = df.iloc[0:0]
        return ClassifiedDataset(arrivals=empty, departures=empty.copy())

    times = df[time_column].fillna("").astype(str).str.upper()
    arrivals = df[_marker_mask(times, ARRIVAL_MARKER)]
    departures = df[_marker_mask(times, DEPARTURE_MARKER)]
    return ClassifiedDataset(arrivals=arrivals, departures=departures)
