"""
Free-text search over timetable records.
"""

from __future__ import annotations

import pandas as pd


def filter_records(df: pd.DataFrame, search_term: str | None) -> pd.DataFrame:
    """
    Keep records where any field value contains the search term.

    Matching is a case-insensitive literal substring test against values
    only; column names never match. An empty term returns `df` itself.
    Any other term, whitespace included, is matched as given.
    """
    term = search_term or ""
    if not term or df.empty:
        return df

    mask = pd.Series(False, index=df.index)
    for column in df.columns:
        mask |= df[column].astype(str).str.contains(term, case=False, regex=False, na=False)
    return df[mask]
