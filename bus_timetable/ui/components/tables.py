"""
Reusable helpers for rendering timetable tables.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from bus_timetable.config import CONTACT_COLUMN
from bus_timetable.ui.components.formatting import format_cell, format_phone_link

EMPTY_MESSAGE = "No results found."


def _header_row(headers: List[str]) -> str:
    cells = "".join(f"<th>{format_cell(h)}</th>" for h in headers)
    return f"<thead><tr>{cells}</tr></thead>"


def _body_rows(df: pd.DataFrame, headers: List[str], contact_column: Optional[str]) -> str:
    if df.empty:
        return (
            f'<tr><td colspan="{len(headers)}" class="bt-empty">{EMPTY_MESSAGE}</td></tr>'
        )
    rows = []
    for record in df.to_dict("records"):
        cells = []
        for header in headers:
            value = record.get(header, "")
            if header == contact_column:
                cells.append(f"<td>{format_phone_link(value)}</td>")
            else:
                cells.append(f"<td>{format_cell(value)}</td>")
        rows.append("<tr>" + "".join(cells) + "</tr>")
    return "".join(rows)


def build_table_html(
    df: pd.DataFrame,
    headers: List[str],
    contact_column: Optional[str] = CONTACT_COLUMN,
) -> str:
    """
    Render records as an HTML table, one column per header.

    The contact column becomes a tap-to-call link; an empty frame renders a
    single placeholder row spanning every column.
    """
    body = _body_rows(df, headers, contact_column)
    return (
        '<div class="bt-table-wrap"><table class="bt-table">'
        f"{_header_row(headers)}<tbody>{body}</tbody></table></div>"
    )


def render_table(df: pd.DataFrame, headers: List[str], title: str) -> None:
    st.subheader(title)
    st.markdown(build_table_html(df, headers), unsafe_allow_html=True)
