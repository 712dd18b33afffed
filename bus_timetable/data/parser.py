"""
Turn the published sheet's CSV text into a header list and records.

The sheet is plain comma-separated text: no quoting or escaping is honoured,
so a comma inside a value splits it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

Record = Dict[str, str]

LINE_BREAK = re.compile(r"\r?\n")
BOM = "\ufeff"


@dataclass
class ParsedSheet:
    headers: List[str]
    records: List[Record] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        # Duplicate header names collapse into one record key
        return list(dict.fromkeys(self.headers))

    def to_frame(self) -> pd.DataFrame:
        """Records as a string-valued DataFrame, columns in header order."""
        return pd.DataFrame.from_records(self.records, columns=self.columns).astype(str)


def _record_from_row(headers: List[str], row: List[str]) -> Record:
    record: Record = {}
    for idx, header in enumerate(headers):
        record[header] = row[idx].strip() if idx < len(row) else ""
    return record


def parse_csv(text: str) -> ParsedSheet:
    # A leading byte-order mark would otherwise stick to the first header
    text = text.lstrip(BOM)
    rows = [line.split(",") for line in LINE_BREAK.split(text)]
    headers = [h.strip() for h in rows[0]]
    records = [_record_from_row(headers, row) for row in rows[1:]]
    return ParsedSheet(headers=headers, records=records)
