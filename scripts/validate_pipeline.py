"""Quick validation script for the timetable pipeline.

Run with `python scripts/validate_pipeline.py` to check that a sample sheet
parses and splits into arrivals and departures as expected.
"""

from __future__ import annotations

from bus_timetable.data.filters import filter_records
from bus_timetable.data.loader import build_state


SAMPLE_CSV = (
    "Time,Bus,Route,Driver Contact\r\n"
    "7:00 AM,Red,Colombo - Homagama,077 123 4567\r\n"
    "7:30 AM,Blue,Kottawa - Homagama,071 987 6543\r\n"
    "5:00 PM,Red,Homagama - Colombo,077 123 4567\r\n"
    "5:30 PM,Green\r\n"
)


def main() -> None:
    state = build_state(SAMPLE_CSV)
    if state.error or state.dataset is None:
        raise SystemExit(f"Pipeline failed: {state.error}")

    if state.headers != ["Time", "Bus", "Route", "Driver Contact"]:
        raise SystemExit(f"Unexpected headers: {state.headers}")

    assert len(state.dataset.arrivals) == 2, "Two AM rows should be arrivals"
    assert len(state.dataset.departures) == 2, "Two PM rows should be departures"
    assert state.dataset.departures.iloc[1]["Route"] == "", "Short rows should be padded"
    assert len(filter_records(state.dataset.arrivals, "kottawa")) == 1, "Search should ignore case"

    print(
        "Pipeline validation passed. Arrivals:",
        len(state.dataset.arrivals),
        "Departures:",
        len(state.dataset.departures),
    )


if __name__ == "__main__":
    main()
