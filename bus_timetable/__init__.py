"""
Core package for the NSBM bus timetable dashboard.

Submodules provide fetching, parsing, classification and filtering of the
published timetable sheet, plus the Streamlit rendering helpers that are
orchestrated by the top-level `app.py`.
"""
