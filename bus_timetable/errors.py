"""
Exceptions raised while loading the timetable sheet.
"""


class NetworkError(Exception):
    """The sheet could not be fetched (transport failure or non-success status)."""
