"""
Helpers that turn raw sheet values into safe HTML fragments.
"""

from __future__ import annotations

import html
import re
from typing import Optional

WHITESPACE = re.compile(r"\s")


def tel_href(value: Optional[str]) -> str:
    return "tel:" + WHITESPACE.sub("", value or "")


def format_cell(value: Optional[str]) -> str:
    return html.escape("" if value is None else str(value))


def format_phone_link(value: Optional[str], css_class: str = "bt-contact-link") -> str:
    href = html.escape(tel_href(value), quote=True)
    return f'<a href="{href}" class="{css_class}">{format_cell(value)}</a>'


def format_email_link(address: str) -> str:
    safe = html.escape(address, quote=True)
    return f'<a href="mailto:{safe}">{safe}</a>'
