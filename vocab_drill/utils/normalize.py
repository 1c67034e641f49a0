import re
from datetime import date, datetime
from typing import Any

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def normalize_answer(text: str | None) -> str:
    return (text or "").strip().lower()


def cell_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def after_first_line_break(text: str) -> str | None:
    parts = _LINE_BREAK.split(text, maxsplit=1)
    if len(parts) < 2:
        return None
    return parts[1]
