# src/flowtask/core/fields.py

"""Small helpers shared by the entity models: UNSET sentinel and ISO conversions."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_datetime(raw: Any) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    text = str(raw).strip()
    # JS toISOString() uses a trailing "Z"
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_date(raw: Any) -> date | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    # Accept full timestamps too ("2024-03-05T00:00:00.000Z").
    if len(text) > 10 and text[10] == "T":
        return parse_datetime(text).date()  # type: ignore[union-attr]
    return date.fromisoformat(text)


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def format_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None
