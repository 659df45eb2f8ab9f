from __future__ import annotations

from datetime import datetime, timezone


def format_list_timestamp(value: datetime | str | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value)
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return text
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M")


def format_tags(tags: list | None) -> str:
    if not tags:
        return "-"
    return ", ".join(str(t) for t in tags)


def truncate(text: str | None, width: int = 60) -> str:
    if not text:
        return "-"
    text = " ".join(str(text).split())
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
