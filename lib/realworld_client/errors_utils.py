from __future__ import annotations

import json
from typing import Any


def parse_api_error_detail(details: str | None) -> dict | None:
    if not details:
        return None
    try:
        data = json.loads(details)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def format_validation_errors(data: Any) -> list[str]:
    """Flatten a 422 body like ``{"errors": {"body": ["can't be empty"]}}``.

    Returns ``["body can't be empty"]``; anything else yields an empty list.
    """
    if not isinstance(data, dict):
        return []
    errors = data.get("errors")
    if not isinstance(errors, dict):
        return []
    lines: list[str] = []
    for field, messages in errors.items():
        if isinstance(messages, str):
            messages = [messages]
        if not isinstance(messages, list):
            continue
        for msg in messages:
            lines.append(f"{field} {msg}")
    return lines
