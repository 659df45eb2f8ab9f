from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

Query = tuple[tuple[str, str], ...]

# characters encodeURIComponent leaves alone besides -_.~
_UNRESERVED = "!'()*"


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    query: Query = ()
    body: Any | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Path relative to the api root, with the encoded query string."""
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query, quote_via=quote, safe=_UNRESERVED)}"


def segment(value: Any) -> str:
    """Percent-encode one path segment, ``/`` included.

    ``.`` and ``..`` are escaped too, otherwise they are removed as dot segments.
    """
    text = str(value)
    if text in (".", ".."):
        return "%2E" * len(text)
    return quote(text, safe=_UNRESERVED)


def paginate(page_size: int, page: int | None) -> Query:
    offset = page * page_size if page else 0
    return (("limit", str(page_size)), ("offset", str(offset)))


def auth_headers(token: str | None) -> dict[str, str]:
    if token:
        return {"Authorization": f"Token {token}"}
    return {}
