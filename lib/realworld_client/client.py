from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable

import httpx

from .config_types import ClientConfig
from .errors import MissingFieldsError
from .request import RequestDescriptor, auth_headers, paginate, segment
from .transport import ApiResponse, AsyncTransport, Transport

Callback = Callable[[Exception | None, httpx.Response | None, Any], Any]


class _Operations(ABC):
    """RealWorld API operations.

    Every operation builds a :class:`RequestDescriptor` and hands it to
    ``_dispatch``; subclasses decide whether that happens synchronously or
    returns an awaitable. The result is an :class:`ApiResponse`
    ``(error, response, data)``, which is also passed to ``callback`` when one
    is given. HTTP error statuses are not errors here: a 422 arrives with
    ``error=None`` and the server's ``{"errors": {...}}`` body in ``data``.
    """

    def __init__(self, cfg: ClientConfig | None = None):
        self._cfg = cfg or ClientConfig()
        self._token = self._cfg.token or None

    @property
    def api_root(self) -> str:
        return self._cfg.api_root.rstrip("/")

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token or None

    def _request(self, method: str, path: str, *, query=(), body: Any | None = None) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            path=path,
            query=tuple(query),
            body=body,
            headers=auth_headers(self._token),
        )

    @abstractmethod
    def _dispatch(self, req: RequestDescriptor, callback: Callback | None):
        """Send ``req`` and deliver its result."""

    @abstractmethod
    def _reject(self, error: Exception, callback: Callback | None):
        """Deliver ``error`` without sending anything."""

    # --- users ---
    def login(self, email: str | None = None, password: str | None = None, *, callback: Callback | None = None):
        if not (email and password):
            return self._reject(MissingFieldsError("Must supply email and password"), callback)
        body = {"user": {"email": email, "password": password}}
        return self._dispatch(self._request("POST", "/users/login", body=body), callback)

    def register(
            self,
            username: str | None = None,
            email: str | None = None,
            password: str | None = None,
            *,
            callback: Callback | None = None,
    ):
        if not (username and email and password):
            return self._reject(MissingFieldsError("Must supply a username, email, and password"), callback)
        body = {"user": {"username": username, "email": email, "password": password}}
        return self._dispatch(self._request("POST", "/users", body=body), callback)

    def get_user(self, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", "/user"), callback)

    def update_user(self, fields: dict[str, Any] | None = None, *, callback: Callback | None = None):
        return self._dispatch(self._request("PUT", "/user", body={"user": fields or {}}), callback)

    # --- profiles ---
    def get_profile(self, username: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", f"/profiles/{segment(username)}"), callback)

    def follow_user(self, username: str, *, callback: Callback | None = None):
        req = self._request("POST", f"/profiles/{segment(username)}/follow", body={})
        return self._dispatch(req, callback)

    def unfollow_user(self, username: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("DELETE", f"/profiles/{segment(username)}/follow"), callback)

    # --- article lists ---
    def list_all_articles(self, page: int | None = None, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", "/articles", query=paginate(20, page)), callback)

    def list_articles_by_tag(self, tag: str, page: int | None = None, *, callback: Callback | None = None):
        query = (("tag", tag),) + paginate(10, page)
        return self._dispatch(self._request("GET", "/articles", query=query), callback)

    def list_articles_by_author(self, author: str, page: int | None = None, *, callback: Callback | None = None):
        query = (("author", author),) + paginate(5, page)
        return self._dispatch(self._request("GET", "/articles", query=query), callback)

    def list_articles_by_author_favorites(
            self,
            author: str,
            page: int | None = None,
            *,
            callback: Callback | None = None,
    ):
        query = (("favorited", author),) + paginate(20, page)
        return self._dispatch(self._request("GET", "/articles", query=query), callback)

    def feed_articles(self, page: int | None = None, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", "/articles/feed", query=paginate(10, page)), callback)

    # --- articles ---
    def get_article(self, slug: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", f"/articles/{segment(slug)}"), callback)

    def create_article(self, fields: dict[str, Any] | None = None, *, callback: Callback | None = None):
        return self._dispatch(self._request("POST", "/articles", body={"article": fields or {}}), callback)

    def update_article(self, slug: str, fields: dict[str, Any] | None = None, *, callback: Callback | None = None):
        req = self._request("PUT", f"/articles/{segment(slug)}", body={"article": fields or {}})
        return self._dispatch(req, callback)

    def delete_article(self, slug: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("DELETE", f"/articles/{segment(slug)}"), callback)

    # --- comments ---
    def add_comment(self, slug: str, fields: dict[str, Any] | None = None, *, callback: Callback | None = None):
        req = self._request("POST", f"/articles/{segment(slug)}/comments", body={"comment": fields or {}})
        return self._dispatch(req, callback)

    def get_comments(self, slug: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", f"/articles/{segment(slug)}/comments"), callback)

    def delete_comment(self, slug: str, comment_id: int | str, *, callback: Callback | None = None):
        req = self._request("DELETE", f"/articles/{segment(slug)}/comments/{segment(comment_id)}")
        return self._dispatch(req, callback)

    # --- favorites ---
    def favorite_article(self, slug: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("POST", f"/articles/{segment(slug)}/favorite", body={}), callback)

    def unfavorite_article(self, slug: str, *, callback: Callback | None = None):
        return self._dispatch(self._request("DELETE", f"/articles/{segment(slug)}/favorite"), callback)

    # --- tags ---
    def get_tags(self, *, callback: Callback | None = None):
        return self._dispatch(self._request("GET", "/tags"), callback)


class RealWorldClient(_Operations):
    def __init__(self, cfg: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        super().__init__(cfg)
        self._t = Transport(self._cfg, transport=transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> RealWorldClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _dispatch(self, req: RequestDescriptor, callback: Callback | None) -> ApiResponse:
        return self._deliver(self._t.send(req), callback)

    def _reject(self, error: Exception, callback: Callback | None) -> ApiResponse:
        return self._deliver(ApiResponse(error, None, None), callback)

    @staticmethod
    def _deliver(result: ApiResponse, callback: Callback | None) -> ApiResponse:
        if callback is not None:
            callback(*result)
        return result


class AsyncRealWorldClient(_Operations):
    """Same operations as :class:`RealWorldClient`; each one returns an awaitable."""

    def __init__(self, cfg: ClientConfig | None = None, *, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(cfg)
        self._t = AsyncTransport(self._cfg, transport=transport)

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AsyncRealWorldClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _dispatch(self, req: RequestDescriptor, callback: Callback | None) -> ApiResponse:
        return await self._deliver(await self._t.send(req), callback)

    async def _reject(self, error: Exception, callback: Callback | None) -> ApiResponse:
        return await self._deliver(ApiResponse(error, None, None), callback)

    @staticmethod
    async def _deliver(result: ApiResponse, callback: Callback | None) -> ApiResponse:
        if callback is not None:
            rv = callback(*result)
            if inspect.isawaitable(rv):
                await rv
        return result
