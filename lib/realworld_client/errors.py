from __future__ import annotations


class RealWorldError(Exception):
    """Base client error."""


class MissingFieldsError(RealWorldError):
    """Required arguments were not supplied; no request was sent."""


class NetworkError(RealWorldError):
    """Transport/network layer error."""


class ApiError(RealWorldError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
