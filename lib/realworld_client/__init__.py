from .client import AsyncRealWorldClient, RealWorldClient
from .config_types import DEFAULT_API_ROOT, ClientConfig
from .errors import ApiError, AuthError, MissingFieldsError, NetworkError, RealWorldError
from .transport import ApiResponse

__all__ = [
    "RealWorldClient",
    "AsyncRealWorldClient",
    "ClientConfig",
    "DEFAULT_API_ROOT",
    "ApiResponse",
    "RealWorldError",
    "MissingFieldsError",
    "NetworkError",
    "ApiError",
    "AuthError",
]
