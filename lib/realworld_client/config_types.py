from __future__ import annotations
from dataclasses import dataclass

DEFAULT_API_ROOT = "https://conduit.productionready.io/api"
USER_AGENT = "realworld-client/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    api_root: str = DEFAULT_API_ROOT
    token: str | None = None
    timeout_s: float = 15.0
    user_agent: str = USER_AGENT
