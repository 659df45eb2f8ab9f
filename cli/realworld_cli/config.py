from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from realworld_client import DEFAULT_API_ROOT

APP_NAME = "conduit"
CONFIG_FILENAME = "config.toml"
ENV_API_ROOT = "CONDUIT_API_ROOT"

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0"}


@dataclass
class AuthConfig:
    token: str = ""
    username: str = ""


@dataclass
class AppConfig:
    api_root: str
    auth: AuthConfig


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(api_root=DEFAULT_API_ROOT, auth=AuthConfig())


def normalize_api_root(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    scheme = "http://" if host in _LOCAL_HOSTS else "https://"
    return f"{scheme}{value}"


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "api_root": cfg.api_root,
        "auth": {
            "token": cfg.auth.token,
            "username": cfg.auth.username,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    api_root = normalize_api_root(str(data.get("api_root") or "")) or DEFAULT_API_ROOT
    auth_raw = data.get("auth") or {}
    token = ""
    username = ""
    if isinstance(auth_raw, dict):
        token = str(auth_raw.get("token") or "")
        username = str(auth_raw.get("username") or "")
    return AppConfig(api_root=api_root, auth=AuthConfig(token=token, username=username))


def load_config() -> AppConfig:
    path = config_path()
    if not os.path.exists(path):
        return default_config()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return default_config()
    return from_toml(data)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def resolve_api_root(cfg: AppConfig, override: str | None = None) -> str:
    """Command line flag first, then the environment, then the config file."""
    for candidate in (override, os.getenv(ENV_API_ROOT, "")):
        value = normalize_api_root(candidate)
        if value:
            return value
    return normalize_api_root(cfg.api_root) or DEFAULT_API_ROOT
