from __future__ import annotations

import json
from typing import Any

import typer
from realworld_client import ApiError, ApiResponse, AuthError, NetworkError, RealWorldClient, RealWorldError
from realworld_client.config_types import ClientConfig
from realworld_client.errors_utils import format_validation_errors, parse_api_error_detail

from . import console
from .config import AppConfig, resolve_api_root


def make_client(cfg: AppConfig, *, api_root_override: str | None = None) -> RealWorldClient:
    return RealWorldClient(
        ClientConfig(
            api_root=resolve_api_root(cfg, api_root_override),
            token=cfg.auth.token or None,
        )
    )


def unwrap(result: ApiResponse, action: str) -> Any:
    """Return the parsed body, raising for transport failures and HTTP errors."""
    if result.error is not None:
        raise result.error
    r = result.response
    if r is None:
        raise NetworkError(f"{action}: no response")
    if r.status_code >= 400:
        msg = f"{action} failed with {r.status_code}"
        details = None
        if result.data is not None:
            details = json.dumps(result.data, ensure_ascii=False)
        elif r.text:
            details = r.text[:1000]
        if r.status_code in (401, 403):
            raise AuthError(r.status_code, msg, details)
        raise ApiError(r.status_code, msg, details)
    return result.data


def _report_api_error(e: ApiError) -> None:
    lines = format_validation_errors(parse_api_error_detail(e.details))
    if lines:
        for line in lines:
            console.err(line)
    elif e.details:
        console.err(f"{e}: {e.details}")
    else:
        console.err(str(e))


def call(result: ApiResponse, action: str, *, login_hint: bool = True) -> Any:
    """``unwrap`` for commands: report the failure and exit with code 2.

    ``login_hint=False`` is for the login and register commands themselves,
    where a 401/403 is reported with the server's details.
    """
    try:
        return unwrap(result, action)
    except AuthError as e:
        if login_hint:
            console.err("Unauthorized. Run `conduit auth login` first.")
        else:
            _report_api_error(e)
        raise typer.Exit(code=2)
    except ApiError as e:
        _report_api_error(e)
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"{action} failed: {e}")
        raise typer.Exit(code=2)
    except RealWorldError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
