from __future__ import annotations

import os

import typer

from .. import console
from ..config import ENV_API_ROOT, config_path, load_config, normalize_api_root, resolve_api_root, save_config

app = typer.Typer(help="Local CLI settings.")


@app.command("show")
def show():
    cfg = load_config()
    console.print(f"config: {config_path()}", markup=False)
    console.print(f"api_root: {resolve_api_root(cfg)}", markup=False)
    if os.getenv(ENV_API_ROOT):
        console.print(f"  (from {ENV_API_ROOT})", markup=False)
    console.print(f"user: {cfg.auth.username or '-'}", markup=False)
    console.print(f"token: {'set' if cfg.auth.token else 'not set'}")


@app.command("set-api-root")
def set_api_root(url: str = typer.Argument(..., help="API root, e.g. http://localhost:3000/api.")):
    value = normalize_api_root(url)
    if not value:
        console.err("API root must not be empty.")
        raise typer.Exit(code=2)
    cfg = load_config()
    cfg.api_root = value
    save_path = save_config(cfg)
    console.ok(f"api_root set to {value} ({save_path}).")
