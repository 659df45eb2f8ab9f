from __future__ import annotations

from typing import Any

import typer

from .. import console
from ..config import load_config, save_config
from ..http import call, make_client

app = typer.Typer(help="Auth commands.")


def _store_user(data: Any) -> None:
    user = data.get("user") if isinstance(data, dict) else None
    token = user.get("token") if isinstance(user, dict) else None
    if not isinstance(token, str) or not token:
        console.err("Server response contained no token.")
        raise typer.Exit(code=2)
    cfg = load_config()
    cfg.auth.token = token
    cfg.auth.username = str(user.get("username") or "")
    save_path = save_config(cfg)
    console.ok(f"Logged in as {cfg.auth.username or '-'}. Token saved to {save_path}.")


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.login(email, password), "Login", login_hint=False)
    finally:
        client.close()
    _store_user(data)


@app.command("register")
def register(
    username: str = typer.Option(..., "--username", prompt=True, help="Username to register."),
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Account password."
    ),
    api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.register(username, email, password), "Register", login_hint=False)
    finally:
        client.close()
    _store_user(data)


@app.command("logout", help="Clear the stored token.")
def logout():
    cfg = load_config()
    cfg.auth.token = ""
    cfg.auth.username = ""
    save_path = save_config(cfg)
    console.ok(f"Token cleared from {save_path}.")


def whoami_impl(
    api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.get_user(), "Fetch user")
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    user = data.get("user") if isinstance(data, dict) else None
    user = user or {}
    console.print(f"username: {user.get('username') or '-'}", markup=False)
    console.print(f"email: {user.get('email') or '-'}", markup=False)
    console.print(f"bio: {user.get('bio') or '-'}", markup=False)
    console.print(f"image: {user.get('image') or '-'}", markup=False)


app.command("whoami")(whoami_impl)
