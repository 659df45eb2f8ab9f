from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import call, make_client

app = typer.Typer(help="Profile commands.")


def _print_profile(data, json_out: bool) -> None:
    if json_out:
        console.print_json(data)
        return
    profile = (data.get("profile") if isinstance(data, dict) else None) or {}
    console.print(f"username: {profile.get('username') or '-'}", markup=False)
    console.print(f"bio: {profile.get('bio') or '-'}", markup=False)
    console.print(f"image: {profile.get('image') or '-'}", markup=False)
    console.print(f"following: {'yes' if profile.get('following') else 'no'}")


@app.command("show")
def show_profile(
        username: str = typer.Argument(..., help="Username."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.get_profile(username), "Fetch profile")
    finally:
        client.close()
    _print_profile(data, json_out)


@app.command("follow")
def follow(
        username: str = typer.Argument(..., help="Username to follow."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.follow_user(username), "Follow user")
    finally:
        client.close()
    if json_out:
        console.print_json(data)
        return
    console.ok(f"Following {username}.")


@app.command("unfollow")
def unfollow(
        username: str = typer.Argument(..., help="Username to unfollow."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        call(client.unfollow_user(username), "Unfollow user")
    finally:
        client.close()
    console.ok(f"No longer following {username}.")
