from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import call, make_client


def tags(
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """List popular tags."""
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.get_tags(), "List tags")
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return
    items = data.get("tags") if isinstance(data, dict) else None
    if not items:
        console.info("No tags.")
        return
    for tag in items:
        console.print(f"#{tag}", markup=False)
