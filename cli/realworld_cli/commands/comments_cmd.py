from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from .. import console
from ..config import load_config
from ..formatting import format_list_timestamp, truncate
from ..http import call, make_client

app = typer.Typer(help="Comment commands.")


@app.command("list")
def list_comments(
        slug: str = typer.Argument(..., help="Article slug."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.get_comments(slug), "List comments")
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    table = Table(title=f"Comments on {escape(slug)}")
    table.add_column("id", style="bold")
    table.add_column("author")
    table.add_column("created")
    table.add_column("body")
    items = data.get("comments") if isinstance(data, dict) else []
    for c in items or []:
        author = c.get("author") or {}
        table.add_row(
            str(c.get("id", "-")),
            escape(str(author.get("username") or "-")),
            escape(format_list_timestamp(c.get("createdAt"))),
            escape(truncate(c.get("body"))),
        )
    console.console.print(table)


@app.command("add")
def add_comment(
        slug: str = typer.Argument(..., help="Article slug."),
        body: str = typer.Option(..., "--body", prompt=True, help="Comment text."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.add_comment(slug, {"body": body}), "Add comment")
    finally:
        client.close()
    comment = (data.get("comment") if isinstance(data, dict) else None) or {}
    console.ok(f"Comment {comment.get('id', '-')} added to {slug}.")


@app.command("delete")
def delete_comment(
        slug: str = typer.Argument(..., help="Article slug."),
        comment_id: int = typer.Argument(..., help="Comment id."),
        api_root: str | None = typer.Option(None, "--api-root", help="Override API root."),
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        call(client.delete_comment(slug, comment_id), "Delete comment")
    finally:
        client.close()
    console.ok(f"Comment {comment_id} deleted.")
