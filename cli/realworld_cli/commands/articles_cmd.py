from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from .. import console
from ..config import load_config
from ..formatting import format_list_timestamp, format_tags, truncate
from ..http import call, make_client

app = typer.Typer(help="Article commands.")

API_ROOT_OPT = typer.Option(None, "--api-root", help="Override API root.")
JSON_OPT = typer.Option(False, "--json", help="Print raw JSON.")


def _print_article(article: dict) -> None:
    author = article.get("author") or {}
    console.print(f"[bold]{escape(str(article.get('title') or '-'))}[/]")
    console.print(f"  slug: {article.get('slug') or '-'}", markup=False)
    console.print(f"  author: {author.get('username') or '-'}", markup=False)
    console.print(f"  created: {format_list_timestamp(article.get('createdAt'))}", markup=False)
    console.print(f"  tags: {format_tags(article.get('tagList'))}", markup=False)
    console.print(f"  favorites: {article.get('favoritesCount', 0)}", markup=False)
    console.print(f"  description: {article.get('description') or '-'}", markup=False)
    if article.get("body"):
        console.print()
        console.print(article["body"], markup=False)


def _print_single(data, json_out: bool) -> None:
    if json_out:
        console.print_json(data)
        return
    article = data.get("article") if isinstance(data, dict) else None
    _print_article(article or {})


@app.command("list")
def list_articles(
        tag: str | None = typer.Option(None, "--tag", help="Filter by tag."),
        author: str | None = typer.Option(None, "--author", help="Filter by author username."),
        favorited: str | None = typer.Option(None, "--favorited", help="Articles favorited by this user."),
        feed: bool = typer.Option(False, "--feed", help="Articles from followed users (login required)."),
        page: int = typer.Option(0, "--page", min=0, help="Page number, starting at 0."),
        api_root: str | None = API_ROOT_OPT,
        json_out: bool = JSON_OPT,
):
    if sum(1 for v in (tag, author, favorited, feed) if v) > 1:
        console.err("Use only one of --tag, --author, --favorited, --feed.")
        raise typer.Exit(code=2)

    client = make_client(load_config(), api_root_override=api_root)
    try:
        if feed:
            result = client.feed_articles(page)
        elif tag:
            result = client.list_articles_by_tag(tag, page)
        elif author:
            result = client.list_articles_by_author(author, page)
        elif favorited:
            result = client.list_articles_by_author_favorites(favorited, page)
        else:
            result = client.list_all_articles(page)
        data = call(result, "List articles")
    finally:
        client.close()

    if json_out:
        console.print_json(data)
        return

    items = data.get("articles") if isinstance(data, dict) else []
    total = data.get("articlesCount") if isinstance(data, dict) else None
    if total is not None:
        console.info(f"total={total} page={page}")

    table = Table(title="Articles")
    table.add_column("slug", style="bold")
    table.add_column("title")
    table.add_column("author")
    table.add_column("♥", justify="right")
    table.add_column("created")

    for a in items or []:
        author_info = a.get("author") or {}
        table.add_row(
            escape(str(a.get("slug") or "-")),
            escape(truncate(a.get("title"), 48)),
            escape(str(author_info.get("username") or "-")),
            str(a.get("favoritesCount", 0)),
            escape(format_list_timestamp(a.get("createdAt"))),
        )

    console.console.print(table)


@app.command("show")
def show_article(
        slug: str = typer.Argument(..., help="Article slug."),
        api_root: str | None = API_ROOT_OPT,
        json_out: bool = JSON_OPT,
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.get_article(slug), "Fetch article")
    finally:
        client.close()
    _print_single(data, json_out)


@app.command("create")
def create_article(
        title: str = typer.Option(..., "--title", help="Article title."),
        description: str = typer.Option(..., "--description", help="Short description."),
        body: str = typer.Option(..., "--body", help="Article body (markdown)."),
        tags: list[str] = typer.Option([], "--tag", help="Tag to attach; repeatable."),
        api_root: str | None = API_ROOT_OPT,
        json_out: bool = JSON_OPT,
):
    fields = {"title": title, "description": description, "body": body}
    if tags:
        fields["tagList"] = list(tags)
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.create_article(fields), "Create article")
    finally:
        client.close()
    console.ok("Article created.")
    _print_single(data, json_out)


@app.command("update")
def update_article(
        slug: str = typer.Argument(..., help="Article slug."),
        title: str | None = typer.Option(None, "--title", help="New title."),
        description: str | None = typer.Option(None, "--description", help="New description."),
        body: str | None = typer.Option(None, "--body", help="New body."),
        api_root: str | None = API_ROOT_OPT,
        json_out: bool = JSON_OPT,
):
    fields = {k: v for k, v in {"title": title, "description": description, "body": body}.items() if v is not None}
    if not fields:
        console.err("Nothing to update. Pass --title, --description or --body.")
        raise typer.Exit(code=2)
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.update_article(slug, fields), "Update article")
    finally:
        client.close()
    console.ok("Article updated.")
    _print_single(data, json_out)


@app.command("delete")
def delete_article(
        slug: str = typer.Argument(..., help="Article slug."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        api_root: str | None = API_ROOT_OPT,
):
    if not yes and not typer.confirm(f"Delete article {slug}?"):
        raise typer.Exit(code=1)
    client = make_client(load_config(), api_root_override=api_root)
    try:
        call(client.delete_article(slug), "Delete article")
    finally:
        client.close()
    console.ok(f"Article {slug} deleted.")


@app.command("favorite")
def favorite_article(
        slug: str = typer.Argument(..., help="Article slug."),
        api_root: str | None = API_ROOT_OPT,
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.favorite_article(slug), "Favorite article")
    finally:
        client.close()
    article = (data.get("article") if isinstance(data, dict) else None) or {}
    console.ok(f"Favorited {slug} ({article.get('favoritesCount', '-')} favorites).")


@app.command("unfavorite")
def unfavorite_article(
        slug: str = typer.Argument(..., help="Article slug."),
        api_root: str | None = API_ROOT_OPT,
):
    client = make_client(load_config(), api_root_override=api_root)
    try:
        data = call(client.unfavorite_article(slug), "Unfavorite article")
    finally:
        client.close()
    article = (data.get("article") if isinstance(data, dict) else None) or {}
    console.ok(f"Unfavorited {slug} ({article.get('favoritesCount', '-')} favorites).")
