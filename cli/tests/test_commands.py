from __future__ import annotations

from typer.testing import CliRunner

from realworld_cli import config
from realworld_cli.main import app

runner = CliRunner()


def test_help_lists_command_groups() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("auth", "articles", "comments", "profiles", "tags", "whoami"):
        assert name in result.output


def test_login_stores_token(fake_api) -> None:
    fake_api.add("POST", "/api/users/login", payload={"user": {"username": "rick", "token": "jwt.value"}})

    result = runner.invoke(app, ["auth", "login", "--email", "rick@example.com", "--password", "shhh"])

    assert result.exit_code == 0, result.output
    assert fake_api.body() == {"user": {"email": "rick@example.com", "password": "shhh"}}
    cfg = config.load_config()
    assert cfg.auth.token == "jwt.value"
    assert cfg.auth.username == "rick"


def test_login_validation_error_exits_2(fake_api) -> None:
    fake_api.add(
        "POST",
        "/api/users/login",
        status=422,
        payload={"errors": {"email or password": ["is invalid"]}},
    )

    result = runner.invoke(app, ["auth", "login", "--email", "a@b.c", "--password", "x"])

    assert result.exit_code == 2
    assert "email or password is invalid" in result.output
    assert config.load_config().auth.token == ""


def test_register_stores_token(fake_api) -> None:
    fake_api.add("POST", "/api/users", payload={"user": {"username": "fizz", "token": "t1"}})

    result = runner.invoke(
        app,
        ["auth", "register", "--username", "fizz", "--email", "beep@boop.com", "--password", "buzz"],
        input="buzz\n",
    )

    assert result.exit_code == 0, result.output
    assert fake_api.body() == {"user": {"username": "fizz", "email": "beep@boop.com", "password": "buzz"}}
    assert config.load_config().auth.token == "t1"


def test_logout_clears_token(config_dir) -> None:
    config.save_config(config.AppConfig(api_root="http://localhost:3000/api", auth=config.AuthConfig(token="t")))

    result = runner.invoke(app, ["auth", "logout"])

    assert result.exit_code == 0
    assert config.load_config().auth.token == ""


def test_whoami_sends_stored_token(fake_api) -> None:
    config.save_config(config.AppConfig(api_root=config.DEFAULT_API_ROOT, auth=config.AuthConfig(token="abc")))
    fake_api.add("GET", "/api/user", payload={"user": {"username": "rick", "email": "rick@example.com"}})

    result = runner.invoke(app, ["whoami"])

    assert result.exit_code == 0, result.output
    assert "rick@example.com" in result.output
    assert fake_api.requests[0].headers["authorization"] == "Token abc"


def test_whoami_unauthorized(fake_api) -> None:
    fake_api.add("GET", "/api/user", status=401, payload={})

    result = runner.invoke(app, ["whoami"])

    assert result.exit_code == 2
    assert "Unauthorized" in result.output
    assert "authorization" not in fake_api.requests[0].headers


def test_articles_list_by_tag_pages(fake_api) -> None:
    fake_api.add(
        "GET",
        "/api/articles",
        payload={
            "articles": [
                {
                    "slug": "how-to-train",
                    "title": "How to train your dragon",
                    "author": {"username": "jake"},
                    "favoritesCount": 3,
                    "createdAt": "2016-02-18T03:22:56.637Z",
                }
            ],
            "articlesCount": 1,
        },
    )

    result = runner.invoke(app, ["articles", "list", "--tag", "dragons", "--page", "2"])

    assert result.exit_code == 0, result.output
    assert "total=1 page=2" in result.output
    assert fake_api.requests[0].url.query == b"tag=dragons&limit=10&offset=20"


def test_articles_list_rejects_multiple_filters(fake_api) -> None:
    result = runner.invoke(app, ["articles", "list", "--tag", "a", "--author", "b"])

    assert result.exit_code == 2
    assert fake_api.requests == []


def test_articles_list_feed_json(fake_api) -> None:
    fake_api.add("GET", "/api/articles/feed", payload={"articles": [], "articlesCount": 0})

    result = runner.invoke(app, ["articles", "list", "--feed", "--json"])

    assert result.exit_code == 0, result.output
    assert '"articlesCount": 0' in result.output
    assert fake_api.requests[0].url.query == b"limit=10&offset=0"


def test_articles_create_sends_tags(fake_api) -> None:
    fake_api.add("POST", "/api/articles", payload={"article": {"slug": "foobar", "title": "FooBar"}})

    result = runner.invoke(
        app,
        [
            "articles", "create",
            "--title", "FooBar",
            "--description", "beep boop",
            "--body", "Hello world",
            "--tag", "fizz",
            "--tag", "buzz",
        ],
    )

    assert result.exit_code == 0, result.output
    assert fake_api.body() == {
        "article": {
            "title": "FooBar",
            "description": "beep boop",
            "body": "Hello world",
            "tagList": ["fizz", "buzz"],
        }
    }


def test_articles_update_requires_a_field(fake_api) -> None:
    result = runner.invoke(app, ["articles", "update", "foobar"])

    assert result.exit_code == 2
    assert fake_api.requests == []


def test_articles_delete_with_yes(fake_api) -> None:
    fake_api.add("DELETE", "/api/articles/foobar")

    result = runner.invoke(app, ["articles", "delete", "foobar", "--yes"])

    assert result.exit_code == 0, result.output
    assert fake_api.requests[0].method == "DELETE"


def test_comments_delete(fake_api) -> None:
    fake_api.add("DELETE", "/api/articles/BeepBoop/comments/173")

    result = runner.invoke(app, ["comments", "delete", "BeepBoop", "173"])

    assert result.exit_code == 0, result.output
    assert "173" in result.output


def test_comments_add(fake_api) -> None:
    fake_api.add("POST", "/api/articles/foobar/comments", payload={"comment": {"id": 9, "body": "nice"}})

    result = runner.invoke(app, ["comments", "add", "foobar", "--body", "nice"])

    assert result.exit_code == 0, result.output
    assert fake_api.body() == {"comment": {"body": "nice"}}


def test_profiles_follow_posts_empty_body(fake_api) -> None:
    fake_api.add("POST", "/api/profiles/jake/follow", payload={"profile": {"username": "jake", "following": True}})

    result = runner.invoke(app, ["profiles", "follow", "jake"])

    assert result.exit_code == 0, result.output
    assert fake_api.body() == {}


def test_tags_lists_each_tag(fake_api) -> None:
    fake_api.add("GET", "/api/tags", payload={"tags": ["dragons", "training"]})

    result = runner.invoke(app, ["tags"])

    assert result.exit_code == 0, result.output
    assert "#dragons" in result.output
    assert "#training" in result.output


def test_network_failure_exits_2(config_dir) -> None:
    result = runner.invoke(app, ["tags", "--api-root", "http://127.0.0.1:9/api"])

    assert result.exit_code == 2
    assert "List tags failed" in result.output


def test_settings_set_api_root(config_dir) -> None:
    result = runner.invoke(app, ["settings", "set-api-root", "localhost:3000/api"])

    assert result.exit_code == 0, result.output
    assert config.load_config().api_root == "http://localhost:3000/api"


def test_comments_list_prints_bracketed_text(fake_api) -> None:
    fake_api.add(
        "GET",
        "/api/articles/foo/comments",
        payload={"comments": [{"id": 1, "body": "use [/code] tags", "author": {"username": "[bold]jake"}}]},
    )

    result = runner.invoke(app, ["comments", "list", "foo"])

    assert result.exit_code == 0, result.output
    assert "[/code]" in result.output
    assert "[bold]jake" in result.output


def test_articles_show_prints_bracketed_text(fake_api) -> None:
    fake_api.add(
        "GET",
        "/api/articles/foo",
        payload={
            "article": {
                "slug": "foo",
                "title": "[red]Foo[/red]",
                "description": "see [/link]",
                "body": "text [/i]",
                "tagList": ["[x]"],
                "author": {"username": "jake"},
            }
        },
    )

    result = runner.invoke(app, ["articles", "show", "foo"])

    assert result.exit_code == 0, result.output
    assert "see [/link]" in result.output
    assert "[red]Foo[/red]" in result.output


def test_articles_list_prints_bracketed_titles(fake_api) -> None:
    fake_api.add(
        "GET",
        "/api/articles",
        payload={"articles": [{"slug": "a", "title": "[/]", "author": {"username": "[/b]"}}], "articlesCount": 1},
    )

    result = runner.invoke(app, ["articles", "list"])

    assert result.exit_code == 0, result.output
    assert "[/b]" in result.output


def test_whoami_prints_bracketed_bio(fake_api) -> None:
    fake_api.add("GET", "/api/user", payload={"user": {"username": "rick", "bio": "likes [/code]"}})

    result = runner.invoke(app, ["whoami"])

    assert result.exit_code == 0, result.output
    assert "likes [/code]" in result.output


def test_login_rejected_shows_server_details(fake_api) -> None:
    fake_api.add(
        "POST",
        "/api/users/login",
        status=401,
        payload={"errors": {"email or password": ["is invalid"]}},
    )

    result = runner.invoke(app, ["auth", "login", "--email", "a@b.c", "--password", "x"])

    assert result.exit_code == 2
    assert "email or password is invalid" in result.output
    assert "auth login` first" not in result.output


def test_register_forbidden_shows_server_message(fake_api) -> None:
    fake_api.add("POST", "/api/users", status=403, payload={"message": "signups closed"})

    result = runner.invoke(
        app,
        ["auth", "register", "--username", "fizz", "--email", "beep@boop.com", "--password", "buzz"],
    )

    assert result.exit_code == 2
    assert "signups closed" in result.output
    assert "auth login` first" not in result.output
