"""CLI interface for draftsman."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from draftsman.config import load_config, merge_cli_overrides
from draftsman.errors import DraftsmanError
from draftsman.lifecycle import PostLifecycle, PostState

app = typer.Typer(
    name="draftsman",
    help="Create, publish and unpublish blog posts.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from draftsman import __version__

        console.print(f"draftsman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to a .draftsman.toml file.",
            dir_okay=False,
        ),
    ] = None,
    root: Annotated[
        Optional[Path],
        typer.Option(
            "--root",
            help="Site root containing the drafts and posts directories.",
            file_okay=False,
        ),
    ] = None,
    drafts_dir: Annotated[
        Optional[str],
        typer.Option("--drafts-dir", help="Drafts directory, relative to the root."),
    ] = None,
    posts_dir: Annotated[
        Optional[str],
        typer.Option("--posts-dir", help="Published posts directory, relative to the root."),
    ] = None,
    author: Annotated[
        Optional[str],
        typer.Option("--author", help="Author written into new drafts."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log what each command does."),
    ] = False,
) -> None:
    """Draftsman - manage the draft/publish lifecycle of blog posts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    config = load_config(config_path)
    ctx.obj = merge_cli_overrides(
        config,
        root=root,
        drafts_dir=drafts_dir,
        posts_dir=posts_dir,
        author=author,
    )


def _lifecycle(ctx: typer.Context) -> PostLifecycle:
    return PostLifecycle(ctx.obj)


def _fail(exc: DraftsmanError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(1)


@app.command(name="new")
def new_cmd(
    ctx: typer.Context,
    title: Annotated[
        Optional[str],
        typer.Argument(help="Post title.", envvar="title", show_envvar=False),
    ] = None,
) -> None:
    """Create a new draft with the standard front matter.

    An existing draft with the same name is overwritten.
    """
    lifecycle = _lifecycle(ctx)
    try:
        result = lifecycle.create(title)
    except DraftsmanError as exc:
        _fail(exc)

    console.print(
        f"Creating a new post [green]{escape(result.filename)}[/green] "
        f"in {escape(ctx.obj.paths.drafts_dir)}"
    )


app.command(name="post", hidden=True)(new_cmd)


@app.command(name="publish")
def publish_cmd(
    ctx: typer.Context,
    post: Annotated[
        Optional[str],
        typer.Argument(help="Draft filename, e.g. hello_world.md.", envvar="post", show_envvar=False),
    ] = None,
) -> None:
    """Move a draft into the posts directory, prefixed with today's date."""
    try:
        result = _lifecycle(ctx).publish(post)
    except DraftsmanError as exc:
        _fail(exc)

    console.print(
        f"Published {escape(post or '')} as [green]{escape(result.filename)}[/green]"
    )


@app.command(name="unpublish")
def unpublish_cmd(
    ctx: typer.Context,
    post: Annotated[
        Optional[str],
        typer.Argument(
            help="Published filename, e.g. 2024-03-01-hello_world.md.",
            envvar="post",
            show_envvar=False,
        ),
    ] = None,
) -> None:
    """Move a published post back to the drafts directory."""
    try:
        result = _lifecycle(ctx).unpublish(post)
    except DraftsmanError as exc:
        _fail(exc)

    console.print(
        f"Unpublished {escape(post or '')} as [green]{escape(result.filename)}[/green]"
    )


@app.command(name="list")
def list_cmd(
    ctx: typer.Context,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Only list drafts."),
    ] = False,
    published: Annotated[
        bool,
        typer.Option("--published", help="Only list published posts."),
    ] = False,
) -> None:
    """List drafts and published posts."""
    state: PostState | None = None
    if drafts and not published:
        state = PostState.DRAFT
    elif published and not drafts:
        state = PostState.PUBLISHED

    entries = _lifecycle(ctx).list_posts(state)
    if not entries:
        console.print("[yellow]No posts found.[/yellow]")
        raise typer.Exit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("State")
    table.add_column("Date")
    table.add_column("File")
    table.add_column("Title")
    for entry in entries:
        table.add_row(
            entry.state.value,
            entry.publish_date.isoformat() if entry.publish_date else "",
            escape(entry.filename),
            escape(entry.title),
        )
    console.print(table)
