"""Command-line interface for the book store.

Runs the HTTP server and performs the book operations directly against the
configured database.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.bookstore.core.errors import is_error
from src.bookstore.core.services import BookResult, BookService, BookStore
from src.bookstore.entities.service.book import Book, BookPayload
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import get_config
from src.bookstore.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    name="bookstore",
    help="Book store management commands",
    rich_markup_mode="rich",
)


def _config(ctx: typer.Context) -> ConfigData:
    return ctx.obj["config"]


@contextmanager
def _service(ctx: typer.Context) -> Iterator[BookService]:
    config = _config(ctx)
    database = init_db(config)
    try:
        yield BookService(
            BookStore(database), max_record_bytes=config.storage.max_record_bytes
        )
    finally:
        database.dispose()


def _book_table(book: Book, title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("id", str(book.id))
    table.add_row("title", book.title)
    table.add_row("author", book.author)
    table.add_row("created_at", book.created_at.isoformat())
    table.add_row(
        "updated_at", book.updated_at.isoformat() if book.updated_at else "-"
    )
    return table


def _render(result: BookResult, title: str) -> None:
    if is_error(result):
        console.print(f"[red]{result.kind}: {result.msg}[/red]")
        raise typer.Exit(1)
    console.print(_book_table(result, title))


@app.callback()
def main(
    ctx: typer.Context,
    database_url: str | None = typer.Option(
        None, "--database-url", help="Override the configured database URL"
    ),
) -> None:
    """Manage books in the configured database."""
    config = get_config()
    if database_url:
        config = config.model_copy(
            update={"database": config.database.model_copy(update={"url": database_url})}
        )
    ctx.obj = {"config": config}


@app.command(name="init-db")
def init_db_command(ctx: typer.Context) -> None:
    """Create the id counter and book tables."""
    init_db(_config(ctx)).dispose()
    console.print("[green]Database initialized[/green]")


@app.command()
def serve(
    ctx: typer.Context,
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from src.bookstore.api.http.app import create_app

    config = _config(ctx)
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting book store API on http://{host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(create_app(config=config), host=host, port=port, access_log=False)


@app.command()
def get(ctx: typer.Context, book_id: int = typer.Argument(..., min=0)) -> None:
    """Show the book stored under BOOK_ID."""
    with _service(ctx) as service:
        _render(service.get_book(book_id), f"Book {book_id}")


@app.command()
def add(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Title of the book"),
    author: str = typer.Option(..., "--author", help="Author of the book"),
) -> None:
    """Add a book and print it with its assigned id."""
    with _service(ctx) as service:
        _render(service.add_book(BookPayload(title=title, author=author)), "Added")


@app.command()
def update(
    ctx: typer.Context,
    book_id: int = typer.Argument(..., min=0),
    title: str = typer.Option(..., "--title", help="New title"),
    author: str = typer.Option(..., "--author", help="New author"),
) -> None:
    """Replace the title and author of BOOK_ID."""
    with _service(ctx) as service:
        result = service.update_book(book_id, BookPayload(title=title, author=author))
        _render(result, "Updated")


@app.command()
def delete(ctx: typer.Context, book_id: int = typer.Argument(..., min=0)) -> None:
    """Delete BOOK_ID and print the removed record."""
    with _service(ctx) as service:
        _render(service.delete_book(book_id), "Deleted")


if __name__ == "__main__":
    app()
