"""Main CLI application module."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from bookstore.core.results import Ok, StorageFailed, ValidationFailed
from bookstore.core.services import BookService, DbSessionService
from bookstore.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="📚 Bookstore API command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "bookstore.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create the books table."""
    from bookstore.runtime.init_db import init_db as create_tables

    create_tables()
    console.print("[green]✅ Database tables created[/green]")


@app.command(name="load")
def load_books(
    file: Path = typer.Argument(..., exists=True, readable=True, help="JSON array of books"),
) -> None:
    """Insert the books listed in a JSON file, reporting any rejected record."""
    records = json.loads(file.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        console.print("[red]❌ Expected a JSON array of books[/red]")
        raise typer.Exit(1)

    database_service = DbSessionService(get_config().database)
    database_service.create_all()
    failures = 0
    try:
        with database_service.session_scope() as session:
            service = BookService(session)
            for record in records:
                result = service.create_book(record)
                if isinstance(result, Ok):
                    console.print(f"[green]+[/green] {result.value.isbn} {result.value.title}")
                    continue

                failures += 1
                label = record.get("isbn", "?") if isinstance(record, dict) else "?"
                console.print(f"[red]✗[/red] {label}")
                if isinstance(result, ValidationFailed):
                    for violation in result.violations:
                        console.print(f"    {violation}", markup=False, soft_wrap=True)
                elif isinstance(result, StorageFailed):
                    console.print(f"    {result.message}", markup=False, soft_wrap=True)
    finally:
        database_service.dispose()

    if failures:
        console.print(f"[yellow]{failures} of {len(records)} book(s) rejected[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Loaded {len(records)} book(s)[/green]")


@app.command(name="list")
def list_books() -> None:
    """Print every stored book."""
    database_service = DbSessionService(get_config().database)
    try:
        with database_service.session_scope() as session:
            result = BookService(session).list_books()
    finally:
        database_service.dispose()

    if not isinstance(result, Ok):
        console.print(f"[red]❌ {result.message}[/red]")
        raise typer.Exit(1)

    table = Table(title="Books")
    table.add_column("ISBN", no_wrap=True)
    for column in ("Title", "Author", "Year"):
        table.add_column(column)
    for book in result.value:
        table.add_row(book.isbn, book.title, book.author, str(book.year))
    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
