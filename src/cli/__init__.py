"""Main CLI application module."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from src.inventory.runtime.context import get_config

from .products import products_app

console = Console()

app = typer.Typer(
    help="📦 Inventory CLI - run the product API and manage products from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(products_app, name="products")


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """🚀 Start the product API server."""
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Inventory API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}{config.app.api_prefix}/products")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.inventory.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@app.command(name="init-db")
def init_db() -> None:
    """🗄️  Create the database tables."""
    from src.inventory.runtime.init_db import init_db as create_tables

    create_tables()
    console.print(f"[green]✅ Tables created in {get_config().database.url}[/green]")


@app.command(name="token")
def token(
    subject: str = typer.Argument(..., help="User id placed in the sub claim"),
    email: str | None = typer.Option(None, "--email", "-e", help="Email claim"),
    name: str | None = typer.Option(None, "--name", "-n", help="Display name claim"),
    expires_in: int = typer.Option(3600, "--expires-in", help="Lifetime in seconds"),
) -> None:
    """🔑 Mint a bearer token accepted by GET /api/user."""
    from fastapi import HTTPException

    from src.inventory.core.services import JwtGeneratorService

    try:
        value = JwtGeneratorService().generate_access_token(
            subject, email=email, name=name, expires_in_seconds=expires_in
        )
    except HTTPException as e:
        console.print(f"[red]❌ Failed to generate token: {e.detail}[/red]")
        raise typer.Exit(code=1) from e

    typer.echo(value)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
