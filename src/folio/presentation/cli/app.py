"""Folio CLI application using Typer.

This module provides command-line utilities for the Folio backend:
running the API server, preparing the database and generating secrets.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from folio_config.settings import get_settings

app = typer.Typer(
    name="folio",
    help="Folio - portfolio backend CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]{settings.app_name} API[/bold green] "
        f"on http://{bind_host}:{bind_port}",
    )
    uvicorn.run(
        "folio.presentation.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
    )


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables. Existing data is left untouched."""
    from folio.presentation.api.dependencies import (
        create_engine_from_settings,
        create_tables,
    )

    settings = get_settings()

    async def _run() -> None:
        engine = create_engine_from_settings(settings)
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    console.print(f"[green]Database ready:[/green] {settings.database_url}")


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Folio Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print("[dim]Copy the value to config/.env or config/.env.dev.[/dim]\n")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
