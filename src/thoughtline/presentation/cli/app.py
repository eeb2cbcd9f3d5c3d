"""ThoughtLine CLI application using Typer.

This module provides command-line utilities for the ThoughtLine backend:
running the API server, creating the database schema and generating
deployment secrets.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from thoughtline_config.settings import get_settings

app = typer.Typer(
    name="thoughtline",
    help="ThoughtLine - social feed backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "thoughtline.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db() -> None:
    """Create all database tables (idempotent)."""
    from thoughtline.infrastructure.persistence.sqlalchemy import (
        create_engine,
        create_tables,
    )

    settings = get_settings()

    async def _run() -> None:
        engine = create_engine(settings.database_url)
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    url = settings.database_url
    db_display = url.split("@")[-1] if "@" in url else url
    console.print(f"Database: [bold]{db_display}[/bold]")
    asyncio.run(_run())
    console.print("[green]Database schema is up to date.[/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a signing secret for ThoughtLine configuration.

    Prints a JWT_SECRET_KEY line ready to paste into your .env file.
    Changing the secret invalidates every issued session token.
    """
    console.print("\n[bold green]ThoughtLine Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secret for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes, plenty for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the value to your config/.env (production) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
