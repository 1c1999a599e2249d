"""Mini README: Entry point CLI for launching the Cash Wave tracker.

This script exposes a Typer CLI that starts the FastAPI screen with
configurable host, port, and production flags. Logging is configured from
settings before uvicorn takes over.
"""

from __future__ import annotations

import typer
import uvicorn

from cashwave.configuration import get_settings
from cashwave.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Cash Wave income and expense tracker.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False,
        help=(
            "Use production server settings (disable auto-reload)."
            " Implied when CASHWAVE_ENVIRONMENT=production."
        ),
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Cash Wave on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "cashwave.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
