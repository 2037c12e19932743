"""
Command-line launcher for the Basho email generator.

Usage:
    basho-email                 Serve the form on the configured host/port
    basho-email --port 8080     Serve on another port
    basho-email --help          Show help
"""

import logging
import webbrowser

import click
from rich.console import Console
from rich.panel import Panel

from .config import config

console = Console()


@click.command()
@click.option("--host", default=None, help="Interface to bind. Defaults to API_HOST.")
@click.option("--port", type=int, default=None, help="Port to listen on. Defaults to API_PORT.")
@click.option(
    "--debug/--no-debug",
    default=None,
    help="Run Flask in debug mode. Defaults to FLASK_DEBUG.",
)
@click.option(
    "--open/--no-open",
    "open_browser",
    default=False,
    help="Open the form in a web browser once the server starts.",
)
def main(host: str | None, port: int | None, debug: bool | None, open_browser: bool) -> None:
    """
    Basho Email Generator - personalized outreach emails.
    
    Serve the outreach form locally and draft emails with OpenAI.
    """
    from .app import create_app
    
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(levelname)s: %(message)s",
    )
    
    host = host or config.API_HOST
    port = port or config.API_PORT
    debug = config.FLASK_DEBUG if debug is None else debug
    url = f"http://{host}:{port}/"
    
    console.print(Panel(
        f"Open in browser: [bold]{url}[/bold]\n"
        f"Model: {config.OPENAI_MODEL}\n"
        f"Debug: {'on' if debug else 'off'}",
        title="🌿 Basho Email Generator",
        border_style="blue",
    ))
    
    for problem in config.validate():
        console.print(f"[yellow]⚠️  {problem}[/yellow]")
    
    if open_browser:
        webbrowser.open(url)
    
    app = create_app()
    try:
        app.run(host=host, port=port, debug=debug)
    except OSError as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
