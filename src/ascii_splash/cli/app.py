"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from ascii_splash.config import QUALITY_PRESETS, ConfigError, load_config
from ascii_splash.patterns import PATTERNS
from ascii_splash.themes import THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Route library logging.

    While the animation owns the screen, log records go to a file when one
    is given; otherwise only warnings reach stderr through rich.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        level = logging.DEBUG if verbose else logging.INFO
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    root = logging.getLogger("ascii_splash")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ascii-splash",
        help="Animated ASCII-art patterns for your terminal.",
        no_args_is_help=False,
        invoke_without_command=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(ctx: typer.Context) -> None:
        """Run the default animation when no command is given."""
        if ctx.invoked_subcommand is None:
            ctx.invoke(run)

    @app.command()
    def run(
        pattern: Annotated[Optional[str], typer.Option("--pattern", "-p", help="Pattern to start with")] = None,
        quality: Annotated[Optional[str], typer.Option("--quality", "-q", help="low (15), medium (30) or high (60) fps")] = None,
        fps: Annotated[Optional[int], typer.Option("--fps", "-f", help="Frame rate, overrides --quality")] = None,
        theme: Annotated[Optional[str], typer.Option("--theme", "-t", help="Color theme")] = None,
        no_mouse: Annotated[bool, typer.Option("--no-mouse", help="Disable mouse interaction")] = False,
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to a JSON config file")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ) -> None:
        """Start the animation."""
        from ascii_splash.cli.splash import SplashApp

        configure_logging(verbose, log_file)
        try:
            settings = load_config(config).merged(
                pattern=pattern,
                quality=quality,
                fps=fps,
                theme=theme,
                mouse=False if no_mouse else None,
            )
        except ConfigError as e:
            console.print(f"[red]Configuration error:[/] {e}")
            raise typer.Exit(1)

        if settings.pattern not in PATTERNS:
            console.print(f"[red]Unknown pattern:[/] {settings.pattern}")
            console.print(f"Available: {', '.join(PATTERNS)}")
            raise typer.Exit(1)
        if settings.theme not in THEMES:
            console.print(f"[yellow]Unknown theme {settings.theme!r}, using ocean[/]")

        try:
            splash = SplashApp(settings)
        except (TypeError, ValueError) as e:
            # Bad per-pattern options from the config file
            console.print(f"[red]Configuration error:[/] {e}")
            raise typer.Exit(1)

        try:
            splash.run()
        except KeyboardInterrupt:
            pass

    @app.command()
    def patterns() -> None:
        """List patterns and their presets."""
        table = Table(title="Patterns")
        table.add_column("Pattern", style="bold cyan")
        table.add_column("Presets")
        for name, cls in PATTERNS.items():
            presets = "\n".join(f"{p.id}. {p.name} [dim]- {p.description}[/]" for p in cls.presets)
            table.add_row(name, presets or "[dim](none)[/]")
        console.print(table)

    @app.command()
    def themes() -> None:
        """List color themes."""
        for name, theme in THEMES.items():
            swatch = Text()
            for color in theme.colors:
                swatch.append("  ", style=f"on rgb({color.r},{color.g},{color.b})")
            console.print(Text(f"{name:<12}"), swatch, f" {theme.display_name}")
        console.print(f"\n[dim]Quality presets: "
                      f"{', '.join(f'{k}={v}fps' for k, v in QUALITY_PRESETS.items())}[/]")

    return app
