from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import render_umli
from .config import Settings
from .errors import UmliError
from .logging_config import setup_logging
from .parser import parse
from .types import RenderOptions

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True)
console = Console(stderr=True)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        console.print(f"[red]Cannot read {path}:[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Lay out UML sequence diagrams written in the umli DSL."""
    try:
        settings = Settings()
    except ValidationError as err:
        console.print(f"[red]Invalid settings:[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err
    setup_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


@app.command("render")
def render(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="umli script to render."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="SVG file to write; stdout when omitted.",
    ),
    theme: Optional[str] = typer.Option(None, help="Named color theme."),
    transparent: Optional[bool] = typer.Option(
        None, "--transparent/--opaque", help="Transparent background.",
    ),
    width: Optional[float] = typer.Option(None, help="Rendered width in px."),
) -> None:
    """Render a umli script to SVG."""
    settings: Settings = ctx.obj
    options = RenderOptions(
        theme=theme or settings.theme,
        font=settings.font,
        transparent=settings.transparent if transparent is None else transparent,
        output_width=width or settings.output_width,
    )
    text = _read(input_path)
    try:
        svg = render_umli(text, options)
    except (UmliError, ValueError) as err:
        console.print(f"[red]{input_path}:[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err

    if output is None:
        typer.echo(svg)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(svg, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", output, len(svg))
    console.print(f"[green]Wrote[/] {output}")


@app.command("check")
def check(
    input_path: Path = typer.Argument(..., help="umli script to check."),
) -> None:
    """Parse a umli script and summarise its statements."""
    text = _read(input_path)
    try:
        model = parse(text)
    except UmliError as err:
        console.print(f"[red]{input_path}:[/] {escape(str(err))}")
        raise typer.Exit(code=1) from err

    table = Table(title=str(input_path))
    table.add_column("Keyword")
    table.add_column("Lifelines")
    table.add_column("Label")
    for s in model.statements:
        lanes = s.lifeline_name or "".join(s.referenced_lifelines)
        table.add_row(s.keyword, lanes, escape(" | ".join(s.label_segments)))
    console.print(table)
    console.print(
        f"[green]OK[/] {len(model.statements)} statements, "
        f"{len(model.lifeline_statements())} lifelines"
    )
