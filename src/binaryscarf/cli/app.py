"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from binaryscarf.errors import ConfigError, ScarfError
from binaryscarf.version import version


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="binaryscarf",
        help="Turn text into a binary scarf knitting pattern (PNG).",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def _fail(message: str) -> None:
        err_console.print(f"[bold red]error:[/] {escape(message)}", soft_wrap=True)

    def _show_version(value: bool) -> None:
        if value:
            typer.echo(version())
            raise typer.Exit()

    @app.command()
    def generate(
        ctx: typer.Context,
        textfile: Annotated[Optional[Path], typer.Argument(help="Text file to encode; reads stdin when omitted", show_default=False)] = None,
        out: Annotated[str, typer.Option("--out", "-o", help="Filename for resulting PNG image")] = "out.png",
        color_a: Annotated[str, typer.Option("--color-a", help="Background and '0' bit color in 24-bit hexadecimal notation")] = "0xffffff",
        color_b: Annotated[str, typer.Option("--color-b", help="Foreground, '1' bit and border color in 24-bit hexadecimal notation")] = "0x647384",
        stitch_width: Annotated[int, typer.Option("--stitch-width", help="Width of a single stitch, in pixels: [1..n]")] = 2,
        stitch_height: Annotated[int, typer.Option("--stitch-height", help="Height of a single stitch, in pixels: [1..n]")] = 3,
        columns: Annotated[int, typer.Option("--columns", help="Number of 7-bit columns to generate: [1..n]")] = 3,
        spacing: Annotated[int, typer.Option("--spacing", help="Number of stitches to leave blank between columns: [0..n]")] = 2,
        border: Annotated[int, typer.Option("--border", help="Optional decorative n-row border at top and bottom of work: [0..n]")] = 2,
        repeat: Annotated[int, typer.Option("--repeat", help="Number of times to repeat the input text: [1..n]")] = 1,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log layout and per-character details")] = False,
        show_version: Annotated[bool, typer.Option("--version", help="Display version information", callback=_show_version, is_eager=True)] = False,
    ) -> None:
        """Encode text as rows of 7-bit stitches and save the pattern as PNG."""
        from binaryscarf.core.config import ScarfConfig
        from binaryscarf.core.pattern import ScarfPattern
        from binaryscarf.io.reader import read_input
        from binaryscarf.logging_setup import configure_logging

        logger = configure_logging(verbose)

        try:
            if repeat < 1:
                raise ConfigError(f"repeat must be at least 1, got {repeat}")
            config = ScarfConfig.from_options(
                output=out,
                columns=columns,
                spacing=spacing,
                border=border,
                stitch_width=stitch_width,
                stitch_height=stitch_height,
                color_a=color_a,
                color_b=color_b,
            )
        except ConfigError as err:
            _fail(str(err))
            typer.echo(ctx.get_usage(), err=True)
            typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
            raise typer.Exit(1)
        except ScarfError as err:
            _fail(str(err))
            raise typer.Exit(1)

        try:
            data = read_input(textfile)
            pattern = ScarfPattern.from_text(data, config, repeat)
            path = pattern.save()
        except (ScarfError, OSError) as err:
            logger.debug("run failed", exc_info=True)
            _fail(str(err))
            raise typer.Exit(1)

        width, height = pattern.size
        console.print(
            f"[green]Wrote {escape(str(path))}[/] ({width}x{height} px, "
            f"{len(pattern.chars)} characters in {pattern.column_count} columns)",
            soft_wrap=True,
        )

    return app
