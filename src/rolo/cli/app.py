"""Typer CLI application: columns, table and list commands."""

import logging
from typing import Annotated, Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rolo.errors import InvalidWidth, RoloError
from rolo.layout.config import DEFAULT_WIDTH, ListAlignment, ListStyle

logger = logging.getLogger(__name__)

TAGLINE = "The spiritual love child of pr, paste, and col"

MAX_COLUMNS = 10


def _parse_width(value: Optional[str]) -> Optional[int]:
    """Typer callback validating --width."""
    if value is None:
        return None
    from rolo.terminal import validate_width
    try:
        return validate_width(value)
    except InvalidWidth as e:
        raise typer.BadParameter(str(e)) from None


def _unescape_delimiter(value: Optional[str]) -> Optional[str]:
    """Typer callback turning a literal backslash-t from the shell into a TAB."""
    if value is None:
        return None
    return value.replace("\\t", "\t")


def resolve_width(width: Optional[int], fit: bool) -> int:
    """
    Pick the layout width.

    An explicit width always wins. Otherwise fit mode sizes output to the
    terminal, and --no-fit uses the fixed default.
    """
    if width is not None:
        return width
    if fit:
        from rolo.terminal import get_terminal_width
        return get_terminal_width()
    return DEFAULT_WIDTH


def setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


WidthOption = Annotated[
    Optional[str],
    typer.Option("--width", "-w", callback=_parse_width, help="Output width (10-200)"),
]
FitOption = Annotated[
    bool,
    typer.Option("--fit/--no-fit", help="Size to the terminal when --width is not given"),
]
ColsOption = Annotated[
    int,
    typer.Option("--cols", "-c", min=1, max=MAX_COLUMNS, help="Number of columns (1-10)"),
]
GapOption = Annotated[int, typer.Option("--gap", "-g", min=0, help="Spaces between columns")]
ItemDelimOption = Annotated[
    Optional[str],
    typer.Option("--delim", "-d", callback=_unescape_delimiter,
                 help="Split lines into items by this delimiter"),
]


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="rolo",
        help=f"Text layout tool for Unix pipelines. {TAGLINE}.",
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    def run(render: Callable[[str], str]) -> None:
        """Read stdin, format it, write stdout; report rolo errors on stderr."""
        from rolo.stream import read_input, write_output

        try:
            text = read_input()
            write_output(render(text))
        except RoloError as e:
            logger.debug("Formatting failed", exc_info=True)
            err_console.print(f"[red]Error:[/] {escape(str(e))}")
            raise typer.Exit(e.exit_code)

    def run_columns(cols: int, gap: int, delim: Optional[str], width: Optional[int], fit: bool) -> None:
        from rolo.layout import LayoutConfig, format_columns

        config = LayoutConfig(width=resolve_width(width, fit), gap=gap)
        logger.debug("Columns: cols=%d width=%d gap=%d", cols, config.width, config.gap)
        run(lambda text: format_columns(text, cols, config, delimiter=delim))

    def version_callback(value: bool) -> None:
        if value:
            from rolo import __version__
            print(f"rolo v{__version__}")
            print(TAGLINE)
            raise typer.Exit()

    @app.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        cols: ColsOption = 2,
        gap: GapOption = 2,
        delim: ItemDelimOption = None,
        width: WidthOption = None,
        fit: FitOption = True,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
        version: Annotated[
            Optional[bool],
            typer.Option("--version", "-V", callback=version_callback, is_eager=True,
                         help="Show version information"),
        ] = None,
    ) -> None:
        """
        Format stdin into columns, tables, or lists.

        Without a command, input is arranged into columns:
        [bold]ls | rolo --cols 3 --width 120[/]
        """
        setup_logging(verbose, err_console)
        if ctx.invoked_subcommand is None:
            run_columns(cols, gap, delim, width, fit)

    @app.command()
    def columns(
        cols: ColsOption = 2,
        gap: GapOption = 2,
        delim: ItemDelimOption = None,
        width: WidthOption = None,
        fit: FitOption = True,
    ) -> None:
        """Arrange items into columns, filling down each column first."""
        run_columns(cols, gap, delim, width, fit)

    @app.command()
    def table(
        delim: Annotated[str, typer.Option("--delim", "-d", callback=_unescape_delimiter, help="Cell delimiter")] = "\t",
        width: WidthOption = None,
        fit: FitOption = True,
    ) -> None:
        """Format delimited rows as a table, first row as header."""
        from rolo.layout import format_table

        max_width = resolve_width(width, fit)
        logger.debug("Table: delimiter=%r max_width=%d", delim, max_width)
        run(lambda text: format_table(text, delim, max_width))

    @app.command("list")
    def list_command(
        line_numbers: Annotated[bool, typer.Option("--line-numbers", "-n",
                                                   help="Number each line")] = False,
        style: Annotated[Optional[ListStyle], typer.Option("--style", "-s", help="Marker style")] = None,
        align: Annotated[ListAlignment, typer.Option("--align", "-a", help="Content alignment")] = ListAlignment.LEFT,
        width: WidthOption = None,
        fit: FitOption = True,
    ) -> None:
        """Format lines as a list with optional markers and alignment."""
        from rolo.layout import ListConfig, format_list

        config = ListConfig(
            width=resolve_width(width, fit),
            line_numbers=line_numbers,
            list_style=style,
            alignment=align,
        )
        logger.debug("List: %s", config)
        run(lambda text: format_list(text, config))

    return app
