from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import TagCloudConfig, TagCloudSettings, config_stylesheets, load_optional_config
from .errors import PreconditionError
from .font import font_size
from .logging_config import get_console, setup_logging
from .pipeline import TagCloudResult, rank_words, run_tag_cloud


logger = logging.getLogger(__name__)

app = typer.Typer(
    help="tagcloud — render the most frequent words of a text file as an HTML tag cloud",
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tagcloud {__version__}")
        raise typer.Exit()


@app.callback()
def _global_options(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config.toml path (defaults to ./config.toml when present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print version and exit",
    ),
):
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    cfg = load_optional_config(config)
    ctx.obj = {"config": cfg}


def _ctx_config(ctx: typer.Context) -> TagCloudConfig | None:
    if isinstance(getattr(ctx, "obj", None), dict):
        return ctx.obj.get("config")
    return None


def _from_config(cfg: TagCloudConfig | None, *keys: str, types: type | tuple[type, ...] = str) -> bool:
    return cfg is not None and isinstance(cfg.get(*keys), types)


def _fail(msg: str) -> NoReturn:
    get_console().print(f"[red]error:[/red] {escape(msg)}", markup=True, highlight=False)
    raise typer.Exit(code=1)


@app.command()
def generate(
    ctx: typer.Context,
    inp: str | None = typer.Option(None, "--in", help="Input text file"),
    out: Path | None = typer.Option(None, "--out", dir_okay=False, help="Output HTML file"),
    top: str | None = typer.Option(None, "--top", help="Number of words to include in the tag cloud"),
    tie_break: str | None = typer.Option(
        None,
        "--tie-break",
        help="Order among equal counts when selecting: alpha|first-seen",
    ),
    encoding: str | None = typer.Option(None, "--encoding", help="Input text encoding (default utf-8)"),
    json_output: bool = typer.Option(False, "--json", help="Print a JSON summary to stdout"),
):
    """Write the top-N words of a text file as an HTML tag cloud."""
    cfg = _ctx_config(ctx)

    # Anything not given as a flag or in config is asked for interactively.
    if inp is None and not _from_config(cfg, "paths", "input"):
        inp = typer.prompt("Enter name of input file")
    if out is None and not _from_config(cfg, "paths", "output"):
        out = Path(typer.prompt("Enter name of output file"))
    if top is None and not _from_config(cfg, "cloud", "top", types=(int, str)):
        top = typer.prompt("Enter number of words to be included in tag cloud")

    try:
        settings = TagCloudSettings.resolve(
            cfg,
            input_path=inp,
            output_path=out,
            top_n=top,
            tie_break=tie_break,
            encoding=encoding,
        )
    except PreconditionError as e:
        raise typer.BadParameter(str(e), param_hint="--top")
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if settings.output_path is None:
        raise typer.BadParameter("output path is required", param_hint="--out")
    if settings.top_n is None:
        raise typer.BadParameter("word count is required", param_hint="--top")
    logger.debug("generate settings: %s", settings)

    try:
        res = run_tag_cloud(
            inp=settings.input_path,
            out=settings.output_path,
            num=settings.top_n,
            tie_break=settings.tie_break,
            encoding=settings.encoding,
            stylesheets=config_stylesheets(cfg),
            filename=settings.input_name,
        )
    except PreconditionError as e:
        raise typer.BadParameter(str(e), param_hint="--top")
    except (OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    if json_output:
        typer.echo(json.dumps(res.to_dict(), ensure_ascii=False))
        return

    console = Console()
    console.print(Panel("Tag cloud written", title="tagcloud", border_style="green"))
    console.print(f"Wrote {len(res.entries)} words to {escape(str(res.output_path))}")
    console.print(
        f"distinct={res.distinct_words} total={res.total_words} "
        f"largest={res.largest} smallest={res.smallest}"
    )


@app.command()
def words(
    ctx: typer.Context,
    inp: Path | None = typer.Option(None, "--in", dir_okay=False, help="Input text file"),
    top: str | None = typer.Option(None, "--top", help="Top-N words to print (default: all)"),
    tie_break: str | None = typer.Option(
        None,
        "--tie-break",
        help="Order among equal counts when selecting: alpha|first-seen",
    ),
    encoding: str | None = typer.Option(None, "--encoding", help="Input text encoding (default utf-8)"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON report to stdout"),
):
    """Print the top-N words with their counts and font classes."""
    cfg = _ctx_config(ctx)

    try:
        settings = TagCloudSettings.resolve(
            cfg,
            input_path=inp,
            top_n=top,
            tie_break=tie_break,
            encoding=encoding,
        )
    except PreconditionError as e:
        raise typer.BadParameter(str(e), param_hint="--top")
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--in")

    try:
        res = rank_words(
            inp=settings.input_path,
            num=settings.top_n,
            tie_break=settings.tie_break,
            encoding=settings.encoding,
        )
    except PreconditionError as e:
        raise typer.BadParameter(str(e), param_hint="--top")
    except (OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    if json_output:
        typer.echo(json.dumps(res.to_dict(), ensure_ascii=False))
        return

    _print_words(res)


def _print_words(res: TagCloudResult) -> None:
    console = Console()
    table = Table(title=f"Top {res.num} words in {escape(res.input_path.name)}")
    table.add_column("word")
    table.add_column("count", justify="right")
    table.add_column("font", justify="right")
    for e in res.entries:
        table.add_row(e.word, str(e.count), font_size(res.largest, res.smallest, e.count))
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
