"""CLI entry point for recent."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from typer.core import TyperCommand

from recent_core.config import RecentConfig, build_config
from recent_core.matcher import Matcher
from recent_core.output import create_sink

app = typer.Typer(
    name="recent",
    help="List recently modified files.",
    add_completion=False,
)

err_console = Console(stderr=True, soft_wrap=True, highlight=False)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _RecentCommand(TyperCommand):
    """Accepts `-no/`, which click cannot register, as `--no-slash`."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        if "-no/" in args:
            end = args.index("--") if "--" in args else len(args)
            args = [
                "--no-slash" if i < end and arg == "-no/" else arg
                for i, arg in enumerate(args)
            ]
        return super().parse_args(ctx, args)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _report(err: OSError) -> None:
    err_console.print(f"[red]{escape(str(err))}[/red]")


def _show_config(cfg: RecentConfig) -> None:
    data = cfg.model_dump(mode="json")
    data["recent"] = str(cfg.recent)
    rprint(Syntax(yaml.dump(data, default_flow_style=False, sort_keys=False), "yaml"))


@app.command(cls=_RecentCommand)
def recent(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files to check; directories are searched one level deep", show_default=False),
    ] = None,
    minutes: Annotated[int, typer.Option("-min", "--minutes", min=0, help="Minutes (60 seconds)")] = 0,
    hours: Annotated[int, typer.Option("-h", "--hours", min=0, help="Hours (60 minutes)")] = 0,
    days: Annotated[int, typer.Option("-d", "--days", min=0, help="Days (24 hours)")] = 0,
    months: Annotated[int, typer.Option("-m", "--months", min=0, help="Months (30 days)")] = 0,
    years: Annotated[int, typer.Option("-y", "--years", min=0, help="Years (365 days)")] = 0,
    invert: Annotated[bool, typer.Option("-v", "--invert", help="Invert matches")] = False,
    include_dots: Annotated[bool, typer.Option("-.", "--dots", help="Include dot files")] = False,
    no_slash: Annotated[
        bool, typer.Option("--no-slash", help="Do not print / after directory names (also -no/)")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("-q", "--quiet", help="Print nothing, exit with 1 if no files are recent")
    ] = False,
    print0: Annotated[
        bool,
        typer.Option("-print0", "--print0", help="Print files separated by null instead of newline"),
    ] = False,
    log_level: Annotated[
        str, typer.Option("--log-level", help="debug, info, warn or error")
    ] = "warn",
    show_config: Annotated[
        bool, typer.Option("--show-config", help="Print the resolved configuration and exit")
    ] = False,
) -> None:
    """List files modified within the time window (default: the last day).

    Time options add together, so -d 1 -h 12 is a day and a half. With no
    PATHS the current directory is searched, skipping dot files unless -. is
    given. A dot file named explicitly is always checked.
    """
    try:
        cfg = build_config(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            invert=invert,
            include_dots=include_dots,
            no_slash=no_slash,
            quiet=quiet,
            print0=print0,
            log_level=log_level,
        )
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging(cfg.log_level)

    if show_config:
        _show_config(cfg)
        return

    sink = create_sink(cfg.output)
    matcher = Matcher.from_config(cfg, out=sink, log=_report)

    if paths:
        matcher.match(paths)
    else:
        matcher.read_dir(".")

    if cfg.output == "quiet" and sink.count == 0:
        raise typer.Exit(1)
