"""Command line interface for helm-list-charts."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from helm_list_charts import __version__
from helm_list_charts.config import AppConfig
from helm_list_charts.errors import ChartNotFoundError, HelmListChartsError
from helm_list_charts.index.fetcher import fetch_index
from helm_list_charts.output import emit, pager_disabled
from helm_list_charts.render import render_table


console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
app = typer.Typer(
    help="List the charts published in a Helm chart repository.",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"helm-list-charts {__version__}")
        raise typer.Exit()


@app.command()
def main(
    source: str = typer.Option(
        ...,
        "--source",
        help="Chart repository URL (e.g. https://bitnami-labs.github.io/sealed-secrets)",
    ),
    chart: Optional[str] = typer.Option(
        None, "--chart", help="Only list this chart (case insensitive)"
    ),
    chart_type: Optional[str] = typer.Option(
        None, "--type", help="Only list charts of this type, e.g. application or library"
    ),
    no_pager: bool = typer.Option(
        False,
        "--no-pager",
        help=f"Disable the pager (used for outputs of {AppConfig().pager_threshold} lines or more)",
    ),
    timeout: float = typer.Option(AppConfig().timeout, help="HTTP timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """List every version of every chart in the repository index, newest first."""
    _setup_logging(verbose)
    try:
        config = AppConfig(timeout=timeout)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        index = fetch_index(source, timeout=config.timeout)
        lines = render_table(
            index,
            chart=chart,
            chart_type=chart_type,
            description_max_chars=config.description_max_chars,
        )
    except ChartNotFoundError as exc:
        console.print(escape(str(exc)), highlight=False)
        return
    except HelmListChartsError as exc:
        _fail(exc)

    try:
        emit(
            lines,
            disabled=pager_disabled(no_pager, config=config),
            config=config,
            threshold=config.pager_threshold,
        )
    except HelmListChartsError as exc:
        _fail(exc)
