"""Decide where the rendered table goes and write it there."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import List, Mapping, Sequence, TextIO

import typer

from helm_list_charts.config import PAGER_THRESHOLD, AppConfig
from helm_list_charts.errors import PagerError

LOGGER = logging.getLogger(__name__)


def pager_disabled(
    no_pager: bool = False,
    environ: Mapping[str, str] | None = None,
    config: AppConfig | None = None,
) -> bool:
    """Paging is off when requested by flag or by any no-pager variable."""
    if no_pager:
        return True
    environ = os.environ if environ is None else environ
    config = config or AppConfig()
    return any(name in environ for name in config.no_pager_env_vars)


def should_page(line_count: int, *, disabled: bool, threshold: int = PAGER_THRESHOLD) -> bool:
    return not disabled and line_count >= threshold


def pager_command(
    environ: Mapping[str, str] | None = None, config: AppConfig | None = None
) -> List[str]:
    """Return the pager argv from ``$PAGER``, or the default pager.

    Raises:
        PagerError: if ``$PAGER`` cannot be split into arguments.
    """
    environ = os.environ if environ is None else environ
    config = config or AppConfig()
    raw = environ.get(config.pager_env_var, "")
    try:
        command = shlex.split(raw)
    except ValueError as exc:
        raise PagerError(f"Invalid ${config.pager_env_var} {raw!r}: {exc}") from exc
    return command or [config.default_pager]


def run_pager(text: str, command: Sequence[str]) -> None:
    """Feed ``text`` to the pager and wait for it to exit.

    Raises:
        PagerError: if the pager cannot be started, stops reading its input,
            or exits with a non-zero status.
    """
    LOGGER.debug("Paging output through %s", command)
    try:
        process = subprocess.Popen(list(command), stdin=subprocess.PIPE, encoding="utf-8")
    except OSError as exc:
        raise PagerError(f"Failed to spawn pager process {command[0]!r}: {exc}") from exc

    # The pager is always waited for, even when writing fails part way.
    try:
        try:
            process.stdin.write(text)
        finally:
            process.stdin.close()
    except OSError as exc:
        raise PagerError(f"Failed to write output to pager: {exc}") from exc
    finally:
        returncode = process.wait()

    if returncode != 0:
        raise PagerError(f"Pager process exited with status {returncode}")


def emit(
    lines: Sequence[str],
    *,
    disabled: bool = False,
    command: Sequence[str] | None = None,
    threshold: int = PAGER_THRESHOLD,
    stream: TextIO | None = None,
    config: AppConfig | None = None,
) -> bool:
    """Write ``lines`` to the pager or to ``stream``.

    The pager command is only resolved when paging, from ``command`` or
    else ``$PAGER``. Returns ``True`` when the pager was used.
    """
    text = "".join(f"{line}\n" for line in lines)
    if should_page(len(lines), disabled=disabled, threshold=threshold):
        run_pager(text, command or pager_command(config=config))
        return True

    LOGGER.debug("Writing %d lines directly", len(lines))
    typer.echo(text, nl=False, file=stream)
    return False
