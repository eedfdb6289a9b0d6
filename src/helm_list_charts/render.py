"""Turn a parsed index into aligned table lines."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from helm_list_charts.config import DESCRIPTION_MAX_CHARS
from helm_list_charts.errors import ChartNotFoundError, NoChartsError
from helm_list_charts.models import HEADER, UNSPECIFIED, ChartRow, ChartVersion, IndexFile
from helm_list_charts.utils.dates import format_created
from helm_list_charts.utils.text import align_columns, clean_cell, ellipsize
from helm_list_charts.utils.versions import sort_versions

LOGGER = logging.getLogger(__name__)


def _same(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def _or_unspecified(value: str | None) -> str:
    return UNSPECIFIED if value is None else clean_cell(value)


def filter_entries(
    index: IndexFile, chart: str | None = None
) -> List[Tuple[str, Sequence[ChartVersion]]]:
    """Return ``(name, versions)`` pairs, optionally narrowed to one chart name.

    Raises:
        ChartNotFoundError: if ``chart`` is given and no entry has that name.
    """
    entries = list(index.entries.items())
    if chart is None:
        return entries

    matched = [(name, versions) for name, versions in entries if _same(name, chart)]
    if not matched:
        raise ChartNotFoundError(chart)
    return matched


def filter_versions(
    versions: Iterable[ChartVersion], chart_type: str | None = None
) -> List[ChartVersion]:
    """Keep versions whose ``type`` matches ``chart_type``, ignoring case."""
    if chart_type is None:
        return list(versions)
    return [
        version
        for version in versions
        if version.chart_type is not None and _same(version.chart_type, chart_type)
    ]


def format_row(
    chart: str,
    version: ChartVersion,
    *,
    description_max_chars: int = DESCRIPTION_MAX_CHARS,
) -> ChartRow:
    return ChartRow(
        chart=clean_cell(chart),
        chart_type=_or_unspecified(version.chart_type),
        version=clean_cell(version.version),
        description=ellipsize(clean_cell(version.description or ""), description_max_chars),
        app_version=_or_unspecified(version.app_version),
        created=clean_cell(format_created(version.created)),
        kube_version=_or_unspecified(version.kube_version),
    )


def build_rows(
    chart: str,
    versions: Sequence[ChartVersion],
    *,
    description_max_chars: int = DESCRIPTION_MAX_CHARS,
) -> List[ChartRow]:
    """Format the versions of one chart, newest first."""
    return [
        format_row(chart, version, description_max_chars=description_max_chars)
        for version in sort_versions(versions)
    ]


def render_table(
    index: IndexFile,
    *,
    chart: str | None = None,
    chart_type: str | None = None,
    description_max_chars: int = DESCRIPTION_MAX_CHARS,
) -> List[str]:
    """Render the header and one aligned line per matching chart version.

    Raises:
        ChartNotFoundError: if ``chart`` matches no entry.
        NoChartsError: if no version survives the filters.
    """
    rows: List[ChartRow] = []
    for name, versions in filter_entries(index, chart):
        kept = filter_versions(versions, chart_type)
        if not kept:
            LOGGER.debug("Skipping %s: no versions of type %r", name, chart_type)
            continue
        rows.extend(build_rows(name, kept, description_max_chars=description_max_chars))

    if not rows:
        raise NoChartsError()

    LOGGER.debug("Rendering %d rows", len(rows))
    return align_columns([HEADER, *(row.cells() for row in rows)])
