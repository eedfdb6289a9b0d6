"""Parsing of repository ``index.yaml`` documents."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Mapping, Tuple

import yaml

from helm_list_charts.errors import ParseError
from helm_list_charts.models import ChartVersion, IndexFile

LOGGER = logging.getLogger(__name__)

# index.yaml key -> ChartVersion attribute
OPTIONAL_FIELDS = {
    "description": "description",
    "appVersion": "app_version",
    "created": "created",
    "kubeVersion": "kube_version",
    "type": "chart_type",
}

_KEPT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")


class IndexLoader(yaml.SafeLoader):
    """Safe loader that leaves plain scalars as written.

    Only nulls and merge keys are resolved, so `1.10`, `010` or `yes` stay
    text instead of turning into numbers and booleans.
    """


IndexLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _scalar(value: Any, where: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ParseError(f"{where}: expected a string, got {type(value).__name__}")


def parse_version(raw: Any, where: str) -> ChartVersion:
    """Build a :class:`ChartVersion` from one entry of a chart's version list."""
    if not isinstance(raw, Mapping):
        raise ParseError(f"{where}: expected a mapping, got {type(raw).__name__}")

    version = _scalar(raw.get("version"), f"{where}.version")
    if version is None:
        raise ParseError(f"{where}: missing field `version`")

    optional = {
        attr: _scalar(raw.get(key), f"{where}.{key}")
        for key, attr in OPTIONAL_FIELDS.items()
    }
    return ChartVersion(version=version, **optional)


def parse_index(text: str) -> IndexFile:
    """Parse the YAML text of a repository index.

    Raises:
        ParseError: if the text is not YAML or ``entries`` is not a mapping
            of chart names to lists of version mappings.
    """
    try:
        document = yaml.load(text, Loader=IndexLoader)
    except yaml.YAMLError as exc:
        raise ParseError(f"Failed to parse YAML index file: {exc}") from exc

    if not isinstance(document, Mapping):
        kind = "an empty document" if document is None else type(document).__name__
        raise ParseError(f"Failed to parse YAML index file: expected a mapping, got {kind}")
    if "entries" not in document:
        raise ParseError("Failed to parse YAML index file: missing field `entries`")

    raw_entries = document["entries"]
    if not isinstance(raw_entries, Mapping):
        raise ParseError(
            "Failed to parse YAML index file: entries: expected a mapping, "
            f"got {type(raw_entries).__name__}"
        )

    entries: Dict[str, Tuple[ChartVersion, ...]] = {}
    for name, raw_versions in raw_entries.items():
        chart = str(name)
        where = f"entries.{chart}"
        if not isinstance(raw_versions, list):
            raise ParseError(
                f"Failed to parse YAML index file: {where}: expected a list, "
                f"got {type(raw_versions).__name__}"
            )
        try:
            entries[chart] = tuple(
                parse_version(raw, f"{where}[{position}]")
                for position, raw in enumerate(raw_versions)
            )
        except ParseError as exc:
            raise ParseError(f"Failed to parse YAML index file: {exc}") from exc

    index = IndexFile(entries=entries)
    LOGGER.debug("Parsed %d charts with %d versions", len(index), index.version_count)
    return index
