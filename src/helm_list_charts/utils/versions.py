"""Version ordering with a semantic-version preference."""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, List

import semver

from helm_list_charts.models import ChartVersion

LOGGER = logging.getLogger(__name__)


def parse_semver(text: str) -> semver.Version | None:
    """Return the parsed semantic version, or ``None`` if ``text`` is not one."""
    try:
        return semver.Version.parse(text)
    except (ValueError, TypeError):
        return None


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings in ascending order.

    Semantic versions compare by precedence. When either side is not a valid
    semantic version the raw strings are compared instead.
    """
    left_ver = parse_semver(left)
    right_ver = parse_semver(right)
    if left_ver is not None and right_ver is not None:
        return left_ver.compare(right_ver)

    return (left > right) - (left < right)


def sort_versions(versions: Iterable[ChartVersion]) -> List[ChartVersion]:
    """Return ``versions`` newest first."""
    versions = list(versions)
    loose = [v.version for v in versions if parse_semver(v.version) is None]
    if loose:
        LOGGER.debug("Ordering non-semantic versions as plain strings: %s", ", ".join(loose))
    return sorted(
        versions,
        key=cmp_to_key(lambda a, b: compare_versions(a.version, b.version)),
        reverse=True,
    )
