"""Core data models for repository indexes and rendered rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

UNSPECIFIED = "<unspecified>"

HEADER: Tuple[str, ...] = (
    "CHART",
    "TYPE",
    "VERSION",
    "DESCRIPTION",
    "APP VERSION",
    "CREATED",
    "KUBE VERSION",
)


@dataclass(frozen=True, slots=True)
class ChartVersion:
    """One published version of a chart as listed in ``index.yaml``."""

    version: str
    description: str | None = None
    app_version: str | None = None
    created: str | None = None
    kube_version: str | None = None
    chart_type: str | None = None


@dataclass(frozen=True, slots=True)
class IndexFile:
    """Parsed repository index, keyed by chart name in document order."""

    entries: Dict[str, Tuple[ChartVersion, ...]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def version_count(self) -> int:
        return sum(len(versions) for versions in self.entries.values())


@dataclass(frozen=True, slots=True)
class ChartRow:
    """Display-ready cells for a single chart version."""

    chart: str
    chart_type: str
    version: str
    description: str
    app_version: str
    created: str
    kube_version: str

    def cells(self) -> Tuple[str, ...]:
        return (
            self.chart,
            self.chart_type,
            self.version,
            self.description,
            self.app_version,
            self.created,
            self.kube_version,
        )
