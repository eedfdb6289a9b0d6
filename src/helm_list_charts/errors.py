"""Exceptions raised while listing charts."""

from __future__ import annotations


class HelmListChartsError(Exception):
    """Base class for failures that abort a listing."""


class FetchError(HelmListChartsError):
    """The index document could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to GET from URL: {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(HelmListChartsError):
    """The index document does not have the expected structure."""


class NoChartsError(HelmListChartsError):
    """Filtering left nothing to display."""

    def __init__(self) -> None:
        super().__init__("No charts found.")


class PagerError(HelmListChartsError):
    """The pager could not be started, fed or exited with an error."""


class ChartNotFoundError(LookupError):
    """No chart in the index matches the requested name.

    Not a failure: the command reports it and exits successfully.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No charts found for chart name: {name}")
        self.name = name
