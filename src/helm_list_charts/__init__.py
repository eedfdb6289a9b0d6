"""List the chart versions published in a Helm repository index."""

__version__ = "1.0.0"
