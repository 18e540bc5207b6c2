"""Request building, response parsing, polylines, URL signing and metrics for mapping web services."""

__version__ = "0.1.0"