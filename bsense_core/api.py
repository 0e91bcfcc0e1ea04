"""
Public surface of the ingestion and analytics core.

    parse(format, raw)            -> list[Transaction]   (never raises)
    categorize(description, merchant) -> category tag
    generate_report(transactions) -> Report              (never raises)

None of these touch the network, the filesystem or the environment.
"""

from adapters.registry import infer_format
from analytics.report import generate_report
from analytics.summary import render_summary
from categorizer.rules import categorize
from pipeline.ingest import parse

__all__ = [
    "parse",
    "categorize",
    "generate_report",
    "infer_format",
    "render_summary",
]
