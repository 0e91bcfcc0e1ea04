# cli/billsense.py
# Command-line front end for BillSense.
# - parse:      statement file -> categorized transactions
# - report:     statement file -> spending report
# - categorize: free text -> category tag
#
# Examples:
#   python -m cli.billsense parse data/sample_txns.csv --json
#   python -m cli.billsense report data/statement.xlsx
#   python -m cli.billsense categorize "Starbucks Coffee"
#
# Exit codes: 0 ok (empty results included), 2 unknown format, 3 missing config.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import click

from adapters.registry import FORMATS, infer_format
from analytics.report import generate_report
from analytics.summary import render_summary
from bsense_core.models import Transaction
from bsense_utils.logging_setup import resolve_level, setup_logging
from categorizer.service import CategorizerService
from config.loader import load_config, resolve_path
from pipeline.ingest import parse

LOGGER = logging.getLogger("billsense")
SCHEMA_VERSION = "1.0"


class _Context:
    def __init__(self, cfg: dict, categorizer: CategorizerService):
        self.cfg = cfg
        self.categorizer = categorizer

    @property
    def delimiter(self) -> str:
        return self.cfg["ingest"]["delimiter"]

    @property
    def currency(self) -> str:
        return self.cfg["report"]["currency"]


def _load_transactions(obj: _Context, path: str, fmt: Optional[str]) -> List[Transaction]:
    tag = (fmt or infer_format(path) or "").lower()
    if tag not in FORMATS:
        raise click.UsageError(
            f"Unsupported file type {tag or '(none)'!r}; use --format "
            f"({', '.join(sorted(FORMATS))})"
        )
    raw = Path(path).read_bytes()
    return parse(tag, raw, categorizer=obj.categorizer, delimiter=obj.delimiter)


def _print_human(txns: List[Transaction], currency: str) -> None:
    for t in txns:
        click.echo("-" * 60)
        click.echo(f"Date       : {t.date}")
        click.echo(f"Merchant   : {t.merchant}")
        click.echo(f"Amount     : {t.amount:.2f} {currency}")
        click.echo(f"Category   : {t.category}")
        if t.description and t.description != t.merchant:
            click.echo(f"Description: {t.description}")
    click.echo(f"{len(txns)} transaction(s)")


def _print_json(txns: List[Transaction]) -> None:
    payload = {
        "schema_version": SCHEMA_VERSION,
        "results": [t.to_dict() for t in txns],
    }
    click.echo(json.dumps(payload, ensure_ascii=True))


def _print_jsonl(txns: List[Transaction]) -> None:
    for t in txns:
        rec = {"schema_version": SCHEMA_VERSION, "result": t.to_dict()}
        click.echo(json.dumps(rec, ensure_ascii=True))


# ----------------------------- CLI -----------------------------
@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="config.toml to use (default: repo-root config.toml).",
)
@click.option("--rules", default=None, help="Category rules YAML (overrides config).")
@click.option("--quiet", is_flag=True, help="Only warnings/errors.")
@click.option("--verbose", is_flag=True, help="Verbose logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    rules: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """BillSense statement ingestion and spending analytics."""
    try:
        cfg = load_config(Path(config_path) if config_path else None)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(3)

    setup_logging(resolve_level(cfg["logging"]["level"], quiet=quiet, verbose=verbose))

    rules_path = resolve_path(rules or cfg["categorizer"].get("rules"))
    ctx.obj = _Context(cfg, CategorizerService(str(rules_path) if rules_path else None))


@cli.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--format", "fmt", default=None, help="Format tag; inferred from extension.")
@click.option("--json", "as_json", is_flag=True, help="Output one JSON document.")
@click.option("--jsonl", is_flag=True, help="Stream JSON lines (overrides --json).")
@click.pass_obj
def parse_cmd(obj: _Context, path: str, fmt: Optional[str], as_json: bool, jsonl: bool) -> None:
    """Parse a statement export into categorized transactions."""
    txns = _load_transactions(obj, path, fmt)
    if not txns:
        LOGGER.warning("No transactions found in %s", path)

    if jsonl:
        _print_jsonl(txns)
    elif as_json:
        _print_json(txns)
    else:
        _print_human(txns, obj.currency)


@cli.command("report")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--format", "fmt", default=None, help="Format tag; inferred from extension.")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON.")
@click.pass_obj
def report_cmd(obj: _Context, path: str, fmt: Optional[str], as_json: bool) -> None:
    """Build the spending report for a statement export."""
    report = generate_report(_load_transactions(obj, path, fmt))
    if as_json:
        click.echo(json.dumps(report.to_dict(), ensure_ascii=True, indent=2))
    else:
        click.echo(render_summary(report, currency=obj.currency))


@cli.command("categorize")
@click.argument("description")
@click.option("--merchant", default="", help="Merchant name, matched with the text.")
@click.pass_obj
def categorize_cmd(obj: _Context, description: str, merchant: str) -> None:
    """Print the category tag the rule table assigns to DESCRIPTION."""
    click.echo(obj.categorizer.categorize(description, merchant))


def main() -> None:
    cli(prog_name="billsense")


if __name__ == "__main__":
    main()
