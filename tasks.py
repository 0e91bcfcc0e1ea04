# tasks.py
"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv parse --input data/sample_txns.csv [--json]
  inv report --input data/sample_txns.csv [--json]
  inv categorize --text "Starbucks Coffee"
  inv test
"""

from invoke import task
import sys


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


def _billsense(c, *args):
    c.run(f'"{_python()}" -m cli.billsense ' + " ".join(args), pty=False)


@task(
    help={
        "input": "Statement export (csv/tsv/xlsx/xls/pdf)",
        "fmt": "Format tag when the extension is missing or misleading",
        "json": "Emit JSON instead of human-readable text",
    }
)
def parse(c, input, fmt=None, json=False):
    """Parse one statement into categorized transactions."""
    args = ["parse", f'"{input}"']
    if fmt:
        args += ["--format", fmt]
    if json:
        args.append("--json")
    _billsense(c, *args)


@task(
    help={
        "input": "Statement export (csv/tsv/xlsx/xls/pdf)",
        "fmt": "Format tag when the extension is missing or misleading",
        "json": "Emit the report as JSON",
    }
)
def report(c, input, fmt=None, json=False):
    """Print the spending report for one statement."""
    args = ["report", f'"{input}"']
    if fmt:
        args += ["--format", fmt]
    if json:
        args.append("--json")
    _billsense(c, *args)


@task(help={"text": "Description text", "merchant": "Merchant name"})
def categorize(c, text, merchant=""):
    """Show which category the rule table assigns."""
    _billsense(c, "categorize", f'"{text}"', "--merchant", f'"{merchant}"')


@task
def test(c):
    """Run unit tests with pytest."""
    c.run(f'"{_python()}" -m pytest -q', pty=False)
