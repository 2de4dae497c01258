"""Shared functions used by the ADR command modules."""

import sys
from contextlib import contextmanager
from datetime import date

import click

from adrcli.adr_dir.adr_files import ScanResult


def today() -> str:
    return date.today().isoformat()


@contextmanager
def with_error_handling():
    """Report expected failures as a single line on stderr and exit 1."""
    try:
        yield
    except (ValueError, OSError, RuntimeError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def echo_scan_result(result: ScanResult) -> None:
    """Print each record's summary and each per-file error.

    Exits 1 after printing if any file failed.
    """
    for scanned in result.records:
        click.echo(scanned.record.summary())
    for error in result.errors:
        click.echo(str(error), err=True)
    if result.errors:
        sys.exit(1)
