"""Click command for searching ADR contents with a regular expression."""

import re

import click

from adrcli.adr_cmd._helpers import echo_scan_result, with_error_handling
from adrcli.adr_dir.adr_files import scan_records
from adrcli.config import read_config


def _split_tags(tags):
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


@click.command("search")
@click.argument("pattern")
@click.option("--tags", "-t", default=None,
              help="Comma-separated tags every result must carry.")
def search_cmd(pattern, tags):
    """Search for ADRs whose text matches the regex PATTERN."""
    with with_error_handling():
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid search pattern {pattern!r}: {e}") from e
        config = read_config()
        result = scan_records(config.abs_dir, regex)
    wanted = _split_tags(tags)
    if wanted:
        result.records = [s for s in result.records if s.record.has_tags(wanted)]
    echo_scan_result(result)
