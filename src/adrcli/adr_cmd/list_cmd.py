"""Click command for listing ADRs with their current status."""

import click

from adrcli.adr_cmd._helpers import echo_scan_result, with_error_handling
from adrcli.adr_dir.adr_files import scan_records
from adrcli.config import read_config


@click.command("list")
def list_cmd():
    """List ADRs and their status."""
    with with_error_handling():
        config = read_config()
        result = scan_records(config.abs_dir)
    echo_scan_result(result)
