"""Click command for recording a status change on an ADR."""

import re

import click

from adrcli.adr_cmd._helpers import today, with_error_handling
from adrcli.adr_dir.adr_files import append_status, find_adr_file
from adrcli.config import read_config
from adrcli.record.record import StatusEntry

_DATE_RE = re.compile(r'^\d+-\d+-\d+$')
_STATUS_RE = re.compile(r'^\w+$')
_LINK_RE = re.compile(r'^\[.*\]\(.*\)$')


def _validate_date(_ctx, _param, value):
    if value is not None and not _DATE_RE.match(value):
        raise click.BadParameter("expected YYYY-MM-DD")
    return value


def _validate_link(_ctx, _param, value):
    if value is not None and not _LINK_RE.match(value):
        raise click.BadParameter("expected a markdown link like '[ADR 3](0003-foo.md)'")
    return value


def _validate_status(_ctx, _param, value):
    if not _STATUS_RE.match(value):
        raise click.BadParameter("status must be a single word")
    return value


@click.command("update")
@click.argument("index", type=int)
@click.argument("status", callback=_validate_status)
@click.option("--link", default=None, callback=_validate_link,
              help="Markdown link, e.g. '[ADR 3](0003-foo.md)'.")
@click.option("--date", "status_date", default=None, callback=_validate_date,
              help="Date of the status change (default: today).")
def update_cmd(index, status, link, status_date):
    """Append STATUS to the status history of ADR INDEX."""
    with with_error_handling():
        config = read_config()
        path = find_adr_file(config.abs_dir, index)
        entry = StatusEntry(date=status_date or today(), status=status, link=link)
        record = append_status(path, entry)
    click.echo(record.summary())
