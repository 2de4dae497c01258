"""Top-level Click group for the adr CLI."""

import logging

import click

from adrcli.adr_cmd.init_cmd import init_cmd
from adrcli.adr_cmd.list_cmd import list_cmd
from adrcli.adr_cmd.new_cmd import new_cmd
from adrcli.adr_cmd.search_cmd import search_cmd
from adrcli.adr_cmd.update_cmd import update_cmd


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def main(verbose):
    """adr - Architecture Decision Record tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(init_cmd)
main.add_command(new_cmd)
main.add_command(list_cmd)
main.add_command(search_cmd)
main.add_command(update_cmd)
