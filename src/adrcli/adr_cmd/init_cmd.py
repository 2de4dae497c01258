"""Click command for initializing the ADR directory."""

import os

import click

from adrcli.adr_cmd._helpers import with_error_handling
from adrcli.config import DEFAULT_ADR_DIR, AdrConfig, init_config_file


@click.command("init")
@click.option("--dir", "adr_dir", default=DEFAULT_ADR_DIR, show_default=True,
              help="Directory that holds the ADR files.")
def init_cmd(adr_dir):
    """Initialize the ADR directory."""
    with with_error_handling():
        config = AdrConfig(dir=adr_dir)
        init_config_file(config)
        os.makedirs(config.abs_dir, exist_ok=True)
    click.echo(f"Initialized ADR dir to {adr_dir}.")
