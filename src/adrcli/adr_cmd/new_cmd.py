"""Click command for creating a new ADR file."""

import click

from adrcli.adr_cmd._helpers import today, with_error_handling
from adrcli.adr_dir.adr_files import create_adr_file
from adrcli.config import read_config
from adrcli.editor import launch_editor


@click.command("new")
@click.argument("title", nargs=-1, required=True)
@click.option("--no-edit", is_flag=True, default=False,
              help="Do not open the new file in an editor.")
def new_cmd(title, no_edit):  # noqa: FBT002
    """Create a new ADR file titled TITLE."""
    with with_error_handling():
        config = read_config()
        path = create_adr_file(config.abs_dir, " ".join(title), today())
        click.echo(f"Created ADR: {path}")
        if not no_edit:
            launch_editor(path, config.editors)
