"""Render the contents of a new ADR file."""

from adrcli.record.slug import normalize
from adrcli.templates.template_renderer import render_template

ADR_TEMPLATE = "adr.md.j2"
INITIAL_STATUS = "Proposed"


def render(title: str, index: int, date: str) -> bytes:
    """Fill the bundled ADR template. The caller supplies today's date."""
    text = render_template(
        ADR_TEMPLATE,
        package=__package__,
        title=title,
        index=index,
        date=date,
        status=INITIAL_STATUS,
    )
    return text.encode("utf-8")


def filename_for(title: str, index: int) -> str:
    return f"{index:04d}-{normalize(title)}.md"
