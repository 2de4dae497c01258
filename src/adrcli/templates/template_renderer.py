"""Render Jinja2 templates shipped in a caller's templates subpackage."""

import importlib.resources

import jinja2

# Template variables the caller forgets raise instead of rendering as "".
_ENVIRONMENT = jinja2.Environment(
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render ``<package>.templates/<template_name>`` with kwargs.

    Raises:
        FileNotFoundError: If the template does not exist
        jinja2.UndefinedError: If the template uses a variable not in kwargs
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return _ENVIRONMENT.from_string(source).render(**kwargs)
