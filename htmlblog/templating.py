"""Jinja2 environment shared by the post and index renderers."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

from . import config

env = Environment(
    loader=PackageLoader("htmlblog", "templates"),
    autoescape=select_autoescape(default=True, default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
env.globals.update(
    site_author=config.SITE_AUTHOR,
    site_host=config.SITE_HOST,
    blog_url=config.BLOG_URL,
)


def render(template_name: str, **context) -> str:
    return env.get_template(template_name).render(**context)
