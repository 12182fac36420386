"""Jinja2 template utilities for LLM prompts."""

from jinja2 import Environment, PackageLoader, select_autoescape


def create_jinja_env() -> Environment:
    """Create Jinja2 environment for LLM templates.

    Loads templates from the scribe.infrastructure.llm templates directory.

    Returns:
        Configured Jinja2 environment.
    """
    return Environment(
        loader=PackageLoader("scribe.infrastructure.llm", "templates"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )
