"""
Jinja2 integration: the casing and encoding helpers as template filters.

    {{ "first_name" | pascal_case }}      -> FirstName
    {{ author | name_case }}              -> Jean-Claude van Damme
"""

from __future__ import annotations

import logging

import jinja2

from . import casing, data_format, manipulation

logger = logging.getLogger(__name__)

TEMPLATE_FILTERS = {
    "pascal_case": casing.to_pascal_case,
    "camel_case": casing.to_camel_case,
    "kebab_case": casing.to_kebab_case,
    "snake_case": casing.to_snake_case,
    "screaming_snake_case": casing.to_screaming_snake_case,
    "name_case": casing.to_name_case,
    "title_case": casing.to_title_case,
    "sentence_case": casing.to_sentence_case,
    "collapse_whitespace": manipulation.collapse_whitespace,
    "mask": manipulation.mask,
    "wrap_text": manipulation.wrap_text_at,
    "csv_field": data_format.to_csv_field,
    "json_string": data_format.to_json_string,
    "xml_content": data_format.to_xml_content,
    "base64": data_format.to_base64,
    "url_encode": data_format.to_url_encoded,
    "hex": data_format.to_hex,
}


def register_filters(env: jinja2.Environment) -> jinja2.Environment:
    """Add every TEMPLATE_FILTERS entry to env.filters and return env."""
    env.filters.update(TEMPLATE_FILTERS)
    logger.debug("Registered %d text filters on %r", len(TEMPLATE_FILTERS), env)
    return env


def create_environment(loader: jinja2.BaseLoader | None = None) -> jinja2.Environment:
    """Create a Jinja2 environment with block whitespace trimming and the text filters."""
    env = jinja2.Environment(loader=loader, lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
    return register_filters(env)


def render_string(source: str, **context) -> str:
    """Render a template string with the text filters available."""
    return create_environment().from_string(source).render(**context)
