"""Jinja2 rendering for plain-text CLI reports."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, Template


def pluralize(word: str, count: int, plural: str | None = None) -> str:
    """Return ``word`` for a count of one, else its plural (``word + "s"`` by default)."""
    if count == 1:
        return word
    return plural if plural is not None else f"{word}s"


_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
    undefined=StrictUndefined,
)
_ENV.filters["pluralize"] = pluralize


@lru_cache(maxsize=32)
def _compile(template: str) -> Template:
    return _ENV.from_string(template)


def render_template(template: str, context: dict[str, Any]) -> str:
    """Render ``template`` with ``context``; undefined names raise ``UndefinedError``."""
    return _compile(template).render(**context)
