"""
Builds the reply text for each intent from the templates in prompts.responses.
"""
from collections.abc import Sequence
from typing import Optional

from core.cache_knowledge_base import DEFAULT_TABLE_CACHES
from core.intent_classifier import Intent
from core.table_extractor import UNKNOWN_TABLE
from prompts.responses import (
    greeting_prompt,
    help_prompt,
    cache_listing_prompt,
    table_not_found_prompt,
)


def _format_table_list(tables: Sequence[str]) -> str:
    return ", ".join(tables)


def compose_cache_listing(table_name: str, caches: Sequence[str]) -> str:
    cache_lines = "\n".join(f"- {cache}" for cache in caches)
    return cache_listing_prompt.format(table_name=table_name, cache_lines=cache_lines)


def compose_table_not_found(table_name: str, known_tables: Sequence[str]) -> str:
    return table_not_found_prompt.format(
        table_name=table_name,
        known_tables=_format_table_list(known_tables),
    )


def compose_response(
    intent: Intent,
    table_name: Optional[str] = None,
    caches: Optional[Sequence[str]] = None,
    known_tables: Sequence[str] = tuple(DEFAULT_TABLE_CACHES),
) -> str:
    """
    Build the reply text for one turn.

    ``caches`` is the knowledge-base lookup result for ``table_name``; None
    means the table was not found. Both are ignored unless the intent is a
    cache query.
    """
    if intent == Intent.GREETING:
        return greeting_prompt.format(known_tables=_format_table_list(known_tables))
    if intent == Intent.CACHE_QUERY:
        if caches is None:
            return compose_table_not_found(table_name or UNKNOWN_TABLE, known_tables)
        return compose_cache_listing(table_name or UNKNOWN_TABLE, caches)
    return help_prompt.format(known_tables=_format_table_list(known_tables))
