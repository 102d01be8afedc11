"""Query DSL builders — One function per query intent.

Each builder returns the engine-native JSON query object (a plain dict) for
its intent; nothing here talks to the engine. Exact-match style intents
(term, terms, prefix, wildcard, fuzzy) target the untokenized ``.keyword``
sub-field so that analysis of the text field cannot split the value.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

Query = dict[str, Any]

KEYWORD_SUFFIX = ".keyword"
DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE = 1


def keyword(field: str) -> str:
    """Name of the untokenized sub-field of ``field``."""
    return field if field.endswith(KEYWORD_SUFFIX) else f"{field}{KEYWORD_SUFFIX}"


def page_offset(page_size: int = DEFAULT_PAGE_SIZE, page: int = DEFAULT_PAGE) -> int:
    """Offset of the first hit of a 1-indexed ``page``."""
    return (page - 1) * page_size


def _date(value: datetime) -> str:
    return value.isoformat()


# ── Leaf queries ─────────────────────────────────────────────────────────────


def match_all() -> Query:
    return {"match_all": {}}


def term(field: str, value: Any, case_insensitive: bool = True) -> Query:
    """Exact, case-insensitive match on the keyword form of ``field``."""
    return {"term": {keyword(field): {"value": value, "case_insensitive": case_insensitive}}}


def raw_term(field: str, value: Any) -> Query:
    """Exact match on ``field`` as mapped, without switching to the keyword form."""
    return {"term": {field: {"value": value}}}


def terms(field: str, values: list[Any]) -> Query:
    """Matches when the keyword form of ``field`` equals any of ``values``."""
    return {"terms": {keyword(field): list(values)}}


def prefix(field: str, value: str) -> Query:
    return {"prefix": {keyword(field): {"value": value}}}


def date_range(field: str, start: datetime | None = None, end: datetime | None = None) -> Query:
    """``start <= field < end``; a missing bound is left open."""
    bounds: dict[str, str] = {}
    if start is not None:
        bounds["gte"] = _date(start)
    if end is not None:
        bounds["lt"] = _date(end)
    return {"range": {field: bounds}}


def number_range(field: str, start: float | None = None, end: float | None = None) -> Query:
    """``start <= field <= end``; a missing bound is left open."""
    bounds: dict[str, float] = {}
    if start is not None:
        bounds["gte"] = start
    if end is not None:
        bounds["lte"] = end
    return {"range": {field: bounds}}


def wildcard(field: str, pattern: str) -> Query:
    """Glob match: ``?`` is one character, ``*`` is any run of characters."""
    return {"wildcard": {keyword(field): {"value": pattern, "case_insensitive": True}}}


def fuzzy(field: str, value: str, max_edits: int) -> Query:
    """Match within ``max_edits`` insertions, deletions, substitutions or transpositions."""
    return {"fuzzy": {keyword(field): {"value": value, "fuzziness": max_edits, "transpositions": True}}}


def match(field: str, text: str, max_edits: int) -> Query:
    """Analyzed full-text match; any matching token is enough."""
    return {"match": {field: {"query": text, "fuzziness": max_edits, "operator": "or"}}}


def match_bool_prefix(field: str, text: str, max_edits: int | None = None) -> Query:
    """Analyzed match where the last token is treated as a prefix.

    Lets partially typed words ("elastic" for "Elasticsearch") still hit.
    """
    body: dict[str, Any] = {"query": text}
    if max_edits is not None:
        body["fuzziness"] = max_edits
    return {"match_bool_prefix": {field: body}}


# ── Compound queries ─────────────────────────────────────────────────────────


def bool_query(
    must: list[Query] | None = None,
    must_not: list[Query] | None = None,
    should: list[Query] | None = None,
    filter: list[Query] | None = None,
    minimum_should_match: int | None = None,
) -> Query:
    """Boolean composition; empty clause lists are left out."""
    body: dict[str, Any] = {}
    for name, clauses in (("must", must), ("must_not", must_not), ("should", should), ("filter", filter)):
        if clauses:
            body[name] = list(clauses)
    if minimum_should_match is not None:
        body["minimum_should_match"] = minimum_should_match
    return {"bool": body}


def filtered(query: Query) -> Query:
    """Wrap ``query`` in filter context so it restricts without scoring."""
    return bool_query(filter=[query])
