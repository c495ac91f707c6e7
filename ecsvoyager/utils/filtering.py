"""Search and categorical filtering over inventory lists.

Usage:
    from ecsvoyager.utils.filtering import filter_records

    visible = filter_records(
        services,
        query="web",
        regex_mode=False,
        fields=("name", "status", "launch_type"),
        predicates={"status": "ACTIVE"},
    )

Regex compilation is isolated behind ``compile_matcher`` so the engine only
ever sees a ``Matcher``. An invalid pattern never raises: it degrades to a
literal substring match and the matcher records the compile error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

FieldSelector = str | Callable[[Any], Any]


class Matcher(Protocol):
    """Compiled text predicate."""

    error: str | None

    def matches(self, text: str) -> bool: ...


@dataclass(frozen=True)
class SubstringMatcher:
    """Case-insensitive literal substring test."""

    needle: str
    error: str | None = None

    def matches(self, text: str) -> bool:
        return self.needle.lower() in text.lower()


@dataclass(frozen=True)
class RegexMatcher:
    """Case-insensitive regular expression search."""

    pattern: re.Pattern[str]
    error: str | None = None

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def compile_matcher(query: str, regex_mode: bool) -> Matcher:
    """Build a matcher for ``query``.

    In regex mode an unparsable pattern falls back to a literal substring
    matcher whose ``error`` carries the compile message.
    """
    if not regex_mode:
        return SubstringMatcher(query)
    try:
        return RegexMatcher(re.compile(query, re.IGNORECASE))
    except re.error as exc:
        logger.debug("Invalid regex %r, matching literally: %s", query, exc)
        return SubstringMatcher(query, error=str(exc))


def _field_text(item: Any, selector: FieldSelector) -> str:
    if callable(selector):
        value = selector(item)
    elif isinstance(item, str):
        value = item
    elif isinstance(item, Mapping):
        value = item.get(selector, "")
    else:
        value = getattr(item, selector, "")
    return "" if value is None else str(value)


def _predicate_value(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def matches_predicates(item: Any, predicates: Mapping[str, Any] | None) -> bool:
    """Exact-match every active (non-None) predicate."""
    if not predicates:
        return True
    return all(
        _predicate_value(item, name) == expected
        for name, expected in predicates.items()
        if expected is not None
    )


def filter_records(
    items: Iterable[T],
    query: str = "",
    regex_mode: bool = False,
    fields: Sequence[FieldSelector] = (),
    predicates: Mapping[str, Any] | None = None,
    matcher: Matcher | None = None,
) -> list[T]:
    """Return the ordered sublist of ``items`` matching query and predicates.

    Args:
        items: Source collection. Never mutated.
        query: Free-text query. Empty means no text predicate.
        regex_mode: Treat ``query`` as a case-insensitive regex.
        fields: Attribute names (or callables) searched by the query. Plain
            string items are matched directly.
        predicates: Attribute name -> exact value. ``None`` values are inactive.
        matcher: Pre-compiled matcher, to avoid recompiling per call.

    Returns:
        A new list, preserving source order.
    """
    if query and matcher is None:
        matcher = compile_matcher(query, regex_mode)
    selectors: Sequence[FieldSelector] = fields or ("",)

    result: list[T] = []
    for item in items:
        if not matches_predicates(item, predicates):
            continue
        if query and matcher is not None and not any(
            matcher.matches(_field_text(item, selector)) for selector in selectors
        ):
            continue
        result.append(item)
    return result


__all__ = [
    "FieldSelector",
    "Matcher",
    "RegexMatcher",
    "SubstringMatcher",
    "compile_matcher",
    "filter_records",
    "matches_predicates",
]
