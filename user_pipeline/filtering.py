"""
Catch-phrase filter predicate.

A user matches when its company catch phrase contains the filter term,
compared case-insensitively as a plain substring.
"""

from __future__ import annotations

from typing import Callable

from user_pipeline.domain.models import User

DEFAULT_FILTER_TERM = "task-force"

UserPredicate = Callable[[User], bool]


def catch_phrase_matches(user: User, term: str = DEFAULT_FILTER_TERM) -> bool:
    """True iff the lower-cased catch phrase contains the lower-cased ``term``."""
    return term.lower() in user.company.catch_phrase.lower()


def build_filter(term: str = DEFAULT_FILTER_TERM) -> UserPredicate:
    """Bind ``term`` into a single-argument predicate for the dispatchers."""
    needle = term.lower()

    def predicate(user: User) -> bool:
        return needle in user.company.catch_phrase.lower()

    return predicate


__all__ = ["DEFAULT_FILTER_TERM", "UserPredicate", "build_filter", "catch_phrase_matches"]
