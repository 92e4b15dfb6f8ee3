"""
Sequential (baseline) strategy: one thread, users processed in input order.

The simplest possible dispatcher, used as the reference result the concurrent
strategies are compared against.
"""

from __future__ import annotations

from typing import List, Sequence

from user_pipeline.domain.models import MatchSet, User
from user_pipeline.strategies.abstract import AbstractDispatchStrategy, PredicateFn, RenderFn


class SequentialStrategy(AbstractDispatchStrategy):
    """Render and filter each user in turn on the calling thread."""

    name: str = "sequential"
    description: str = "Single-threaded loop; no fan-out."

    def dispatch(
        self, users: Sequence[User], render: RenderFn, predicate: PredicateFn
    ) -> MatchSet:
        matches: List[User] = []
        for user in users:
            render(user)
            if predicate(user):
                matches.append(user)
        return tuple(matches)


__all__ = ["SequentialStrategy"]
