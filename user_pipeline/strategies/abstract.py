"""
Abstract dispatch interfaces for the user pipeline.

A dispatch strategy fans out one unit of work per user (render, then test the
filter predicate), fans the matches back in, and returns the finalized
MatchSet only after every unit has finished. Concrete strategies differ in
how matches are aggregated and how completion is detected.
"""

from __future__ import annotations

import abc
from typing import Callable, Protocol, Sequence, runtime_checkable

from user_pipeline.domain.models import MatchSet, User

RenderFn = Callable[[User], None]
PredicateFn = Callable[[User], bool]


@runtime_checkable
class DispatchStrategy(Protocol):
    """
    Common interface all dispatch strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the approach.
    """

    name: str
    description: str

    def dispatch(
        self, users: Sequence[User], render: RenderFn, predicate: PredicateFn
    ) -> MatchSet:
        """
        Render every user, test it against ``predicate`` and collect matches.

        Parameters
        ----------
        users : Sequence[User]
            Users to process; one unit of work is dispatched per user.
        render : callable
            Invoked once per user for its display side effect.
        predicate : callable
            Match decision; users for which it returns True are collected.

        Returns
        -------
        MatchSet
            Every matching user exactly once, in no particular order.
        """
        ...


class AbstractDispatchStrategy(abc.ABC):
    """
    ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `dispatch`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def dispatch(
        self, users: Sequence[User], render: RenderFn, predicate: PredicateFn
    ) -> MatchSet:  # pragma: no cover - interface only
        """Process users and return the finalized match set."""
        raise NotImplementedError


__all__ = [
    "AbstractDispatchStrategy",
    "DispatchStrategy",
    "PredicateFn",
    "RenderFn",
]
