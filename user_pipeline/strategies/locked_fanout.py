"""
Locked fan-out strategy: one pool task per user, mutex-guarded accumulator.

Units append matches straight into a shared list, serialized by a lock.
Completion is detected by waiting on exactly the futures that were
submitted, one per user.
"""

from __future__ import annotations

import threading
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from user_pipeline.domain.models import MatchSet, User
from user_pipeline.strategies.abstract import AbstractDispatchStrategy, PredicateFn, RenderFn
from user_pipeline.strategies.channel_fanout import DEFAULT_MAX_WORKERS


class LockedStrategy(AbstractDispatchStrategy):
    """Fan out over a ThreadPoolExecutor; append matches under a Lock."""

    name: str = "locked"
    description: str = "Thread pool fan-out, lock-guarded list, wait on all futures."

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self.max_workers = max(max_workers or DEFAULT_MAX_WORKERS, 1)

    def dispatch(
        self, users: Sequence[User], render: RenderFn, predicate: PredicateFn
    ) -> MatchSet:
        lock = threading.Lock()
        matches: List[User] = []

        def unit(user: User) -> None:
            render(user)
            if predicate(user):
                with lock:
                    matches.append(user)

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="dispatch"
        ) as pool:
            futures = [pool.submit(unit, user) for user in users]
            done, _ = wait(futures, return_when=ALL_COMPLETED)

        for future in done:
            future.result()

        with lock:
            return tuple(matches)


__all__ = ["LockedStrategy"]
