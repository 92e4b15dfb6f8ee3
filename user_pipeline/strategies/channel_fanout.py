"""
Channel fan-out strategy: one pool task per user, single-owner collector.

Intent:
- Every user gets its own unit of work on a thread pool; units render, test
  the predicate and hand matches over a bounded queue (the "channel").
- The calling thread is the only consumer and the only owner of the match
  accumulator, so no lock guards it.
- A WaitGroup counts dispatched units. A dedicated closer thread waits for it
  to drain and only then posts the close sentinel, so the channel can never
  be closed before its last writer has finished.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from queue import Queue
from typing import List, Optional, Sequence

from user_pipeline.domain.models import MatchSet, User
from user_pipeline.strategies.abstract import AbstractDispatchStrategy, PredicateFn, RenderFn
from user_pipeline.utils.logging import get_logger
from user_pipeline.utils.sync import WaitGroup

log = get_logger(__name__)

DEFAULT_MAX_WORKERS = 8
DEFAULT_HANDOFF_BUFFER = 1

# Posted exactly once, by the closer, after the last unit reported done.
_CLOSED = object()


class ChannelStrategy(AbstractDispatchStrategy):
    """
    Fan out over a ThreadPoolExecutor and fan in through a bounded queue.

    ``handoff_buffer`` bounds the queue; with the default of 1 a unit blocks
    on its handoff until the collector has taken the previous match. 0 leaves
    the queue unbounded.
    """

    name: str = "channel"
    description: str = "Thread pool fan-out, queue hand-off to a single collector, WaitGroup close."

    def __init__(
        self,
        max_workers: Optional[int] = None,
        handoff_buffer: Optional[int] = None,
    ) -> None:
        self.max_workers = max(max_workers or DEFAULT_MAX_WORKERS, 1)
        self.handoff_buffer = max(
            handoff_buffer if handoff_buffer is not None else DEFAULT_HANDOFF_BUFFER, 0
        )

    def dispatch(
        self, users: Sequence[User], render: RenderFn, predicate: PredicateFn
    ) -> MatchSet:
        handoff: "Queue[object]" = Queue(maxsize=self.handoff_buffer)
        pending = WaitGroup()

        def unit(user: User) -> None:
            try:
                render(user)
                if predicate(user):
                    handoff.put(user)
            finally:
                pending.done()

        def close_when_drained() -> None:
            pending.wait()
            handoff.put(_CLOSED)

        def start_closer() -> threading.Thread:
            closer = threading.Thread(target=close_when_drained, name="dispatch-closer", daemon=True)
            closer.start()
            return closer

        matches: List[User] = []
        futures: List[Future[None]] = []
        closer: Optional[threading.Thread] = None
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="dispatch"
        ) as pool:
            try:
                for user in users:
                    pending.add(1)
                    try:
                        futures.append(pool.submit(unit, user))
                    except BaseException:
                        pending.done()
                        raise

                closer = start_closer()

                while True:
                    item = handoff.get()
                    if item is _CLOSED:
                        break
                    matches.append(item)  # type: ignore[arg-type]
            except BaseException:
                # Units that never started will never report done; count them off
                # here so the closer can still fire, then drain the running ones.
                for future in futures:
                    if future.cancel():
                        pending.done()
                pool.shutdown(wait=False)
                if closer is None:
                    closer = start_closer()
                while handoff.get() is not _CLOSED:
                    pass
                log.warning(
                    "Channel dispatch aborted",
                    extra={"dispatched": len(futures), "matched": len(matches)},
                )
                raise
            finally:
                if closer is not None:
                    closer.join()

        # Surface any failure raised inside a unit.
        for future in futures:
            future.result()

        log.debug(
            "Channel dispatch finished",
            extra={"dispatched": len(futures), "matched": len(matches)},
        )
        return tuple(matches)


__all__ = ["ChannelStrategy"]
