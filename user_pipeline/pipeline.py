"""
Pipeline for fetching users, dispatching render + filter work, and persisting matches.

Usage (example from CLI):
    from user_pipeline.pipeline import RunConfig, run_pipeline

    result = run_pipeline(RunConfig.from_settings(get_settings()))
    print(result["matched"], result["persisted_path"])

Phases:
- fetch: one call to the record source; failure aborts before any rendering
- dispatch: fan-out/fan-in through the configured strategy
- persist: only when the match set is non-empty; an existing destination is
  left untouched otherwise
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO, TypedDict

from user_pipeline.config import Settings
from user_pipeline.domain.models import MatchSet, User
from user_pipeline.filtering import DEFAULT_FILTER_TERM, build_filter
from user_pipeline.infrastructure.http_source import DEFAULT_TIMEOUT_SECONDS, fetch_users
from user_pipeline.infrastructure.yaml_store import persist_users_yaml
from user_pipeline.rendering import display_user
from user_pipeline.strategies.abstract import DispatchStrategy
from user_pipeline.strategies.channel_fanout import (
    DEFAULT_HANDOFF_BUFFER,
    DEFAULT_MAX_WORKERS,
    ChannelStrategy,
)
from user_pipeline.strategies.locked_fanout import LockedStrategy
from user_pipeline.strategies.sequential import SequentialStrategy
from user_pipeline.utils.logging import get_logger

log = get_logger(__name__)

FetchFn = Callable[[str, float], List[User]]
PersistFn = Callable[[Sequence[User], Path], Path]


@dataclass(frozen=True)
class RunConfig:
    """Everything one pipeline run needs, passed explicitly."""

    source_url: str
    output_path: Path = Path("filtered_users.yaml")
    filter_term: str = DEFAULT_FILTER_TERM
    strategy: str = "channel"
    max_workers: int = DEFAULT_MAX_WORKERS
    handoff_buffer: int = DEFAULT_HANDOFF_BUFFER
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls, settings: Settings) -> "RunConfig":
        return cls(
            source_url=settings.source_url,
            output_path=Path(settings.output_path),
            filter_term=settings.filter_term,
            strategy=settings.dispatch_strategy,
            max_workers=settings.max_workers,
            handoff_buffer=settings.handoff_buffer,
            timeout_seconds=settings.request_timeout_seconds,
        )

    def with_overrides(self, **changes: object) -> "RunConfig":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


class PipelineResult(TypedDict):
    """
    Outcome of a completed run.

    ``persisted_path`` is None when nothing matched and no write happened.
    """

    total: int
    matched: int
    matches: MatchSet
    persisted_path: Optional[Path]
    strategy: str
    duration_seconds: float


def _strategy_factories(config: RunConfig) -> Dict[str, Callable[[], DispatchStrategy]]:
    """Registry of available strategies."""
    return {
        "channel": lambda: ChannelStrategy(
            max_workers=config.max_workers, handoff_buffer=config.handoff_buffer
        ),
        "locked": lambda: LockedStrategy(max_workers=config.max_workers),
        "sequential": lambda: SequentialStrategy(),
    }


def available_strategies() -> List[str]:
    """List available strategy names."""
    return sorted(_strategy_factories(RunConfig(source_url="")).keys())


def _resolve_strategy(config: RunConfig) -> DispatchStrategy:
    factories = _strategy_factories(config)
    if config.strategy not in factories:
        raise ValueError(
            f"Unknown strategy '{config.strategy}'. Available: {', '.join(sorted(factories))}"
        )
    return factories[config.strategy]()


def _default_fetch(url: str, timeout: float) -> List[User]:
    return fetch_users(url, timeout=timeout)


def _default_persist(users: Sequence[User], path: Path) -> Path:
    return persist_users_yaml(users, path)


def run_pipeline(
    config: RunConfig,
    stream: Optional[TextIO] = None,
    fetch: Optional[FetchFn] = None,
    persist: Optional[PersistFn] = None,
) -> PipelineResult:
    """
    Run fetch -> dispatch -> persist once.

    Parameters
    ----------
    config : RunConfig
        Source, destination, filter term and dispatch tuning for this run.
    stream : TextIO | None
        Where rendered user blocks go. Defaults to stdout.
    fetch, persist : callable | None
        Replacements for the HTTP source and YAML store boundaries.

    Returns
    -------
    PipelineResult
        Counts, the finalized match set and where it was persisted.

    Raises
    ------
    RetrievalError
        The source failed; nothing was rendered or persisted.
    PersistenceError
        The write failed after dispatch completed.
    ValueError
        ``config.strategy`` is not registered.
    """
    strategy = _resolve_strategy(config)
    out = stream if stream is not None else sys.stdout
    fetch_fn = fetch or _default_fetch
    persist_fn = persist or _default_persist

    start = time.perf_counter()
    users = fetch_fn(config.source_url, config.timeout_seconds)

    log.info(
        f"[DISPATCH] {strategy.name} over {len(users)} users",
        extra={"strategy": strategy.name, "users": len(users), "term": config.filter_term},
    )
    dispatch_start = time.perf_counter()
    matches = strategy.dispatch(
        users,
        render=lambda user: display_user(user, out),
        predicate=build_filter(config.filter_term),
    )
    log.info(
        f"[DISPATCH] Completed {strategy.name}",
        extra={
            "strategy": strategy.name,
            "users": len(users),
            "matched": len(matches),
            "duration": round(time.perf_counter() - dispatch_start, 4),
        },
    )

    persisted_path: Optional[Path] = None
    if matches:
        persisted_path = persist_fn(matches, config.output_path)
    else:
        log.info(
            "[PERSIST] Skipped; no users matched",
            extra={"path": str(config.output_path)},
        )

    duration = time.perf_counter() - start
    log.info(
        "[PIPELINE COMPLETE]",
        extra={"users": len(users), "matched": len(matches), "duration": round(duration, 4)},
    )
    return PipelineResult(
        total=len(users),
        matched=len(matches),
        matches=matches,
        persisted_path=persisted_path,
        strategy=strategy.name,
        duration_seconds=duration,
    )


__all__ = [
    "PipelineResult",
    "RunConfig",
    "available_strategies",
    "run_pipeline",
]
