"""
Strategies package for the user pipeline.

Re-exports the abstract interfaces and the concrete dispatch strategies so
downstream code can import from `user_pipeline.strategies` directly.
"""

from user_pipeline.strategies.abstract import (
    AbstractDispatchStrategy,
    DispatchStrategy,
    PredicateFn,
    RenderFn,
)
from user_pipeline.strategies.channel_fanout import ChannelStrategy
from user_pipeline.strategies.locked_fanout import LockedStrategy
from user_pipeline.strategies.sequential import SequentialStrategy

__all__ = [
    # Abstracts
    "AbstractDispatchStrategy",
    "DispatchStrategy",
    "PredicateFn",
    "RenderFn",
    # Concrete strategies
    "ChannelStrategy",
    "LockedStrategy",
    "SequentialStrategy",
]
