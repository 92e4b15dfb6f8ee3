"""
User Pipeline - concurrent render, filter and persist of user records.

This package fetches a list of users from an HTTP source, renders every user
to stdout from its own concurrent unit of work while testing its company
catch phrase against a filter term, and persists the matching users to YAML
once all units have finished. It includes:

- Frozen pydantic user models
- Interchangeable fan-out/fan-in dispatch strategies
- An HTTP record source and an atomic YAML store
- Structured logging and environment-driven settings
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from user_pipeline.config import Settings, get_settings
from user_pipeline.domain.models import Address, Company, MatchSet, User
from user_pipeline.errors import PersistenceError, PipelineError, RetrievalError
from user_pipeline.filtering import build_filter, catch_phrase_matches
from user_pipeline.pipeline import PipelineResult, RunConfig, available_strategies, run_pipeline
from user_pipeline.rendering import display_user, format_user
from user_pipeline.strategies.abstract import AbstractDispatchStrategy, DispatchStrategy
from user_pipeline.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Address",
    "Company",
    "MatchSet",
    "User",
    # Errors
    "PipelineError",
    "PersistenceError",
    "RetrievalError",
    # Render and filter
    "build_filter",
    "catch_phrase_matches",
    "display_user",
    "format_user",
    # Pipeline
    "PipelineResult",
    "RunConfig",
    "available_strategies",
    "run_pipeline",
    # Strategy abstractions
    "AbstractDispatchStrategy",
    "DispatchStrategy",
    # Logging
    "configure_logging",
    "get_logger",
]
