"""Error hierarchy for the user pipeline.

- PipelineError: base class, carries the name of the step that failed
- RetrievalError: the record source could not be fetched or decoded
- PersistenceError: the match set could not be serialized or written

Both are fatal to their step only; the CLI reports them and exits normally.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for all pipeline errors."""

    step: str = "pipeline"

    def __init__(self, message: str, step: str | None = None) -> None:
        self.message = message
        if step is not None:
            self.step = step
        super().__init__(message)


class RetrievalError(PipelineError):
    """Fetching or decoding the user records failed."""

    step = "fetch"


class PersistenceError(PipelineError):
    """Serializing or writing the match set failed."""

    step = "persist"


__all__ = ["PipelineError", "RetrievalError", "PersistenceError"]
