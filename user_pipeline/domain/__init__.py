"""
Domain package for the user pipeline.

Exports the core domain models used across strategies, infrastructure and
the pipeline. Keep this package focused on data definitions.
"""

from user_pipeline.domain.models import Address, Company, MatchSet, User

__all__ = [
    "Address",
    "Company",
    "MatchSet",
    "User",
]
