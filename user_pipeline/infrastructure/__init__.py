"""
Infrastructure package for the user pipeline.

Holds the two I/O boundaries: the HTTP record source and the YAML match-set
store. Keep this layer focused on I/O, decoupled from dispatch and pipeline
logic.
"""

from user_pipeline.infrastructure.http_source import fetch_users
from user_pipeline.infrastructure.yaml_store import (
    dump_users_yaml,
    load_users_yaml,
    persist_users_yaml,
)

__all__ = [
    "dump_users_yaml",
    "fetch_users",
    "load_users_yaml",
    "persist_users_yaml",
]
