"""
YAML persistence for the match set.

Writes a YAML sequence of user mappings (see ``User.to_record``) to a single
destination. The write goes to a temporary file beside the destination and is
then moved over it, so the destination is either fully replaced or left as it
was.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, List

import yaml
from pydantic import ValidationError

from user_pipeline.domain.models import User
from user_pipeline.errors import PersistenceError
from user_pipeline.utils.logging import get_logger

log = get_logger(__name__)

# Requested mode for new files; the process umask is applied on top.
FILE_MODE = 0o644


def _masked_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return FILE_MODE & ~umask


def dump_users_yaml(users: Iterable[User]) -> str:
    """Serialize users to a YAML document."""
    records = [user.to_record() for user in users]
    return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)


def persist_users_yaml(users: Iterable[User], path: Path | str) -> Path:
    """
    Serialize ``users`` and replace the content at ``path`` with it.

    Returns the destination path. Raises ``PersistenceError`` if serialization
    or any filesystem step fails; a partially written temp file is removed.
    """
    destination = Path(path)
    try:
        document = dump_users_yaml(users)
    except yaml.YAMLError as exc:
        raise PersistenceError(f"could not serialize users: {exc}") from exc

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(document)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, _masked_file_mode())
        os.replace(tmp_name, destination)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"could not write {destination}: {exc}") from exc

    log.info("[PERSIST] Users written", extra={"path": str(destination), "bytes": len(document)})
    return destination


def load_users_yaml(path: Path | str) -> List[User]:
    """Read back a file written by :func:`persist_users_yaml`."""
    source = Path(path)
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8")) or []
    except (OSError, yaml.YAMLError) as exc:
        raise PersistenceError(f"could not read {source}: {exc}") from exc

    if not isinstance(data, list):
        raise PersistenceError(f"{source} does not contain a sequence of users")
    try:
        return [User.from_record(record) for record in data]
    except (KeyError, TypeError, ValidationError) as exc:
        raise PersistenceError(f"{source} contains malformed user records: {exc}") from exc


__all__ = ["dump_users_yaml", "load_users_yaml", "persist_users_yaml"]
