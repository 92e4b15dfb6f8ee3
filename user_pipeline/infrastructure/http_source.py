"""
HTTP record source.

Fetches the full list of users with a single GET and decodes it into frozen
``User`` models. No retry and no pagination: any failure aborts the run as a
``RetrievalError``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from user_pipeline.domain.models import User
from user_pipeline.errors import RetrievalError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def fetch_users(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> List[User]:
    """
    Get all users from ``url``.

    Args:
        url: Endpoint returning a JSON array of user objects
        session: Optional requests session (for connection pooling and tests)
        timeout: Request timeout in seconds

    Returns:
        Users in the order the source returned them

    Raises:
        RetrievalError: on network failure, non-2xx status, malformed JSON or
            a payload that does not describe a list of users
    """
    if session is None:
        with requests.Session() as owned_session:
            return fetch_users(url, session=owned_session, timeout=timeout)

    headers = {"Accept": "application/json"}

    logger.info(f"[FETCH] Requesting users from {url}")
    try:
        response = session.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.JSONDecodeError as exc:
        # Also a RequestException; match it before the generic case.
        raise RetrievalError(f"response from {url} is not valid JSON: {exc}") from exc
    except requests.RequestException as exc:
        raise RetrievalError(f"request to {url} failed: {exc}") from exc

    if not isinstance(data, list):
        raise RetrievalError(
            f"response from {url} must be a JSON array, got {type(data).__name__}"
        )

    try:
        users = [User.model_validate(entry) for entry in data]
    except ValidationError as exc:
        raise RetrievalError(f"response from {url} has malformed user records: {exc}") from exc

    logger.info(f"[FETCH] Decoded {len(users):,} users", extra={"users": len(users)})
    return users


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "fetch_users"]
