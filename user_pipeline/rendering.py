"""
Plain-text rendering of users.

Each user renders to a fixed four-line block followed by a blank line. The
block is written with a single write under a module lock so blocks produced
by concurrent workers never interleave mid-line.
"""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from user_pipeline.domain.models import User

_output_lock = threading.Lock()


def format_user(user: User) -> str:
    """Return the display block for ``user``, including the trailing blank line."""
    address = user.address
    company = user.company
    return (
        f"Name: {user.name}\n"
        f"Email: {user.email}\n"
        f"Address: {address.street}, {address.suite}, {address.city}, {address.zipcode}\n"
        f"Company: {company.name}, {company.catch_phrase}\n"
        "\n"
    )


def display_user(user: User, stream: Optional[TextIO] = None) -> None:
    """Write the display block for ``user`` to ``stream`` (stdout by default)."""
    block = format_user(user)
    out = stream if stream is not None else sys.stdout
    with _output_lock:
        out.write(block)
        out.flush()


__all__ = ["format_user", "display_user"]
