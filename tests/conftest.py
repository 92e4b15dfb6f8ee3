"""
Pytest configuration for the user pipeline.

Provides fixtures for:
- Sample users (one catch-phrase match, one non-match) as models and as the
  JSON payload the source serves
- Settings isolated from the developer's environment
- A run configuration pointing at a per-test output path
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Generator

import pytest

from user_pipeline.config import Settings, get_settings
from user_pipeline.domain.models import Address, Company, User
from user_pipeline.pipeline import RunConfig

_SETTINGS_ENV_VARS = (
    "SOURCE_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "OUTPUT_PATH",
    "FILTER_TERM",
    "DISPATCH_STRATEGY",
    "MAX_WORKERS",
    "HANDOFF_BUFFER",
    "LOG_LEVEL",
    "JSON_LOGS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Strip pipeline env vars and clear the cached settings around every test.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """
    The CLI reconfigures root logging against whatever stderr is current;
    put the original handlers back so later tests never log to a closed stream.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with defaults only; no .env file is read.
    """
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def task_force_user() -> User:
    return User(
        id=1,
        name="Test User",
        email="test@example.com",
        address=Address(street="123 Main St", suite="Apt 4", city="Testville", zipcode="12345"),
        company=Company(name="Test Corp", catch_phrase="Task-force oriented solutions"),
    )


@pytest.fixture
def other_user() -> User:
    return User(
        id=2,
        name="Another User",
        email="another@example.com",
        address=Address(
            street="456 Oak Ave", suite="Suite 100", city="Sample City", zipcode="67890"
        ),
        company=Company(name="Example Inc", catch_phrase="Just another company"),
    )


@pytest.fixture
def mock_users(task_force_user: User, other_user: User) -> list[User]:
    return [task_force_user, other_user]


@pytest.fixture
def mock_users_payload(mock_users: list[User]) -> list[dict[str, Any]]:
    """
    The sample users in the source's wire format, with fields the pipeline ignores.
    """
    payload = []
    for user in mock_users:
        entry = user.model_dump(by_alias=True)
        entry["username"] = user.name.split()[0].lower()
        entry["phone"] = "1-770-736-8031"
        entry["address"]["geo"] = {"lat": "-37.3159", "lng": "81.1496"}
        entry["company"]["bs"] = "harness real-time e-markets"
        payload.append(entry)
    return payload


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "filtered_users.yaml"


@pytest.fixture
def run_config(output_path: Path) -> RunConfig:
    return RunConfig(
        source_url="http://source.test/users",
        output_path=output_path,
        max_workers=4,
    )
