import json
from pathlib import Path

from scripts import generate_users
from user_pipeline import config
from user_pipeline.filtering import catch_phrase_matches
from user_pipeline.domain.models import User
from user_pipeline.pipeline import RunConfig, available_strategies

GENERATED_COUNT = 50


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.source_url == "https://jsonplaceholder.typicode.com/users"
    assert settings.output_path == "filtered_users.yaml"
    assert settings.filter_term == "task-force"
    assert settings.dispatch_strategy == "channel"
    assert settings.max_workers > 0
    assert settings.request_timeout_seconds > 0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SOURCE_URL", "http://localhost:9999/users")
    monkeypatch.setenv("MAX_WORKERS", "3")
    monkeypatch.setenv("JSON_LOGS", "true")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.source_url == "http://localhost:9999/users"
    assert settings.max_workers == 3
    assert settings.json_logs is True


def test_run_config_from_settings_and_overrides(test_settings, tmp_path: Path):
    run_config = RunConfig.from_settings(test_settings)
    assert run_config.source_url == test_settings.source_url
    assert run_config.output_path == Path("filtered_users.yaml")
    assert run_config.strategy == "channel"

    overridden = run_config.with_overrides(output_path=tmp_path / "x.yaml", strategy=None)
    assert overridden.output_path == tmp_path / "x.yaml"
    assert overridden.strategy == "channel"
    assert run_config.output_path == Path("filtered_users.yaml")


def test_available_strategies_contains_known_entries():
    names = available_strategies()
    assert names == sorted(names)
    assert {"channel", "locked", "sequential"} <= set(names)


def test_generate_users_writes_decodable_json(tmp_path: Path):
    json_path = tmp_path / "users.json"
    users = generate_users._generate_users(GENERATED_COUNT, match_ratio=0.5, seed=123)
    generate_users._write_json(json_path, users)

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(payload) == GENERATED_COUNT
    decoded = [User.model_validate(entry) for entry in payload]
    assert [u.id for u in decoded] == list(range(1, GENERATED_COUNT + 1))
    assert any(catch_phrase_matches(u) for u in decoded)
    assert not all(catch_phrase_matches(u) for u in decoded)


def test_generate_users_is_deterministic():
    first = generate_users._generate_users(10, match_ratio=0.3, seed=7)
    second = generate_users._generate_users(10, match_ratio=0.3, seed=7)
    assert first == second


def test_settings_expose_only_fields_the_pipeline_reads():
    assert set(config.Settings.model_fields) == {
        "source_url",
        "request_timeout_seconds",
        "output_path",
        "filter_term",
        "dispatch_strategy",
        "max_workers",
        "handoff_buffer",
        "log_level",
        "json_logs",
    }
