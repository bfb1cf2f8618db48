import os

from icloud_pricing.config import (
    DEFAULT_CACHE_TTL,
    DEFAULT_REQUEST_TIMEOUT,
    load_config,
)


def test_defaults_without_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_config({})

    assert config.reference_currency == "CNY"
    assert config.benchmark_plan == "50GB"
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert config.cache_ttl == DEFAULT_CACHE_TTL
    assert config.cache_dir.endswith("icloud-pricing")
    assert config.local_data_path == os.path.join(os.getcwd(), "data", "prices.json")


def test_alfred_environment_sets_cache_and_workflow_dirs():
    env = {
        "alfred_workflow_cache": "/cache/wf",
        "alfred_preferences": "/prefs",
        "alfred_workflow_uid": "user.workflow.1",
    }

    config = load_config(env)

    assert config.cache_dir == "/cache/wf"
    assert str(config.cache_path) == os.path.join("/cache/wf", "prices.json")
    assert config.local_data_path == os.path.join("/prefs", "workflows", "user.workflow.1", "data", "prices.json")


def test_explicit_overrides_and_invalid_numbers():
    env = {
        "ICLOUD_PRICING_CACHE_DIR": "/override",
        "alfred_workflow_cache": "/cache/wf",
        "ICLOUD_PRICING_CACHE_TTL": "60",
        "ICLOUD_PRICING_TIMEOUT": "soon",
        "ICLOUD_PRICING_REFERENCE_CURRENCY": "usd",
        "ICLOUD_PRICING_BENCHMARK_PLAN": "3tb",
    }

    config = load_config(env)

    assert config.cache_dir == "/override"
    assert config.cache_ttl == 60.0
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert config.reference_currency == "USD"
    assert config.benchmark_plan == "50GB"
