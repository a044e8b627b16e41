"""Tests for environment configuration loading."""

import pytest
from pydantic import ValidationError

from storage_gateway.config import load_config

ENV_VARS = [
    "AWS_REGION",
    "S3_ACCESS_KEY",
    "S3_SECRET_KEY",
    "S3_ENDPOINT_URL",
    "S3_MAX_ATTEMPTS",
    "S3_CONNECT_TIMEOUT",
    "S3_READ_TIMEOUT",
    "EXISTENCE_CACHE_TTL_SECONDS",
    "EXISTENCE_CACHE_MAX_ENTRIES",
    "API_PREFIX",
    "PRESIGN_EXPIRES_IN",
    "PORT",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()

    assert config.s3.region == "us-east-1"
    assert config.s3.endpoint_url is None
    assert config.s3.max_attempts == 3
    assert config.cache.ttl_seconds == 0
    assert config.cache.max_entries == 0
    assert config.api_prefix == "/s3"
    assert config.presign_expires_in == 900
    assert config.port == 4000


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("S3_ACCESS_KEY", "key")
    monkeypatch.setenv("S3_SECRET_KEY", "secret")
    monkeypatch.setenv("S3_ENDPOINT_URL", "http://localhost:9000")
    monkeypatch.setenv("EXISTENCE_CACHE_TTL_SECONDS", "30")
    monkeypatch.setenv("EXISTENCE_CACHE_MAX_ENTRIES", "1000")
    monkeypatch.setenv("PRESIGN_EXPIRES_IN", "60")

    config = load_config()

    assert config.s3.region == "eu-west-1"
    assert config.s3.access_key_id == "key"
    assert config.s3.endpoint_url == "http://localhost:9000"
    assert config.cache.ttl_seconds == 30
    assert config.cache.max_entries == 1000
    assert config.presign_expires_in == 60


def test_empty_endpoint_means_default(monkeypatch):
    monkeypatch.setenv("S3_ENDPOINT_URL", "")
    assert load_config().s3.endpoint_url is None


def test_rejects_negative_cache_bounds(monkeypatch):
    monkeypatch.setenv("EXISTENCE_CACHE_MAX_ENTRIES", "-1")

    with pytest.raises(ValidationError):
        load_config()


def test_config_is_frozen():
    config = load_config()

    with pytest.raises(ValidationError):
        config.port = 8080
