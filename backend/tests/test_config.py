"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from jobly.config import Settings


def test_database_url_from_parts():
    settings = Settings(
        postgres_host="db",
        postgres_port=5433,
        postgres_database="jobly_test",
        postgres_user="me",
        postgres_password="pw",
    )
    assert settings.database_url == "postgresql://me:pw@db:5433/jobly_test"


def test_weak_secret_allowed_in_development():
    settings = Settings(environment="development", secret_key="secret")
    assert settings.secret_key == "secret"


def test_weak_secret_rejected_in_production():
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(environment="production", secret_key="change-me-in-production")


@pytest.mark.parametrize("work_factor", [3, 32])
def test_work_factor_out_of_range(work_factor):
    with pytest.raises(ValidationError, match="BCRYPT_WORK_FACTOR"):
        Settings(bcrypt_work_factor=work_factor)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JWT_EXPIRE_HOURS", "2")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.jwt_expire_hours == 2
    assert settings.log_level == "DEBUG"
