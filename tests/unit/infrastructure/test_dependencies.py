"""Unit tests for repository factories and settings."""

import logging

import pytest

from app.adapters.outbound.persistence import (
    InMemoryCallRepository,
    InMemoryCustomerRepository,
    SqlCallRepository,
    SqlCustomerRepository,
)
from app.infrastructure.config.settings import Settings, settings
from app.infrastructure.logging.logger import log_event
from app.infrastructure.wiring.container import Container
from app.infrastructure.wiring.dependencies import (
    create_call_repository,
    create_customer_repository,
)


def test_settings_defaults(monkeypatch):
    """Test that repositories default to in-memory storage."""
    for name in ("CUSTOMER_REPOSITORY", "CALL_REPOSITORY", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    defaults = Settings(_env_file=None)

    assert defaults.customer_repository == "in_memory"
    assert defaults.call_repository == "in_memory"
    assert defaults.database_url == ""
    assert defaults.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    """Test that settings are read from environment variables."""
    monkeypatch.setenv("CUSTOMER_REPOSITORY", "sql")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///calls.db")

    configured = Settings(_env_file=None)

    assert configured.customer_repository == "sql"
    assert configured.database_url == "sqlite:///calls.db"


def test_default_factories_return_in_memory(monkeypatch):
    """Test the in-memory branch of both factories."""
    monkeypatch.setattr(settings, "customer_repository", "in_memory")
    monkeypatch.setattr(settings, "call_repository", "in_memory")

    assert isinstance(create_customer_repository(), InMemoryCustomerRepository)
    assert isinstance(create_call_repository(), InMemoryCallRepository)


def test_sql_factories(monkeypatch):
    """Test the SQL branch of both factories."""
    monkeypatch.setattr(settings, "customer_repository", "sql")
    monkeypatch.setattr(settings, "call_repository", "sql")
    monkeypatch.setattr(settings, "database_url", "sqlite:///:memory:")

    assert isinstance(create_customer_repository(), SqlCustomerRepository)
    assert isinstance(create_call_repository(), SqlCallRepository)


@pytest.mark.parametrize("factory", [create_customer_repository, create_call_repository])
def test_sql_factory_requires_database_url(monkeypatch, factory):
    """Test that selecting SQL storage without DATABASE_URL fails fast."""
    monkeypatch.setattr(settings, "customer_repository", "sql")
    monkeypatch.setattr(settings, "call_repository", "sql")
    monkeypatch.setattr(settings, "database_url", "")

    with pytest.raises(ValueError, match="DATABASE_URL is required"):
        factory()


@pytest.mark.parametrize(
    "customer_storage,call_storage", [("in_memory", "sql"), ("sql", "in_memory")]
)
@pytest.mark.parametrize("factory", [create_customer_repository, create_call_repository])
def test_mixed_storage_is_rejected(monkeypatch, customer_storage, call_storage, factory):
    """Test that customers and calls must be configured with the same storage."""
    monkeypatch.setattr(settings, "customer_repository", customer_storage)
    monkeypatch.setattr(settings, "call_repository", call_storage)
    monkeypatch.setattr(settings, "database_url", "sqlite:///:memory:")

    with pytest.raises(ValueError, match="must use the same storage"):
        factory()


def test_container_uses_given_repositories():
    """Test that explicit repositories are wired into the use cases."""
    customers = InMemoryCustomerRepository()
    calls = InMemoryCallRepository()

    container = Container(customers, calls)

    assert container.customer_repository is customers
    assert container.call_repository is calls


def test_log_event_formats_key_value_pairs(caplog):
    """Test that structured events are logged as key=value pairs."""
    with caplog.at_level(logging.INFO, logger="outbound_call_manager"):
        log_event("use_case", "customer_created", customer_id="c-1")

    assert "component='use_case' | event='customer_created' | customer_id='c-1'" in caplog.text
