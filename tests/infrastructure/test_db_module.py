"""Tests for the ledger database engine helpers."""

from unittest.mock import MagicMock

import pytest

from quantor.infrastructure import db as db_module


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)


@pytest.fixture
def fresh_engine(monkeypatch):
    monkeypatch.setattr(db_module, "_engine", None)


def test_missing_db_url_names_the_variable(no_dotenv, monkeypatch):
    monkeypatch.delenv(db_module.DB_URL_ENV_VAR, raising=False)

    with pytest.raises(RuntimeError, match="QUANTOR_DB_URL"):
        db_module._get_env_var(db_module.DB_URL_ENV_VAR)


def test_blank_db_url_is_treated_as_missing(no_dotenv, monkeypatch):
    monkeypatch.setenv(db_module.DB_URL_ENV_VAR, "")

    with pytest.raises(RuntimeError):
        db_module._get_env_var(db_module.DB_URL_ENV_VAR)


def test_db_url_is_read_from_dotenv(fresh_engine, monkeypatch):
    """A .env file is consulted before the variable is read."""
    monkeypatch.delenv(db_module.DB_URL_ENV_VAR, raising=False)

    def _load_dotenv():
        monkeypatch.setenv(
            db_module.DB_URL_ENV_VAR,
            "postgresql://ledger@localhost/quantor",
        )

    monkeypatch.setattr(db_module.dotenv, "load_dotenv", _load_dotenv)
    monkeypatch.setattr(db_module, "_create_engine", lambda url: url)

    assert db_module.get_engine() == "postgresql://ledger@localhost/quantor"


def test_ledger_engine_is_pooled_and_pinged(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs, db_url=db_url)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("postgresql://ledger") == "engine"
    assert captured == {
        "db_url": "postgresql://ledger",
        "poolclass": db_module.QueuePool,
        "pool_size": db_module.POOL_SIZE,
        "max_overflow": db_module.POOL_MAX_OVERFLOW,
        "pool_pre_ping": True,
        "future": True,
    }


def test_engine_is_created_once_per_process(
    no_dotenv,
    fresh_engine,
    monkeypatch,
):
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or MagicMock(),
    )
    monkeypatch.setenv(db_module.DB_URL_ENV_VAR, "postgresql://ledger")

    first = db_module.get_engine()

    assert db_module.get_engine() is first
    assert created == ["postgresql://ledger"]


def test_dispose_engine_rereads_url(no_dotenv, fresh_engine, monkeypatch):
    """After disposal the next engine uses the current QUANTOR_DB_URL."""
    engines = {}

    def fake_create_engine(url):
        engines[url] = MagicMock()
        return engines[url]

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setenv(db_module.DB_URL_ENV_VAR, "postgresql://old")
    old_engine = db_module.get_engine()

    db_module.dispose_engine()
    monkeypatch.setenv(db_module.DB_URL_ENV_VAR, "postgresql://new")

    old_engine.dispose.assert_called_once_with()
    assert db_module.get_engine() is engines["postgresql://new"]


def test_dispose_engine_without_engine_is_a_no_op(fresh_engine):
    db_module.dispose_engine()

    assert db_module._engine is None


def test_adapter_serves_the_shared_engine(monkeypatch):
    engine = MagicMock()
    monkeypatch.setattr(db_module, "get_engine", lambda: engine)

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() is engine
