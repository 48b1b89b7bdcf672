"""Tests for the infrastructure.db module."""

from wallet_ledger.infrastructure import db as db_module


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://wallets")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://wallets"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_engine_caches_per_url(monkeypatch):
    """get_engine should memoize one engine per database URL."""
    monkeypatch.setattr(db_module, "_engines", {})
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    engine_one = db_module.get_engine("postgresql://one")
    engine_two = db_module.get_engine("postgresql://one")
    engine_three = db_module.get_engine("postgresql://two")

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://one"
    assert engine_three == "engine:postgresql://two"
    assert created == ["postgresql://one", "postgresql://two"]


def test_dispose_engines_clears_cache(monkeypatch):
    """dispose_engines should dispose and forget cached engines."""

    class _Engine:
        disposed = False

        def dispose(self):
            self.disposed = True

    engine = _Engine()
    monkeypatch.setattr(db_module, "_engines", {"sqlite://": engine})

    db_module.dispose_engines()

    assert engine.disposed is True
    assert db_module._engines == {}


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the module helper."""
    monkeypatch.setattr(
        db_module,
        "get_engine",
        lambda url: f"engine:{url}",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_engine("sqlite://") == "engine:sqlite://"
