"""Tests for the per-location lock registry."""

import gc

from wallet_ledger.application.use_cases.location_locks import LocationLocks


def test_spellings_of_one_file_share_a_key(tmp_path, monkeypatch) -> None:
    """Relative, absolute and file URI forms resolve to one key."""
    monkeypatch.chdir(tmp_path)
    keys = {
        LocationLocks.key_for("w.json"),
        LocationLocks.key_for("./w.json"),
        LocationLocks.key_for(tmp_path / "w.json"),
        LocationLocks.key_for(f"file://{tmp_path}/w.json"),
    }

    assert keys == {str((tmp_path / "w.json").resolve())}


def test_database_urls_are_keyed_verbatim() -> None:
    url = "postgresql://user@host/wallets"

    assert LocationLocks.key_for(url) == url


def test_same_location_returns_same_lock(tmp_path, monkeypatch) -> None:
    """Callers holding a lock see it again under any spelling."""
    monkeypatch.chdir(tmp_path)
    locks = LocationLocks()

    lock = locks.lock_for("w.json")

    assert locks.lock_for("./w.json") is lock
    assert locks.lock_for("other.json") is not lock


def test_unused_locks_leave_the_registry(tmp_path) -> None:
    """The registry does not keep one lock per location ever seen."""
    locks = LocationLocks()
    for index in range(100):
        with locks.lock_for(tmp_path / f"{index}.json"):
            pass
    gc.collect()

    assert len(locks._locks) == 0


def test_held_lock_stays_registered(tmp_path) -> None:
    locks = LocationLocks()
    location = tmp_path / "w.json"

    with locks.lock_for(location):
        gc.collect()
        assert len(locks._locks) == 1
        assert locks.lock_for(location)._is_owned()
