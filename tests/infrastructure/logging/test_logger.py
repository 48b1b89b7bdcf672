"""Tests for the ledger's application and usage logs."""

import logging
from unittest.mock import MagicMock

import pytest

from wallet_ledger.application.use_cases.location_locks import LocationLocks
from wallet_ledger.application.use_cases.update_wallet_balance import (
    UpdateWalletBalanceUseCase,
)
from wallet_ledger.domain.models.wallet import UpdateStatus
from wallet_ledger.infrastructure.logging import logger as logger_module


LOGGER_NAMES = ("wallet_ledger", "wallet_ledger.usage")


def _drop_handlers() -> None:
    for name in LOGGER_NAMES:
        configured = logging.getLogger(name)
        for handler in list(configured.handlers):
            configured.removeHandler(handler)
            handler.close()


def _flush(wrapper) -> None:
    for handler in wrapper.logger.handlers:
        handler.flush()


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20260101"),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    _drop_handlers()
    yield tmp_path
    _drop_handlers()


def test_app_log_file_lives_under_app_subdir(log_root) -> None:
    app_logger = logger_module.get_app_logger()

    file_handlers = [
        h for h in app_logger.logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    expected = log_root / "logs" / "app" / "20260101_wallet_ledger.log"
    assert [h.baseFilename for h in file_handlers] == [str(expected)]
    assert any(
        not isinstance(h, logging.FileHandler)
        for h in app_logger.logger.handlers
    )


def test_usage_log_is_file_only(log_root) -> None:
    """Usage records never reach the console."""
    usage_logger = logger_module.get_usage_logger()

    handlers = usage_logger.logger.handlers
    expected = log_root / "logs" / "usage" / "20260101_usage.log"
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.FileHandler)
    assert handlers[0].baseFilename == str(expected)


def test_usage_records_stay_out_of_app_log(log_root) -> None:
    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    usage_logger.info("command=%s name=%s", "balance", "Bingo")
    _flush(usage_logger)
    _flush(app_logger)

    usage_text = (
        log_root / "logs" / "usage" / "20260101_usage.log"
    ).read_text(encoding="utf-8")
    app_text = (
        log_root / "logs" / "app" / "20260101_wallet_ledger.log"
    ).read_text(encoding="utf-8")
    assert "command=balance name=Bingo" in usage_text
    assert "wallet_ledger.usage" in usage_text
    assert "command=balance" not in app_text


def test_missed_update_is_written_to_app_log(log_root) -> None:
    """An update of an unknown wallet leaves an INFO line naming it."""
    store = MagicMock()
    store.parse.return_value = {
        "wallets": [{"name": "Bingo", "address": "a", "balance": 1}]
    }
    use_case = UpdateWalletBalanceUseCase(store, locks=LocationLocks())

    result = use_case.execute("main", "Ghost", 5, "credit")
    _flush(logger_module.get_app_logger())

    assert result.status is UpdateStatus.NOT_FOUND
    store.write_balance.assert_not_called()
    lines = (
        log_root / "logs" / "app" / "20260101_wallet_ledger.log"
    ).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "| INFO     | wallet_ledger |" in lines[0]
    assert lines[0].endswith("No account found for 'Ghost'")


def test_rebuilding_a_configured_logger_adds_no_handlers(log_root) -> None:
    first = (
        logger_module.LoggerBuilder()
        .name("wallet_ledger")
        .subdir("app")
        .prefix("wallet_ledger")
        .build()
    )
    count = len(first.handlers)

    again = logger_module.LoggerBuilder().name("wallet_ledger").build()

    assert again is first
    assert len(again.handlers) == count
    assert first.propagate is False


def test_ledger_loggers_are_process_singletons(log_root) -> None:
    assert logger_module.get_app_logger() is logger_module.get_app_logger()
    assert (
        logger_module.get_usage_logger()
        is logger_module.get_usage_logger()
    )
    assert (
        logger_module.get_app_logger()
        is not logger_module.get_usage_logger()
    )
