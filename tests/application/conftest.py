"""Shared fixtures for application use case tests."""

import copy
from unittest.mock import MagicMock

import pytest


class FakeDocumentStore:
    """In-memory document store keyed by location."""

    def __init__(self, documents: dict | None = None) -> None:
        self.documents = documents or {}
        self.parse_calls: list = []
        self.writes: list = []
        self.balance_writes: list = []

    def parse(self, location):
        self.parse_calls.append(location)
        return copy.deepcopy(self.documents.get(location, {}))

    def write(self, location, collection_key, record) -> None:
        self.writes.append((location, collection_key, dict(record)))
        document = self.documents.setdefault(location, {})
        document.setdefault(collection_key, []).append(dict(record))

    def write_balance(self, location, name, balance) -> None:
        self.balance_writes.append((location, name, balance))
        for wallet in self.documents[location]["wallets"]:
            if wallet["name"] == name:
                wallet["balance"] = balance
                return


@pytest.fixture
def store() -> FakeDocumentStore:
    """Store holding two wallets at the ``main`` location."""
    return FakeDocumentStore(
        {
            "main": {
                "wallets": [
                    {"name": "Bingo", "address": "0" * 130, "balance": 100},
                    {"name": "Bongo", "address": "b" * 64, "balance": 0},
                ]
            }
        }
    )


@pytest.fixture
def duplicate_store() -> FakeDocumentStore:
    """Store whose document holds two records with the same name."""
    return FakeDocumentStore(
        {
            "dupes": {
                "wallets": [
                    {"name": "Twin", "address": "first", "balance": 1},
                    {"name": "Twin", "address": "second", "balance": 2},
                ]
            }
        }
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
