"""Pytest configuration and shared fixtures."""

import pytest

from rules_site.adapters.persistence.memory_store import InMemoryCounterStore
from rules_site.adapters.storage.key_value import MemoryStorage


class FakeClock:
    """Manually advanced epoch-seconds clock."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    return InMemoryCounterStore()


@pytest.fixture
def local_storage():
    return MemoryStorage()


@pytest.fixture
def session_storage():
    return MemoryStorage()


@pytest.fixture
def sample_rules_markdown():
    return (
        "# Правила разработки Frontend\n"
        "\n"
        "## 🚀 Архитектура\n"
        "Текст раздела.\n"
        "## Стилизация ✨\n"
        "### Подраздел не попадает в навигацию\n"
        "## Архитектура\n"
        "## 🎉\n"
    )
