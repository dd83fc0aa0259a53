"""Tests for Settings parsing."""

import pytest
from pydantic import ValidationError

from rules_site.adapters.persistence.memory_store import InMemoryCounterStore
from rules_site.config import Settings
from rules_site.domain.value_objects.enums import StoreBackend
from rules_site.infrastructure.api.dependencies import build_counter_store


def test_stats_backend_parses_to_enum():
    assert Settings(STATS_BACKEND="sql").stats_backend is StoreBackend.SQL
    assert Settings(STATS_BACKEND="memory").stats_backend is StoreBackend.MEMORY


def test_unknown_stats_backend_is_rejected():
    with pytest.raises(ValidationError):
        Settings(STATS_BACKEND="redis")


def test_memory_backend_builds_in_memory_store():
    assert isinstance(build_counter_store(StoreBackend.MEMORY), InMemoryCounterStore)
