"""Unit tests for provider selection."""

import pytest

from threadly.util.di import ProdPersistenceProvider, select_providers
from tests.di import MockPersistenceProvider, build_test_container


def test_production_selection_uses_postgres():
    providers = select_providers()

    assert any(isinstance(p, ProdPersistenceProvider) for p in providers)
    assert not any(isinstance(p, MockPersistenceProvider) for p in providers)


def test_mocked_persistence_uses_in_memory():
    providers = select_providers(mocked={"persistence"})

    assert any(isinstance(p, MockPersistenceProvider) for p in providers)
    assert not any(isinstance(p, ProdPersistenceProvider) for p in providers)


def test_unknown_component_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"search"})
