"""Testes para find/count em estado sobre o host de consultas."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from record_fsm import MemoryRecordStore, RecordQueryProtocol
from tests.fakes.fake_conversation import Conversation, conversation_machine
from utils.errors import ConfigurationError, InvalidStateError


@pytest.fixture
def populated():
    """Store com três conversas: duas lidas e uma aguardando atenção."""
    store = MemoryRecordStore()
    definition = conversation_machine(store=store)
    definition.attach(store)

    first = store.create(Conversation(subject="Foo"))
    second = store.create(Conversation(subject="Bar"))
    third = store.create(Conversation(subject="Foo"))
    definition.bind(first).fire("view")
    definition.bind(second).fire("view")
    return definition, store, (first, second, third)


class TestFindInState:
    """Busca de registros por estado."""

    def test_find_all_in_state(self, populated) -> None:
        definition, _, (first, second, _third) = populated

        assert definition.find_in_state("read") == [first, second]

    def test_find_first_in_state(self, populated) -> None:
        definition, _, (first, _second, _third) = populated

        assert definition.find_first_in_state("read") is first
        assert definition.find_first_in_state("closed") is None

    def test_find_in_state_with_conditions(self, populated) -> None:
        definition, _, (_first, second, _third) = populated

        records = definition.find_in_state("read", {"subject": "Bar"})

        assert records == [second]
        assert definition.find_first_in_state("read", {"subject": "Bar"}) is second

    def test_conflicting_state_condition_matches_nothing(self, populated) -> None:
        definition, _, _ = populated

        assert definition.find_in_state("read", {"state_machine": "junk"}) == []
        assert definition.count_in_state("read", {"state_machine": "junk"}) == 0

    def test_caller_filters_are_not_mutated(self, populated) -> None:
        definition, _, _ = populated
        filters = {"subject": "Foo"}

        definition.find_in_state("read", filters)

        assert filters == {"subject": "Foo"}


class TestCountInState:
    """Contagem de registros por estado."""

    def test_count_in_state(self, populated) -> None:
        definition, store, _ = populated

        assert definition.count_in_state("read") == store.count_records({"state_machine": "read"})
        assert definition.count_in_state("read") == 2
        assert definition.count_in_state("needs_attention") == 1

    def test_count_in_state_with_conditions(self, populated) -> None:
        definition, _, _ = populated

        assert definition.count_in_state("read", {"subject": "Foo"}) == 1


class TestStateQueryValidation:
    """Validação antes de qualquer consulta ao host."""

    def test_invalid_state_raises_before_query(self) -> None:
        query = MagicMock(spec=RecordQueryProtocol)
        definition = conversation_machine(query=query)

        with pytest.raises(InvalidStateError):
            definition.find_in_state("dead")
        with pytest.raises(InvalidStateError):
            definition.count_in_state("dead")

        query.query_records.assert_not_called()
        query.count_records.assert_not_called()

    def test_filter_sent_to_host_includes_state_column(self) -> None:
        query = MagicMock(spec=RecordQueryProtocol)
        query.count_records.return_value = 7
        definition = conversation_machine(query=query)

        assert definition.count_in_state("read", {"subject": "Foo"}) == 7
        query.count_records.assert_called_once_with(
            {"subject": "Foo", "state_machine": "read"}
        )

    def test_host_without_query_support(self) -> None:
        definition = conversation_machine()

        with pytest.raises(ConfigurationError, match="consultas"):
            definition.find_in_state("read")
