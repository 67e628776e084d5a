"""Testes para MemoryRecordStore (host em memória)."""

from __future__ import annotations

import pytest

from record_fsm import (
    LifecycleHostProtocol,
    MemoryRecordStore,
    RecordQueryProtocol,
    StateStoreProtocol,
)
from tests.fakes.fake_conversation import Conversation, SpecialConversation


class TestMemoryRecordStore:
    """Linhas persistidas, consultas e ganchos de criação."""

    def test_implements_every_host_protocol(self) -> None:
        store = MemoryRecordStore()

        assert isinstance(store, StateStoreProtocol)
        assert isinstance(store, RecordQueryProtocol)
        assert isinstance(store, LifecycleHostProtocol)

    def test_create_assigns_incremental_ids_and_snapshots_public_columns(self) -> None:
        store = MemoryRecordStore()

        first = store.create(Conversation(subject="Foo"))
        second = store.create(Conversation(subject="Bar"))

        assert (first.id, second.id) == (1, 2)
        row = store.get_row(first.id)
        assert row["subject"] == "Foo"
        assert "_calls" not in row

    def test_queries_use_persisted_rows(self) -> None:
        store = MemoryRecordStore()
        conversation = store.create(Conversation(subject="Foo"))
        conversation.subject = "Changed"

        assert store.query_records({"subject": "Foo"}) == [conversation]
        store.save(conversation)
        assert store.query_records({"subject": "Foo"}) == []
        assert store.count_records({"subject": "Changed"}) == 1

    def test_query_limit_and_unknown_columns(self) -> None:
        store = MemoryRecordStore()
        for _ in range(3):
            store.create(Conversation(subject="Foo"))

        assert len(store.query_records({"subject": "Foo"}, limit=2)) == 2
        assert store.query_records({"missing": None}) == []

    def test_write_state_updates_row_only_after_create(self) -> None:
        store = MemoryRecordStore()
        conversation = Conversation()
        store.write_state(conversation, "state", "draft")
        store.create(conversation)
        store.write_state(conversation, "state", "sent")

        assert store.read_state(conversation, "state") == "sent"
        assert store.get_row(conversation.id)["state"] == "sent"

    def test_hooks_run_around_create_in_order(self) -> None:
        store = MemoryRecordStore()
        events: list[str] = []
        store.on_before_create(lambda c: events.append(f"before:{getattr(c, 'id', None)}"))
        store.on_after_create(lambda c: events.append(f"after:{c.id}"))

        store.create(Conversation())

        assert events == ["before:None", "after:1"]

    def test_save_requires_created_record(self) -> None:
        with pytest.raises(KeyError):
            MemoryRecordStore().save(Conversation())

    def test_get_row_returns_copy(self) -> None:
        store = MemoryRecordStore()
        conversation = store.create(Conversation(subject="Foo"))
        store.get_row(conversation.id)["subject"] = "Tampered"

        assert store.get_row(conversation.id)["subject"] == "Foo"
        assert store.get_row(999) is None

    def test_auto_ids_skip_ids_supplied_by_caller(self) -> None:
        store = MemoryRecordStore()
        explicit = store.create(Conversation(subject="Foo", id=1))
        generated = store.create(Conversation(subject="Bar"))

        assert generated.id == 2
        assert store.count_records({}) == 2
        assert store.get_row(explicit.id)["subject"] == "Foo"

    def test_create_rejects_existing_id_before_hooks(self) -> None:
        store = MemoryRecordStore()
        events: list[str] = []
        store.create(Conversation(subject="Foo", id=7))
        store.on_before_create(lambda c: events.append("before"))

        with pytest.raises(ValueError):
            store.create(Conversation(subject="Bar", id=7))
        assert events == []
        assert store.get_row(7)["subject"] == "Foo"

    def test_record_type_restricts_create(self) -> None:
        store = MemoryRecordStore(record_type=Conversation)
        store.create(SpecialConversation())

        with pytest.raises(TypeError):
            store.create(object())
        assert store.count_records({}) == 1
