"""Testes para config.logging.

Cobre: configure_logging, get_logger, ServiceContextFilter,
create_json_formatter e logs emitidos pelo engine.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    ServiceContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from tests.fakes.fake_conversation import Conversation, conversation_machine


def _record(msg: str = "message", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="record_fsm.test",
        level=logging.DEBUG,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level_from_settings(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("RECORD_FSM_LOG_LEVEL", "debug")
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_explicit_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, ServiceContextFilter) for f in root.handlers[0].filters)


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("record_fsm.manager")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("record_fsm.manager")


class TestServiceContextFilter:
    """Testes para ServiceContextFilter."""

    def test_filter_adds_service_and_empty_record_type(self) -> None:
        record = _record()
        assert ServiceContextFilter("billing").filter(record) is True
        assert record.service == "billing"
        assert record.record_type == ""

    def test_filter_preserves_explicit_record_type(self) -> None:
        record = _record(record_type="Conversation")
        ServiceContextFilter("svc").filter(record)
        assert record.record_type == "Conversation"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "service", "record_type"}
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        record = _record("transition_performed", service="svc", record_type="Conversation")
        record.to_state = "closed"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "transition_performed"
        assert payload["logger"] == "record_fsm.test"
        assert payload["level"] == "DEBUG"
        assert payload["record_type"] == "Conversation"
        assert payload["to_state"] == "closed"


class TestEngineLogging:
    """Logs DEBUG emitidos pelo engine."""

    def test_transition_and_ignored_event_are_logged(self, caplog) -> None:
        definition = conversation_machine()
        conversation = Conversation(state_machine="needs_attention")

        with caplog.at_level(logging.DEBUG, logger="record_fsm"):
            definition.fire(conversation, "view")
            definition.fire(conversation, "unjunk")

        messages = [r.getMessage() for r in caplog.records]
        assert "transition_performed" in messages
        assert "event_ignored" in messages
        performed = next(r for r in caplog.records if r.getMessage() == "transition_performed")
        assert performed.from_state == "needs_attention"
        assert performed.to_state == "read"
        assert performed.loopback is False
