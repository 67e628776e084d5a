"""Filters de logging para injeção de contexto.

Campos injetados:
- service: Nome do serviço (ex: record_fsm)
- record_type: Tipo do registro envolvido na transição (vazio se ausente)
"""

from __future__ import annotations

import logging


class ServiceContextFilter(logging.Filter):
    """Injeta service e record_type em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; record_type passado via `extra` é preservado.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        record.service = self._service_name
        if not getattr(record, "record_type", None):
            record.record_type = ""
        return True
