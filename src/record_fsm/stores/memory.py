"""Store de registros em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.

Implementa os três contratos de host do engine:
    - StateStoreProtocol (coluna de estado)
    - RecordQueryProtocol (find/count por igualdade)
    - LifecycleHostProtocol (ganchos before/after create)
"""

from __future__ import annotations

import copy
import itertools
import logging
from collections.abc import Mapping
from typing import Any

from record_fsm.protocols.lifecycle import LifecycleHook, LifecycleHostProtocol
from record_fsm.protocols.record_query import RecordQueryProtocol
from record_fsm.protocols.state_store import StateStoreProtocol

logger = logging.getLogger(__name__)


class MemoryRecordStore(StateStoreProtocol, RecordQueryProtocol, LifecycleHostProtocol):
    """Store em memória (apenas dev/test).

    Cada registro criado sem `id` ganha um incremental (ids já usados são
    pulados); o store guarda uma cópia das colunas públicas (a "linha
    persistida"). Consultas filtram sobre essas linhas, não sobre o estado
    em memória dos objetos.

    Um store representa uma única tabela: os ganchos de criação valem para
    todo registro criado nele. Com `record_type`, registros de outro tipo
    são rejeitados.

    Args:
        record_type: Tipo aceito em `create` (None aceita qualquer tipo)
    """

    def __init__(self, record_type: type | None = None) -> None:
        self._record_type = record_type
        self._rows: dict[int, dict[str, Any]] = {}  # id -> colunas persistidas
        self._records: dict[int, Any] = {}  # id -> objeto
        self._ids = itertools.count(1)
        self._before_create: list[LifecycleHook] = []
        self._after_create: list[LifecycleHook] = []

    # Lifecycle (protocolo LifecycleHostProtocol)
    def on_before_create(self, hook: LifecycleHook) -> None:
        self._before_create.append(hook)

    def on_after_create(self, hook: LifecycleHook) -> None:
        self._after_create.append(hook)

    def create(self, record: Any) -> Any:
        """Persiste registro novo executando os ganchos de criação.

        Raises:
            TypeError: Se o registro não é do `record_type` do store.
            ValueError: Se o `id` informado já existe no store.
        """
        if self._record_type is not None and not isinstance(record, self._record_type):
            raise TypeError(
                f"Store aceita apenas {self._record_type.__name__}, "
                f"recebeu {type(record).__name__}"
            )
        record_id = getattr(record, "id", None)
        if record_id is not None and record_id in self._rows:
            raise ValueError(f"Registro com id {record_id!r} já existe no store")

        for hook in self._before_create:
            hook(record)

        if record_id is None:
            record_id = self._next_id()
            record.id = record_id
        self._records[record_id] = record
        self._rows[record_id] = self._snapshot(record)
        logger.debug("record_created", extra={"record_id": record_id})

        for hook in self._after_create:
            hook(record)
        return record

    def _next_id(self) -> int:
        # Pula ids informados explicitamente em creates anteriores
        record_id = next(self._ids)
        while record_id in self._rows:
            record_id = next(self._ids)
        return record_id

    def save(self, record: Any) -> None:
        """Persiste todas as colunas públicas de um registro já criado."""
        self._rows[self._require_id(record)] = self._snapshot(record)

    def get_row(self, record_id: int) -> dict[str, Any] | None:
        """Retorna cópia da linha persistida (apenas para testes)."""
        row = self._rows.get(record_id)
        return dict(row) if row is not None else None

    # Estado (protocolo StateStoreProtocol)
    def read_state(self, record: Any, column: str) -> Any:
        return getattr(record, column, None)

    def write_state(self, record: Any, column: str, value: str) -> None:
        setattr(record, column, value)
        record_id = getattr(record, "id", None)
        if record_id in self._rows:
            self._rows[record_id][column] = value

    # Consultas (protocolo RecordQueryProtocol)
    def query_records(
        self,
        filters: Mapping[str, Any],
        limit: int | None = None,
    ) -> list[Any]:
        matches = (
            self._records[record_id]
            for record_id, row in self._rows.items()
            if self._matches(row, filters)
        )
        if limit is not None:
            return list(itertools.islice(matches, limit))
        return list(matches)

    def count_records(self, filters: Mapping[str, Any]) -> int:
        return sum(1 for row in self._rows.values() if self._matches(row, filters))

    @staticmethod
    def _matches(row: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
        return all(key in row and row[key] == value for key, value in filters.items())

    @staticmethod
    def _snapshot(record: Any) -> dict[str, Any]:
        return {
            key: copy.copy(value)
            for key, value in vars(record).items()
            if not key.startswith("_")
        }

    @staticmethod
    def _require_id(record: Any) -> int:
        record_id = getattr(record, "id", None)
        if record_id is None:
            raise KeyError("Registro ainda não foi criado no store")
        return record_id
