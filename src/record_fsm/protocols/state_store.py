"""Protocolo de leitura/escrita da coluna de estado no host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StateStoreProtocol(ABC):
    """Contrato mínimo para acessar o estado persistido de um registro.

    `write_state` deve garantir durabilidade ao retornar: o engine
    considera o passo de persistência concluído nesse ponto.
    """

    @abstractmethod
    def read_state(self, record: Any, column: str) -> Any: ...

    @abstractmethod
    def write_state(self, record: Any, column: str, value: str) -> None: ...


class AttributeStateStore(StateStoreProtocol):
    """Lê e grava o estado como atributo do próprio registro.

    Adequado para objetos sem persistência externa ou hosts que
    persistem o registro inteiro por conta própria.
    """

    def read_state(self, record: Any, column: str) -> Any:
        return getattr(record, column, None)

    def write_state(self, record: Any, column: str, value: str) -> None:
        setattr(record, column, value)
