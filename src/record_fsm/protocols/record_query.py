"""Protocolo de consulta de coleções de registros no host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class RecordQueryProtocol(ABC):
    """Contrato para consultas usadas por find/count em estado.

    `filters` é um mapa de condições de igualdade (campo → valor)
    combinadas com AND; o engine apenas acrescenta a condição da
    coluna de estado.
    """

    @abstractmethod
    def query_records(
        self,
        filters: Mapping[str, Any],
        limit: int | None = None,
    ) -> list[Any]: ...

    @abstractmethod
    def count_records(self, filters: Mapping[str, Any]) -> int: ...
