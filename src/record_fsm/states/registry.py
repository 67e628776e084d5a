"""
Registro ordenado de estados, indexado pelo valor persistido.

Redeclarar um valor substitui o descritor anterior (última definição vence)
mantendo a posição original na enumeração. Um registro selado (`sealed()`)
rejeita novos registros.
"""

from __future__ import annotations

from collections.abc import Iterator

from record_fsm.states.state import State
from utils.errors import ConfigurationError


class StateRegistry:
    """Mapa valor → State, em ordem de declaração."""

    __slots__ = ("_sealed", "_states")

    def __init__(self, states: list[State] | None = None) -> None:
        self._states: dict[str, State] = {}
        self._sealed = False
        for state in states or []:
            self.register(state)

    def register(self, state: State) -> None:
        """Insere ou substitui o estado de mesmo valor.

        Raises:
            ConfigurationError: Se o registro já foi selado.
        """
        if self._sealed:
            raise ConfigurationError("Registro de estados selado não aceita alterações")
        self._states[state.value] = state

    def lookup(self, value: str) -> State | None:
        """Retorna o estado registrado para o valor (ou None)."""
        return self._states.get(value)

    def by_name(self, name: str) -> State | None:
        """Retorna o estado com o nome simbólico informado (ou None)."""
        for state in self._states.values():
            if state.name == name:
                return state
        return None

    def resolve(self, identifier: object) -> State | None:
        """Resolve identificador como valor e, na falta, como nome."""
        key = str(identifier)
        return self.lookup(key) or self.by_name(key)

    def values(self) -> tuple[str, ...]:
        """Valores registrados, em ordem de declaração."""
        return tuple(self._states)

    def names(self) -> tuple[str, ...]:
        """Nomes registrados, em ordem de declaração."""
        return tuple(state.name for state in self._states.values())

    def copy(self) -> StateRegistry:
        return StateRegistry(list(self._states.values()))

    def sealed(self) -> StateRegistry:
        """Cópia somente leitura, usada pela definição selada."""
        registry = self.copy()
        registry._sealed = True
        return registry

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def __contains__(self, value: object) -> bool:
        return value in self._states

    def __iter__(self) -> Iterator[State]:
        return iter(self._states.values())

    def __len__(self) -> int:
        return len(self._states)
