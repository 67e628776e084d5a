"""
Transição: aresta dirigida entre dois valores de estado.

Igualdade considera apenas (from_value, to_value); guard e metadata
ficam de fora, o que permite buscar transições em tabelas por
`Transition(from_value=..., to_value=...)`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from record_fsm.actions.invoker import ActionRef, as_action_ref

if TYPE_CHECKING:
    from record_fsm.manager.definition import MachineDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Transition:
    """
    Transição imutável pertencente a um Event.

    Attributes:
        from_value: Valor do estado de origem
        to_value: Valor do estado de destino
        guard: Predicado sobre o registro (None = sempre passa)
        metadata: Dados livres do definidor, não interpretados pelo engine
    """

    from_value: str
    to_value: str
    guard: ActionRef | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.guard is not None:
            object.__setattr__(self, "guard", as_action_ref(self.guard))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return (self.from_value, self.to_value) == (other.from_value, other.to_value)

    def __hash__(self) -> int:
        return hash((self.from_value, self.to_value))

    def __repr__(self) -> str:
        return f"Transition({self.from_value!r} -> {self.to_value!r})"

    def allowed(self, record: Any, definition: MachineDefinition) -> bool:
        """Avalia o guard; qualquer resultado truthy libera a transição."""
        if self.guard is None:
            return True
        return bool(definition.invoker.invoke(self.guard, record))

    def perform(self, record: Any, definition: MachineDefinition) -> bool:
        """
        Executa a transição sobre o registro.

        Ordem numa transição real (origem != destino):
            destino.enter → persistência → destino.after → origem.exit

        Em loopback (destino == estado corrente) apenas a persistência
        acontece. Falhas de ações propagam sem rollback: se um after ou
        o exit falhar, o novo estado já persistido permanece.

        Returns:
            True se a transição foi executada, False se o guard bloqueou
        """
        if not self.allowed(record, definition):
            return False

        current_value = definition.read_state(record)
        loopback = current_value == self.to_value
        next_state = definition.lookup_state(self.to_value)
        previous_state = definition.states.lookup(current_value)

        if not loopback:
            next_state.run_enter(record, definition.invoker)

        definition.write_state(record, next_state.value)

        if not loopback:
            next_state.run_after(record, definition.invoker)
            if previous_state is not None:
                previous_state.run_exit(record, definition.invoker)

        logger.debug(
            "transition_performed",
            extra={
                "record_type": type(record).__name__,
                "from_state": current_value,
                "to_state": next_state.value,
                "loopback": loopback,
            },
        )
        return True
