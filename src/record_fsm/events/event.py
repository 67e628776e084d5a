"""
Evento: conjunto nomeado e imutável de transições.

A ordem das transições é a ordem de definição e decide o desempate:
ao disparar, a primeira candidata (origem == estado corrente) cujo
guard passa é executada e as demais nunca são avaliadas.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from record_fsm.transitions.transition import Transition

if TYPE_CHECKING:
    from record_fsm.manager.definition import MachineDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Event:
    """
    Evento selado na definição da máquina.

    Attributes:
        name: Nome do evento (ex: "close")
        transitions: Transições em ordem de definição
        metadata: Opções livres declaradas com o evento (ex: note="finished")
    """

    name: str
    transitions: tuple[Transition, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Nome do evento não pode ser vazio")
        object.__setattr__(self, "transitions", tuple(self.transitions))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def candidates_from(self, state_value: str) -> tuple[Transition, ...]:
        """Transições cuja origem é o valor informado, em ordem de definição."""
        return tuple(t for t in self.transitions if t.from_value == state_value)

    def candidate_transitions(
        self,
        record: Any,
        definition: MachineDefinition,
    ) -> tuple[Transition, ...]:
        """Transições aplicáveis ao estado corrente do registro."""
        return self.candidates_from(definition.read_state(record))

    def fire(self, record: Any, definition: MachineDefinition) -> bool:
        """
        Dispara o evento sobre o registro.

        Evento sem transição válida a partir do estado corrente não é erro:
        retorna False e o estado permanece inalterado.

        Returns:
            True se alguma transição foi executada
        """
        for transition in self.candidate_transitions(record, definition):
            if transition.perform(record, definition):
                return True

        logger.debug(
            "event_ignored",
            extra={
                "record_type": type(record).__name__,
                "fsm_event": self.name,
                "current_state": definition.read_state(record),
            },
        )
        return False
