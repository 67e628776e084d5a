"""
Máquina ligada a um registro (BoundMachine).

Fachada fina por instância: consulta o estado corrente e delega
disparos de evento para a MachineDefinition compartilhada. Não guarda
estado próprio além das referências ao registro e à definição.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from record_fsm.manager.definition import MachineDefinition
    from record_fsm.transitions.transition import Transition


class BoundMachine:
    """
    Máquina de estados de um registro específico.

    Transições no mesmo registro não são seguras contra concorrência:
    o host deve serializá-las (lock por linha, versão otimista, etc.).
    """

    __slots__ = ("_definition", "_record")

    def __init__(self, definition: MachineDefinition, record: Any) -> None:
        self._definition = definition
        self._record = record

    @property
    def definition(self) -> MachineDefinition:
        return self._definition

    @property
    def record(self) -> Any:
        return self._record

    @property
    def current_state(self) -> str | None:
        """Valor de estado lido diretamente do host."""
        return self._definition.read_state(self._record)

    def is_in_state(self, identifier: object) -> bool:
        """Verifica se o registro está no estado (por nome ou valor).

        Raises:
            InvalidStateError: Se o estado não está registrado.
        """
        state = self._definition.lookup_state(identifier)
        return self.current_state == state.value

    def candidate_transitions_for_event(self, event_name: str) -> tuple[Transition, ...]:
        """Todas as transições do evento a partir do estado corrente."""
        return self._definition.candidate_transitions(self._record, event_name)

    def next_state_for_event(self, event_name: str) -> str | None:
        """Destino da primeira candidata, sem avaliar guards.

        Reflete o próximo estado potencial, não o resultado garantido.
        """
        candidates = self.candidate_transitions_for_event(event_name)
        return candidates[0].to_value if candidates else None

    def available_events(self) -> tuple[str, ...]:
        """Eventos com ao menos uma transição a partir do estado corrente."""
        current = self.current_state
        return tuple(
            name
            for name, event in self._definition.events.items()
            if event.candidates_from(current)
        )

    def fire(self, event_name: str) -> bool:
        """Dispara o evento; False quando nenhuma transição se aplica."""
        return self._definition.fire(self._record, event_name)

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "record_type": type(self._record).__name__,
            "current_state": self.current_state,
            "available_events": list(self.available_events()),
        }
