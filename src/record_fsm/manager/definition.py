"""
Definição de máquina de estados (MachineDefinition).

Configuração imutável e compartilhada por todos os registros de um tipo:
estado inicial, coluna de estado, registro de estados e eventos.
Construída uma vez por MachineBuilder e nunca alterada depois.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from record_fsm.manager.machine import BoundMachine
from record_fsm.protocols.record_query import RecordQueryProtocol
from record_fsm.protocols.state_store import StateStoreProtocol
from utils.errors import (
    ConfigurationError,
    InvalidStateError,
    UnknownEventError,
)

if TYPE_CHECKING:
    from record_fsm.actions.invoker import ActionInvoker
    from record_fsm.events.event import Event
    from record_fsm.protocols.lifecycle import LifecycleHostProtocol
    from record_fsm.states.registry import StateRegistry
    from record_fsm.states.state import State
    from record_fsm.transitions.transition import Transition

logger = logging.getLogger(__name__)

Trigger = Callable[[Any], bool]


class MachineDefinition:
    """
    Configuração selada de uma máquina de estados.

    Attributes:
        initial_state: Identificador do estado inicial, como declarado
        state_column: Nome da coluna persistida
        states: Registro de estados (valor → State)
        events: Eventos por nome (somente leitura)
        triggers: Tabela de disparo evento → callable(record)
    """

    __slots__ = (
        "_events",
        "_initial_state",
        "_invoker",
        "_query",
        "_state_column",
        "_states",
        "_store",
        "_triggers",
    )

    def __init__(
        self,
        initial_state: str,
        state_column: str,
        states: StateRegistry,
        events: Mapping[str, Event],
        store: StateStoreProtocol,
        invoker: ActionInvoker,
        query: RecordQueryProtocol | None = None,
    ) -> None:
        self._initial_state = initial_state
        self._state_column = state_column
        self._states = states if states.is_sealed else states.sealed()
        self._events: Mapping[str, Event] = MappingProxyType(dict(events))
        self._store = store
        self._invoker = invoker
        if query is None and isinstance(store, RecordQueryProtocol):
            query = store
        self._query = query
        self._triggers: Mapping[str, Trigger] = MappingProxyType(
            {
                name: functools.partial(event.fire, definition=self)
                for name, event in self._events.items()
            }
        )

    @property
    def initial_state(self) -> str:
        return self._initial_state

    @property
    def state_column(self) -> str:
        return self._state_column

    @property
    def states(self) -> StateRegistry:
        return self._states

    @property
    def state_values(self) -> tuple[str, ...]:
        return self._states.values()

    @property
    def state_names(self) -> tuple[str, ...]:
        return self._states.names()

    @property
    def events(self) -> Mapping[str, Event]:
        return self._events

    @property
    def triggers(self) -> Mapping[str, Trigger]:
        return self._triggers

    @property
    def store(self) -> StateStoreProtocol:
        return self._store

    @property
    def invoker(self) -> ActionInvoker:
        return self._invoker

    # Estados
    def lookup_state(self, identifier: object) -> State:
        """Resolve estado por valor ou nome.

        Raises:
            InvalidStateError: Se o identificador não está registrado.
        """
        state = self._states.resolve(identifier)
        if state is None:
            raise InvalidStateError(identifier)
        return state

    def read_state(self, record: Any) -> str | None:
        """Valor de estado persistido no registro (None se ainda não definido)."""
        raw = self._store.read_state(record, self._state_column)
        return None if raw is None else str(raw)

    def write_state(self, record: Any, value: str) -> None:
        self._store.write_state(record, self._state_column, value)

    # Eventos
    def event(self, name: str) -> Event:
        """Retorna evento pelo nome.

        Raises:
            UnknownEventError: Se o evento não foi declarado.
        """
        try:
            return self._events[name]
        except KeyError:
            raise UnknownEventError(name) from None

    def fire(self, record: Any, event_name: str) -> bool:
        """Dispara evento pelo nome via tabela de disparo."""
        trigger = self._triggers.get(event_name)
        if trigger is None:
            raise UnknownEventError(event_name)
        return trigger(record)

    def candidate_transitions(self, record: Any, event_name: str) -> tuple[Transition, ...]:
        return self.event(event_name).candidate_transitions(record, self)

    # Ciclo de vida
    def set_initial_state(self, record: Any) -> None:
        """Grava o estado inicial antes da primeira escrita durável."""
        self.write_state(record, self.lookup_state(self._initial_state).value)

    def run_initial_actions(self, record: Any) -> None:
        """Executa enter e after do estado inicial após a criação.

        O exit nunca roda aqui: não existe estado anterior.
        """
        state = self.lookup_state(self._initial_state)
        state.run_enter(record, self._invoker)
        state.run_after(record, self._invoker)

    def attach(self, host: LifecycleHostProtocol) -> None:
        """Registra os ganchos de criação no host.

        O host deve ser o mesmo `store` da definição quando ele também
        persiste estado; caso contrário as escritas de `fire` não chegam às
        linhas consultadas por `find_in_state` (gera warning).
        """
        if isinstance(host, StateStoreProtocol) and host is not self._store:
            logger.warning(
                "attach_store_mismatch",
                extra={
                    "host": type(host).__name__,
                    "state_store": type(self._store).__name__,
                },
            )
        host.on_before_create(self.set_initial_state)
        host.on_after_create(self.run_initial_actions)

    def bind(self, record: Any) -> BoundMachine:
        return BoundMachine(self, record)

    # Consultas por estado
    def find_in_state(
        self,
        state: object,
        filters: Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[Any]:
        """Busca registros no estado informado.

        Raises:
            InvalidStateError: Estado não registrado (antes de qualquer consulta).
            ConfigurationError: Host sem suporte a consultas.
        """
        combined = self._state_filters(state, filters)
        query = self._require_query()
        if combined is None:
            return []
        return query.query_records(combined, limit=limit)

    def find_first_in_state(
        self,
        state: object,
        filters: Mapping[str, Any] | None = None,
    ) -> Any | None:
        records = self.find_in_state(state, filters, limit=1)
        return records[0] if records else None

    def count_in_state(
        self,
        state: object,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        """Conta registros no estado informado (mesmas regras de find_in_state)."""
        combined = self._state_filters(state, filters)
        query = self._require_query()
        if combined is None:
            return 0
        return query.count_records(combined)

    def _state_filters(
        self,
        state: object,
        filters: Mapping[str, Any] | None,
    ) -> dict[str, Any] | None:
        # Condições combinadas com AND: coluna já filtrada por outro valor não casa nada
        value = self.lookup_state(state).value
        combined = dict(filters or {})
        if combined.get(self._state_column, value) != value:
            return None
        combined[self._state_column] = value
        return combined

    def _require_query(self) -> RecordQueryProtocol:
        if self._query is None:
            raise ConfigurationError("Host não implementa consultas de registros")
        return self._query

    def __repr__(self) -> str:
        return (
            f"MachineDefinition(initial={self._initial_state!r}, "
            f"column={self._state_column!r}, states={list(self.state_values)!r}, "
            f"events={list(self._events)!r})"
        )
