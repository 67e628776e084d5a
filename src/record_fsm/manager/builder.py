"""
Construtor de máquinas de estados (MachineBuilder).

Coleta estados e eventos durante a definição e sela tudo em uma
MachineDefinition imutável em `build()`. O builder é o único dono das
estruturas mutáveis; a definição recebe cópias.

Exemplo:
    builder = MachineBuilder(initial="needs_attention", column="state_machine")
    builder.state("needs_attention")
    builder.state("read", enter="mark_read")
    builder.state("closed", after=lambda r: r.notify())
    builder.event("view").transitions(to="read", from_="needs_attention")
    builder.event("close").transitions(
        to="closed", from_=["read", "awaiting_response"], guard="can_close"
    )
    definition = builder.build()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from config.settings import get_engine_settings
from record_fsm.actions.invoker import DEFAULT_INVOKER, ActionInvoker, as_action_ref
from record_fsm.events.event import Event
from record_fsm.manager.definition import MachineDefinition
from record_fsm.protocols.state_store import AttributeStateStore
from record_fsm.states.registry import StateRegistry
from record_fsm.states.state import State
from record_fsm.transitions.transition import Transition
from utils.errors import NoInitialStateError, UndeclaredStateError

if TYPE_CHECKING:
    from record_fsm.protocols.record_query import RecordQueryProtocol
    from record_fsm.protocols.state_store import StateStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _TransitionSpec:
    """Transição ainda não resolvida (identificadores como declarados)."""

    to: str
    sources: tuple[str, ...]
    guard: Any = None
    metadata: dict[str, Any] = field(default_factory=dict)


def _as_identifiers(value: Any) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        return (str(value),)
    return tuple(str(item) for item in value)


class EventBuilder:
    """Acumula transições de um evento, em ordem de declaração."""

    __slots__ = ("_metadata", "_name", "_specs")

    def __init__(self, name: str, metadata: dict[str, Any] | None = None) -> None:
        self._name = name
        self._metadata: dict[str, Any] = dict(metadata or {})
        self._specs: list[_TransitionSpec] = []

    @property
    def name(self) -> str:
        return self._name

    def transitions(
        self,
        to: Any,
        from_: Any,
        guard: Any = None,
        **metadata: Any,
    ) -> EventBuilder:
        """
        Declara transições para `to` a partir de um ou mais estados.

        Args:
            to: Estado de destino (nome ou valor)
            from_: Estado de origem ou lista de estados de origem
            guard: Nome de método ou callable avaliado sobre o registro
            **metadata: Opções extras, repassadas sem interpretação

        Returns:
            O próprio EventBuilder (encadeável)
        """
        self._specs.append(
            _TransitionSpec(
                to=str(to),
                sources=_as_identifiers(from_),
                guard=as_action_ref(guard) if guard is not None else None,
                metadata=dict(metadata),
            )
        )
        return self

    def update_metadata(self, metadata: dict[str, Any]) -> None:
        self._metadata.update(metadata)

    def build(self, states: StateRegistry) -> Event:
        """Resolve identificadores e sela o evento."""
        transitions: list[Transition] = []
        for spec in self._specs:
            to_value = self._resolve(spec.to, states)
            for source in spec.sources:
                transitions.append(
                    Transition(
                        from_value=self._resolve(source, states),
                        to_value=to_value,
                        guard=spec.guard,
                        metadata=spec.metadata,
                    )
                )
        return Event(name=self._name, transitions=tuple(transitions), metadata=self._metadata)

    def _resolve(self, identifier: str, states: StateRegistry) -> str:
        state = states.resolve(identifier)
        if state is None:
            raise UndeclaredStateError(identifier, self._name)
        return state.value


class MachineBuilder:
    """
    Construtor de MachineDefinition.

    Args:
        initial: Estado inicial (obrigatório; nome ou valor)
        column: Coluna de estado (padrão vem de EngineSettings)
        store: Acesso à coluna de estado no host
        invoker: Invocador de ações (guards, enter, exit, after)
        query: Host de consultas para find/count em estado

    Raises:
        NoInitialStateError: Se `initial` não foi informado.
    """

    __slots__ = ("_column", "_events", "_initial", "_invoker", "_query", "_states", "_store")

    def __init__(
        self,
        initial: Any = None,
        column: str | None = None,
        store: StateStoreProtocol | None = None,
        invoker: ActionInvoker | None = None,
        query: RecordQueryProtocol | None = None,
    ) -> None:
        if initial is None or initial == "":
            raise NoInitialStateError()
        self._initial = str(initial)
        self._column = column or get_engine_settings().default_column
        self._store = store if store is not None else AttributeStateStore()
        self._invoker = invoker if invoker is not None else DEFAULT_INVOKER
        self._query = query
        self._states = StateRegistry()
        self._events: dict[str, EventBuilder] = {}

    def state(
        self,
        name: str,
        value: str | None = None,
        enter: Any = None,
        exit: Any = None,  # noqa: A002
        after: Any = None,
    ) -> State:
        """Declara (ou redeclara) um estado."""
        state = State.declare(name, value=value, enter=enter, exit=exit, after=after)
        self._states.register(state)
        return state

    def event(self, name: str, **metadata: Any) -> EventBuilder:
        """Declara um evento; redeclarar o mesmo nome estende o evento existente."""
        builder = self._events.get(name)
        if builder is None:
            builder = EventBuilder(name, metadata)
            self._events[name] = builder
        else:
            builder.update_metadata(metadata)
        return builder

    def build(self) -> MachineDefinition:
        """Sela a definição.

        Raises:
            UndeclaredStateError: Se alguma transição referencia estado não declarado.
        """
        states = self._states.sealed()
        events = {name: builder.build(states) for name, builder in self._events.items()}
        definition = MachineDefinition(
            initial_state=self._initial,
            state_column=self._column,
            states=states,
            events=events,
            store=self._store,
            invoker=self._invoker,
            query=self._query,
        )
        logger.debug(
            "machine_defined",
            extra={
                "initial_state": self._initial,
                "state_column": self._column,
                "states": list(states.values()),
                "events": list(events),
            },
        )
        return definition
