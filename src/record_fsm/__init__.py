"""
Módulo record_fsm: máquina de estados acoplável a registros persistentes.

O engine é agnóstico de armazenamento: do host ele precisa apenas ler o
valor de estado de um registro, persistir um novo valor e invocar ações
(por nome de método ou callable) ligadas ao registro.

Estrutura:
    - actions/: Referências de ação e invocador
    - states/: Descritores de estado e registro ordenado
    - transitions/: Transição (guard, loopback, ordem das ações)
    - events/: Eventos nomeados que agrupam transições
    - manager/: Builder, definição selada, fachada por registro
    - protocols/: Contratos do host (estado, consultas, ciclo de vida)
    - stores/: Host em memória para dev/test
    - loader/: Definições declarativas (dict/YAML)
"""

# Ações
from record_fsm.actions import (
    ActionInvoker,
    ActionRef,
    InlineAction,
    NamedAction,
)

# Eventos
from record_fsm.events import Event

# Loader
from record_fsm.loader import build_definition, load_machine_definition

# Manager
from record_fsm.manager import (
    BoundMachine,
    EventBuilder,
    MachineBuilder,
    MachineDefinition,
    MachineRegistry,
)

# Protocolos do host
from record_fsm.protocols import (
    AttributeStateStore,
    LifecycleHostProtocol,
    RecordQueryProtocol,
    StateStoreProtocol,
)

# Estados
from record_fsm.states import State, StateRegistry

# Stores
from record_fsm.stores import MemoryRecordStore

# Transições
from record_fsm.transitions import Transition

__all__ = [
    # Ações
    "ActionInvoker",
    "ActionRef",
    # Protocolos
    "AttributeStateStore",
    # Manager
    "BoundMachine",
    # Eventos
    "Event",
    "EventBuilder",
    "InlineAction",
    "LifecycleHostProtocol",
    "MachineBuilder",
    "MachineDefinition",
    "MachineRegistry",
    # Stores
    "MemoryRecordStore",
    "NamedAction",
    "RecordQueryProtocol",
    # Estados
    "State",
    "StateRegistry",
    "StateStoreProtocol",
    # Transições
    "Transition",
    # Loader
    "build_definition",
    "load_machine_definition",
]
