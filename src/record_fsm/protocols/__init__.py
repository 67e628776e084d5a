"""
Exports públicos do módulo record_fsm/protocols.

Contratos que o host de registros precisa satisfazer.
"""

from record_fsm.protocols.lifecycle import LifecycleHook, LifecycleHostProtocol
from record_fsm.protocols.record_query import RecordQueryProtocol
from record_fsm.protocols.state_store import AttributeStateStore, StateStoreProtocol

__all__ = [
    "AttributeStateStore",
    "LifecycleHook",
    "LifecycleHostProtocol",
    "RecordQueryProtocol",
    "StateStoreProtocol",
]
