"""
Exports públicos do módulo record_fsm/stores.

Hosts de referência para desenvolvimento e testes.
"""

from record_fsm.stores.memory import MemoryRecordStore

__all__ = [
    "MemoryRecordStore",
]
