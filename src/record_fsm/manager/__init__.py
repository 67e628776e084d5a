"""
Exports públicos do módulo record_fsm/manager.

Construtor, definição selada, fachada por registro e registro de tipos.
"""

from record_fsm.manager.builder import EventBuilder, MachineBuilder
from record_fsm.manager.definition import MachineDefinition, Trigger
from record_fsm.manager.machine import BoundMachine
from record_fsm.manager.registry import MachineRegistry

__all__ = [
    "BoundMachine",
    "EventBuilder",
    "MachineBuilder",
    "MachineDefinition",
    "MachineRegistry",
    "Trigger",
]
