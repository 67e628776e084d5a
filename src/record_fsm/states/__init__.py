"""
Exports públicos do módulo record_fsm/states.

Descritores de estado e o registro ordenado que os indexa.
"""

from record_fsm.states.registry import StateRegistry
from record_fsm.states.state import State

__all__ = [
    "State",
    "StateRegistry",
]
