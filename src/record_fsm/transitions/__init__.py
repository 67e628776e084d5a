"""
Exports públicos do módulo record_fsm/transitions.

Arestas dirigidas (com guard opcional) entre valores de estado.
"""

from record_fsm.transitions.transition import Transition

__all__ = [
    "Transition",
]
