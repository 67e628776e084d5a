"""
Exports públicos do módulo record_fsm/events.

Eventos nomeados que agrupam transições.
"""

from record_fsm.events.event import Event

__all__ = [
    "Event",
]
