"""
Exports públicos do módulo record_fsm/actions.

Referências de ação (nome de método ou callable) e seu invocador.
"""

from record_fsm.actions.invoker import (
    DEFAULT_INVOKER,
    ActionInvoker,
    ActionRef,
    InlineAction,
    NamedAction,
    as_action_ref,
    as_action_refs,
)

__all__ = [
    "DEFAULT_INVOKER",
    "ActionInvoker",
    "ActionRef",
    "InlineAction",
    "NamedAction",
    "as_action_ref",
    "as_action_refs",
]
