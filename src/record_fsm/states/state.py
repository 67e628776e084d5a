"""
Descritor de estado da máquina.

Um estado tem nome simbólico, valor persistido (por padrão igual ao nome)
e ações opcionais executadas ao redor de uma transição:

    - enter: ao entrar vindo de outro estado (antes de persistir)
    - after: após persistir, em ordem de declaração
    - exit: ao sair para outro estado (depois dos after do destino)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from record_fsm.actions.invoker import ActionRef, as_action_ref, as_action_refs

if TYPE_CHECKING:
    from record_fsm.actions.invoker import ActionInvoker


@dataclass(frozen=True, slots=True)
class State:
    """
    Estado imutável, criado na definição da máquina.

    Attributes:
        name: Nome simbólico do estado
        value: Representação persistida na coluna de estado
        enter: Ação de entrada (opcional)
        exit: Ação de saída (opcional)
        after: Ações executadas após o estado se tornar corrente
    """

    name: str
    value: str = ""
    enter: ActionRef | None = None
    exit: ActionRef | None = None
    after: tuple[ActionRef, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name or not str(self.name).strip():
            raise ValueError("Nome do estado não pode ser vazio")
        if not self.value:
            object.__setattr__(self, "value", str(self.name))

    @classmethod
    def declare(
        cls,
        name: str,
        value: str | None = None,
        enter: Any = None,
        exit: Any = None,  # noqa: A002
        after: Any = None,
    ) -> State:
        """Cria estado normalizando referências de ação (nome ou callable)."""
        return cls(
            name=str(name),
            value=str(value) if value is not None else str(name),
            enter=as_action_ref(enter) if enter is not None else None,
            exit=as_action_ref(exit) if exit is not None else None,
            after=as_action_refs(after),
        )

    def run_enter(self, record: Any, invoker: ActionInvoker) -> None:
        if self.enter is not None:
            invoker.invoke(self.enter, record)

    def run_after(self, record: Any, invoker: ActionInvoker) -> None:
        invoker.invoke_all(self.after, record)

    def run_exit(self, record: Any, invoker: ActionInvoker) -> None:
        if self.exit is not None:
            invoker.invoke(self.exit, record)

    def __str__(self) -> str:
        return self.name
