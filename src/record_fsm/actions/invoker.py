"""Resolução e invocação de ações ligadas a um registro.

Uma ação é referenciada de duas formas:
    - NamedAction: nome de um método do registro (ex: "can_close")
    - InlineAction: callable que recebe o registro como único argumento

Guards, enter, exit e after usam o mesmo mecanismo. Exceções levantadas
pela ação propagam sem tratamento.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeAlias

from utils.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class NamedAction:
    """Referência a um método do próprio registro, pelo nome."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ConfigurationError("Nome de ação não pode ser vazio")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class InlineAction:
    """Callable avulso, invocado com o registro como único argumento."""

    func: Callable[[Any], Any]

    def __str__(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))


ActionRef: TypeAlias = NamedAction | InlineAction


def as_action_ref(value: Any) -> ActionRef:
    """Normaliza str/callable/ActionRef para ActionRef.

    Raises:
        ConfigurationError: Se o valor não for nome nem callable.
    """
    if isinstance(value, NamedAction | InlineAction):
        return value
    if isinstance(value, str):
        return NamedAction(value)
    if callable(value):
        return InlineAction(value)
    raise ConfigurationError(f"Referência de ação inválida: {value!r}")


def as_action_refs(value: Any) -> tuple[ActionRef, ...]:
    """Normaliza None, referência única ou lista, preservando a ordem."""
    if value is None:
        return ()
    if isinstance(value, str) or callable(value) or isinstance(
        value, NamedAction | InlineAction
    ):
        return (as_action_ref(value),)
    if isinstance(value, Iterable):
        return tuple(as_action_ref(item) for item in value)
    raise ConfigurationError(f"Referência de ação inválida: {value!r}")


class ActionInvoker:
    """Invoca ActionRefs contra um registro.

    Hosts com convenções próprias (ex: ações registradas fora do modelo)
    sobrescrevem `resolve`.
    """

    def resolve(self, ref: ActionRef, record: Any) -> Callable[[Any], Any]:
        """Retorna callable que aceita o registro como único argumento."""
        if isinstance(ref, InlineAction):
            return ref.func
        method = getattr(record, ref.name)
        return lambda _record: method()

    def invoke(self, ref: ActionRef, record: Any) -> Any:
        """Resolve e executa a ação, retornando seu resultado."""
        return self.resolve(ref, record)(record)

    def invoke_all(self, refs: Iterable[ActionRef], record: Any) -> None:
        """Executa as ações em ordem; a primeira falha interrompe as demais."""
        for ref in refs:
            self.invoke(ref, record)


DEFAULT_INVOKER = ActionInvoker()
