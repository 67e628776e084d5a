"""Exceções de domínio da máquina de estados.

Hierarquia:
    StateMachineError
    ├── ConfigurationError          (definição inválida, fatal para a definição)
    │   ├── NoInitialStateError
    │   └── UndeclaredStateError
    ├── InvalidStateError           (consulta por estado inexistente, recuperável)
    └── UnknownEventError           (evento não declarado)

Falhas de ações do host (enter/exit/after/guard) NÃO são encapsuladas:
propagam inalteradas para quem disparou o evento.
"""

from __future__ import annotations


class StateMachineError(Exception):
    """Base para todas as falhas do engine de estados."""


class ConfigurationError(StateMachineError):
    """Definição de máquina inválida."""


class NoInitialStateError(ConfigurationError):
    """Máquina definida sem estado inicial."""

    def __init__(self, message: str = "Máquina de estados exige 'initial'") -> None:
        super().__init__(message)


class UndeclaredStateError(ConfigurationError):
    """Transição referencia estado que nunca foi declarado."""

    def __init__(self, identifier: object, event_name: str) -> None:
        self.identifier = identifier
        self.event_name = event_name
        super().__init__(
            f"Evento '{event_name}' referencia estado não declarado: {identifier!r}"
        )


class InvalidStateError(StateMachineError, LookupError):
    """Estado informado não existe no registro da máquina."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"Estado inválido: {identifier!r}")


class UnknownEventError(StateMachineError, LookupError):
    """Evento informado não foi declarado na máquina."""

    def __init__(self, event_name: object) -> None:
        self.event_name = event_name
        super().__init__(f"Evento não declarado: {event_name!r}")
