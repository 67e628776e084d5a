"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InvalidStateError,
    NoInitialStateError,
    StateMachineError,
    UndeclaredStateError,
    UnknownEventError,
)

__all__ = [
    "ConfigurationError",
    "InvalidStateError",
    "NoInitialStateError",
    "StateMachineError",
    "UndeclaredStateError",
    "UnknownEventError",
]
