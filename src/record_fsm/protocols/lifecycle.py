"""Protocolo de ganchos de criação de registros no host."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

LifecycleHook = Callable[[Any], None]


class LifecycleHostProtocol(ABC):
    """Host que expõe ganchos antes e depois da criação durável.

    - before_create: antes da primeira escrita durável do registro
    - after_create: imediatamente após a criação ter sucesso
    """

    @abstractmethod
    def on_before_create(self, hook: LifecycleHook) -> None: ...

    @abstractmethod
    def on_after_create(self, hook: LifecycleHook) -> None: ...
