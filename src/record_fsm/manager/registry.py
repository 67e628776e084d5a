"""
Registro explícito tipo de registro → MachineDefinition.

Substitui atributos de classe compartilhados: quem precisa da máquina
de um tipo recebe o MachineRegistry por referência. Subclasses herdam
a definição do ancestral mais próximo (busca pelo MRO).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from record_fsm.manager.definition import MachineDefinition
    from record_fsm.manager.machine import BoundMachine


class MachineRegistry:
    """Mapa de tipos para definições de máquina."""

    __slots__ = ("_definitions",)

    def __init__(self) -> None:
        self._definitions: dict[type, MachineDefinition] = {}

    def register(self, record_type: type, definition: MachineDefinition) -> None:
        """Associa (ou substitui) a definição de um tipo."""
        self._definitions[record_type] = definition

    def definition_for(self, record_type: type) -> MachineDefinition:
        """Definição do tipo ou do ancestral mais próximo.

        Raises:
            KeyError: Se nenhum tipo da hierarquia tem máquina registrada.
        """
        for klass in record_type.__mro__:
            definition = self._definitions.get(klass)
            if definition is not None:
                return definition
        raise KeyError(f"Nenhuma máquina registrada para {record_type.__name__}")

    def bind(self, record: Any) -> BoundMachine:
        return self.definition_for(type(record)).bind(record)

    def __contains__(self, record_type: object) -> bool:
        if not isinstance(record_type, type):
            return False
        return any(klass in self._definitions for klass in record_type.__mro__)
