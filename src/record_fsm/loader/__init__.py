"""
Exports públicos do módulo record_fsm/loader.

Definições declarativas (dict/YAML) validadas com pydantic.
"""

from record_fsm.loader.schema import EventSpec, MachineSpec, StateSpec, TransitionSpec
from record_fsm.loader.yaml_loader import build_definition, load_machine_definition

__all__ = [
    "EventSpec",
    "MachineSpec",
    "StateSpec",
    "TransitionSpec",
    "build_definition",
    "load_machine_definition",
]
