"""Loader de definições de máquinas a partir de YAML ou dict.

Formato:
    initial: needs_attention
    column: state_machine
    states:
      - needs_attention
      - name: read
        enter: read_enter_action
        after: [first_action, second_action]
    events:
      close:
        metadata: {note: finished}
        transitions:
          - {to: closed, from: [read, awaiting_response], guard: can_close}
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from config.settings import get_engine_settings
from record_fsm.loader.schema import MachineSpec
from record_fsm.manager.builder import MachineBuilder
from utils.errors import ConfigurationError, NoInitialStateError

if TYPE_CHECKING:
    from record_fsm.actions.invoker import ActionInvoker
    from record_fsm.manager.definition import MachineDefinition
    from record_fsm.protocols.record_query import RecordQueryProtocol
    from record_fsm.protocols.state_store import StateStoreProtocol


def build_definition(
    data: Mapping[str, Any],
    store: StateStoreProtocol | None = None,
    invoker: ActionInvoker | None = None,
    query: RecordQueryProtocol | None = None,
) -> MachineDefinition:
    """Constrói MachineDefinition a partir de um mapa declarativo.

    Raises:
        NoInitialStateError: Se `initial` está ausente.
        ConfigurationError: Se o mapa viola o schema.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Definição de máquina deve ser um mapa")
    if data.get("initial") in (None, ""):
        raise NoInitialStateError()

    try:
        spec = MachineSpec.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(f"Definição de máquina inválida: {exc}") from exc

    builder = MachineBuilder(
        initial=spec.initial,
        column=spec.column,
        store=store,
        invoker=invoker,
        query=query,
    )
    for state in spec.states:
        builder.state(
            state.name,
            value=None if state.value is None else str(state.value),
            enter=state.enter,
            exit=state.exit,
            after=state.after,
        )
    for name, event in spec.events.items():
        event_builder = builder.event(name, **event.metadata)
        for transition in event.transitions:
            event_builder.transitions(
                to=transition.to,
                from_=transition.from_,
                guard=transition.guard,
                **transition.metadata,
            )
    return builder.build()


def _resolve_path(source: str | Path) -> Path:
    path = Path(source)
    if path.suffix in (".yaml", ".yml") or path.exists():
        return path
    return get_engine_settings().definitions_dir / f"{source}.yaml"


def load_machine_definition(
    source: str | Path,
    store: StateStoreProtocol | None = None,
    invoker: ActionInvoker | None = None,
    query: RecordQueryProtocol | None = None,
) -> MachineDefinition:
    """Carrega definição de arquivo YAML.

    Args:
        source: Caminho do arquivo ou nome (resolvido em definitions_dir)

    Raises:
        FileNotFoundError: Se o arquivo não existe
        ConfigurationError: Se o YAML é inválido ou viola o schema
    """
    yaml_path = _resolve_path(source)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Definição não encontrada: {yaml_path}")

    try:
        with yaml_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"YAML inválido em {yaml_path}: {exc}") from exc

    return build_definition(data, store=store, invoker=invoker, query=query)
