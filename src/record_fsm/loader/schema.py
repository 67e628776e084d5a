"""Contratos do formato declarativo de máquinas (YAML/dict)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _listify(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str | int):
        return [value]
    return value


class StateSpec(BaseModel):
    """Estado declarado (ações referenciadas por nome de método)."""

    model_config = ConfigDict(extra="forbid")

    name: str
    value: str | int | None = None
    enter: str | None = None
    exit: str | None = None
    after: list[str] = Field(default_factory=list)

    @field_validator("after", mode="before")
    @classmethod
    def normalize_after(cls, value: Any) -> Any:
        return _listify(value)


class TransitionSpec(BaseModel):
    """Transição declarada; chaves desconhecidas viram metadata."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    to: str | int
    from_: list[str | int] = Field(alias="from", min_length=1)
    guard: str | None = None

    @field_validator("from_", mode="before")
    @classmethod
    def normalize_from(cls, value: Any) -> Any:
        return _listify(value)

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class EventSpec(BaseModel):
    """Evento declarado."""

    model_config = ConfigDict(extra="forbid")

    metadata: dict[str, Any] = Field(default_factory=dict)
    transitions: list[TransitionSpec] = Field(default_factory=list)


class MachineSpec(BaseModel):
    """Definição completa de máquina."""

    model_config = ConfigDict(extra="forbid")

    initial: str | int
    column: str | None = None
    states: list[StateSpec] = Field(default_factory=list)
    events: dict[str, EventSpec] = Field(default_factory=dict)

    @field_validator("states", mode="before")
    @classmethod
    def expand_state_names(cls, value: Any) -> Any:
        # Permite "- read" como atalho para "- name: read"
        if not isinstance(value, list):
            return value
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @field_validator("events", mode="before")
    @classmethod
    def allow_empty_events(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {name: spec if spec is not None else {} for name, spec in value.items()}
