"""Agregador de settings do record_fsm.

Re-exporta settings e funções de carregamento.
"""

from __future__ import annotations

from config.settings.engine import (
    EngineSettings,
    Environment,
    get_engine_settings,
)

__all__ = [
    "EngineSettings",
    "Environment",
    "get_engine_settings",
]
