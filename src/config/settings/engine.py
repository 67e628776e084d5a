"""Settings do engine de estados.

Valores padrão usados por MachineBuilder, loader YAML e logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class EngineSettings:
    """Configurações do engine.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log padrão
        default_column: Coluna de estado quando a definição não informa
        definitions_dir: Diretório com definições YAML de máquinas
    """

    environment: Environment = "development"
    service_name: str = "record_fsm"
    log_level: str = "INFO"
    default_column: str = "state"
    definitions_dir: Path = Path("machines")

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações do engine.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in {"development", "staging", "production"}:
            errors.append(f"RECORD_FSM_ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("RECORD_FSM_SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"RECORD_FSM_LOG_LEVEL inválido: {self.log_level}")

        if not self.default_column.strip():
            errors.append("RECORD_FSM_DEFAULT_COLUMN não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_engine_from_env() -> EngineSettings:
    """Carrega EngineSettings de variáveis de ambiente."""
    return EngineSettings(
        environment=_parse_environment(os.getenv("RECORD_FSM_ENVIRONMENT", "development")),
        service_name=os.getenv("RECORD_FSM_SERVICE_NAME", "record_fsm"),
        log_level=os.getenv("RECORD_FSM_LOG_LEVEL", "INFO").upper(),
        default_column=os.getenv("RECORD_FSM_DEFAULT_COLUMN", "state"),
        definitions_dir=Path(os.getenv("RECORD_FSM_DEFINITIONS_DIR", "machines")),
    )


@lru_cache(maxsize=1)
def get_engine_settings() -> EngineSettings:
    """Retorna instância cacheada de EngineSettings."""
    return _load_engine_from_env()
