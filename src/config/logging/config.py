"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização da aplicação host
    configure_logging(level="DEBUG")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("transition_performed", extra={"to_state": "closed"})

O engine só emite logs DEBUG; nenhuma falha é convertida em log.
"""

from __future__ import annotations

import logging

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.engine import VALID_LOG_LEVELS, get_engine_settings


def configure_logging(
    level: str | None = None,
    service_name: str | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (padrão: EngineSettings.log_level).
        service_name: Nome do serviço (padrão: EngineSettings.service_name).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    settings = get_engine_settings()
    level_upper = (level or settings.log_level).upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name or settings.service_name))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
