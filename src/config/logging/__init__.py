"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="billing")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- service
- record_type
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
