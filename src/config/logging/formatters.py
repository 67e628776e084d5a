"""Formatters de logging estruturado.

Define formatter JSON com campos obrigatórios:
- timestamp (asctime)
- level
- logger (name)
- message
- service
- record_type
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "service",
        "record_type",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00",
            "level": "DEBUG",
            "logger": "record_fsm.transitions.transition",
            "message": "transition_performed",
            "service": "record_fsm",
            "record_type": "Conversation",
            "from_state": "read",
            "to_state": "closed"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
