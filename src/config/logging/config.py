"""Configuração centralizada de logging.

Logs JSON vão para stderr para não misturar com os prompts e mensagens
do CLI em stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_SERVICE_NAME = "forja"

# Loggers de bibliotecas que logam cada requisição em INFO
NOISY_LOGGERS = ("httpx", "httpcore", "google", "urllib3")


def configure_logging(
    level: str = "WARNING",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    command: str = "",
) -> None:
    """Configura logging JSON estruturado para o CLI.

    Deve ser chamada uma vez por invocação (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o id da
            invocação atual (ex: de ContextVar).
        command: Subcomando em execução (ex: "init").

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter, command))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    library_level = logging.DEBUG if level_upper == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service, command e correlation_id.
    """
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    error: BaseException | None = None,
) -> None:
    """Log observável de fallback best-effort.

    Registra quando uma leitura falhou e o fluxo seguiu com um valor
    padrão (ex: listagem de projetos tratada como vazia).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "list_projects").
        reason: Razão do fallback (ex: "registry_unavailable").
        error: Exceção que disparou o fallback, se houver.

    Exemplo:
        log_fallback(logger, "list_environments", reason="read_failed", error=exc)
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if error is not None:
        extra["error_type"] = type(error).__name__
        extra["error"] = str(error)

    logger.warning(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
