"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, build_init_orchestrator

    initialize_app(command="init")
    orchestrator = build_init_orchestrator(request, console)
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    build_init_orchestrator,
    create_environment_deployer,
    create_registry_stores,
    create_workspace,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_deploy_settings,
    get_deployer_settings,
    get_registry_settings,
    get_workspace_settings,
)
from fsm import validate_transition_map

# Nome do serviço para logs
SERVICE_NAME = "forja"

logger = logging.getLogger(__name__)


def initialize_app(log_level: str | None = None, command: str = "") -> None:
    """Inicializa logging estruturado para a invocação do CLI.

    Args:
        log_level: Sobrescreve LOG_LEVEL (ex: via --log-level).
        command: Subcomando em execução (vai para todos os logs).
    """
    level = (log_level or get_base_settings().effective_log_level).upper()
    configure_logging(
        level=level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        command=command,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido; em `development` apenas
    registra alerta.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"registry: {error}" for error in get_registry_settings().validate(base.gcp_project)
    )
    errors.extend(f"deploy: {error}" for error in get_deploy_settings().validate())
    errors.extend(f"deployer: {error}" for error in get_deployer_settings().validate())
    errors.extend(f"workspace: {error}" for error in get_workspace_settings().validate())
    errors.extend(f"fsm: {error}" for error in validate_transition_map())

    if not errors:
        return errors

    if base.strict_validation:
        raise RuntimeError("Configuração inválida: " + "; ".join(errors))

    logger.warning("runtime_settings_invalid", extra={"errors": errors})
    return errors


__all__ = [
    "SERVICE_NAME",
    "build_init_orchestrator",
    "create_environment_deployer",
    "create_registry_stores",
    "create_workspace",
    "initialize_app",
    "validate_runtime_settings",
]
