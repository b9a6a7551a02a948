"""Factories dos colaboradores baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_deployer_http_client, create_firestore_client
from app.infra.deploy import HttpEnvironmentDeployer
from app.infra.stores import (
    FirestoreRegistryStore,
    MemoryEnvironmentStore,
    MemoryProjectStore,
)
from app.infra.terminal import RichProgress, RichPrompter
from app.infra.workspace import LocalWorkspace
from app.use_cases.init_app import InitAppOrchestrator
from config.settings import (
    get_base_settings,
    get_deploy_settings,
    get_deployer_settings,
    get_registry_settings,
    get_workspace_settings,
)

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from app.protocols import EnvironmentStoreProtocol, ProjectStoreProtocol
    from app.use_cases.init_app import BootstrapRequest

logger = logging.getLogger(__name__)


def create_registry_stores() -> tuple[ProjectStoreProtocol, EnvironmentStoreProtocol]:
    """Cria os registries de projetos e ambientes conforme REGISTRY_BACKEND."""
    settings = get_registry_settings()

    if settings.backend == "firestore":
        project_id = settings.project_id or get_base_settings().gcp_project
        store = FirestoreRegistryStore(
            create_firestore_client(project_id),
            projects_collection=settings.collection_projects,
            environments_collection=settings.collection_environments,
        )
        logger.info("registry_created", extra={"backend": "firestore"})
        return store, store

    if not get_base_settings().is_development:
        logger.warning(
            "registry_memory_backend_outside_development",
            extra={"backend": "memory"},
        )
    logger.info("registry_created", extra={"backend": "memory"})
    return MemoryProjectStore(), MemoryEnvironmentStore()


def create_environment_deployer() -> HttpEnvironmentDeployer:
    settings = get_deployer_settings()
    return HttpEnvironmentDeployer(
        create_deployer_http_client(settings),
        poll_interval_seconds=settings.poll_interval_seconds,
        timeout_seconds=settings.timeout_seconds,
    )


def create_workspace(working_dir: Path | str | None = None) -> LocalWorkspace:
    return LocalWorkspace(working_dir, dir_name=get_workspace_settings().dir_name)


def build_init_orchestrator(
    request: BootstrapRequest,
    console: Console,
    working_dir: Path | str | None = None,
) -> InitAppOrchestrator:
    """Conecta as implementações concretas ao orquestrador do `init`."""
    project_store, environment_store = create_registry_stores()
    return InitAppOrchestrator(
        request,
        project_store=project_store,
        environment_store=environment_store,
        deployer=create_environment_deployer(),
        workspace=create_workspace(working_dir),
        prompter=RichPrompter(
            console=console,
            max_attempts=get_workspace_settings().prompt_max_attempts,
        ),
        progress=RichProgress(console=console),
        deploy_settings=get_deploy_settings(),
        notify=console.print,
    )
