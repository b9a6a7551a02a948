"""Registry de projetos e ambientes no Firestore.

Layout:
    {collection_projects}/{project}
    {collection_projects}/{project}/{collection_environments}/{env}
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from google.api_core import exceptions as gcp_exceptions

from app.domain.project import Environment, Project
from app.protocols.registry import EnvironmentStoreProtocol, ProjectStoreProtocol
from utils.errors import ProjectAlreadyExistsError, RegistryUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

PROJECTS_COLLECTION = "projects"
ENVIRONMENTS_COLLECTION = "environments"


class FirestoreRegistryStore(ProjectStoreProtocol, EnvironmentStoreProtocol):
    """Implementa os dois registries sobre o mesmo client Firestore."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        projects_collection: str = PROJECTS_COLLECTION,
        environments_collection: str = ENVIRONMENTS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._projects_collection = projects_collection
        self._environments_collection = environments_collection

    def _environments(self, project_name: str):  # noqa: ANN202
        return (
            self._db.collection(self._projects_collection)
            .document(project_name)
            .collection(self._environments_collection)
        )

    def create_project(self, project: Project) -> None:
        data = project.model_dump()
        data["created_at"] = datetime.now(UTC).isoformat()
        try:
            # create() falha se o documento já existe
            self._db.collection(self._projects_collection).document(project.name).create(data)
        except gcp_exceptions.AlreadyExists as exc:
            raise ProjectAlreadyExistsError(project.name) from exc
        except gcp_exceptions.GoogleAPIError as exc:
            logger.error(
                "project_create_failed",
                extra={"project": project.name, "error_type": type(exc).__name__},
            )
            raise RegistryUnavailableError(f"falha ao criar projeto {project.name}: {exc}") from exc
        logger.info("project_created", extra={"project": project.name})

    def list_projects(self) -> list[Project]:
        try:
            docs = list(self._db.collection(self._projects_collection).stream())
        except gcp_exceptions.GoogleAPIError as exc:
            raise RegistryUnavailableError(f"falha ao listar projetos: {exc}") from exc
        return [Project.model_validate(doc.to_dict() or {"name": doc.id}) for doc in docs]

    def create_environment(self, environment: Environment) -> None:
        data = environment.model_dump()
        data["created_at"] = datetime.now(UTC).isoformat()
        try:
            self._environments(environment.project).document(environment.name).set(data)
        except gcp_exceptions.GoogleAPIError as exc:
            logger.error(
                "environment_create_failed",
                extra={
                    "project": environment.project,
                    "environment": environment.name,
                    "error_type": type(exc).__name__,
                },
            )
            raise RegistryUnavailableError(
                f"falha ao registrar ambiente {environment.name}: {exc}"
            ) from exc
        logger.info(
            "environment_created",
            extra={"project": environment.project, "environment": environment.name},
        )

    def list_environments(self, project_name: str) -> list[Environment]:
        try:
            docs = list(self._environments(project_name).stream())
        except gcp_exceptions.GoogleAPIError as exc:
            raise RegistryUnavailableError(
                f"falha ao listar ambientes de {project_name}: {exc}"
            ) from exc
        # Documento vazio ou parcial: projeto e nome vêm do caminho
        return [
            Environment.model_validate(
                {"project": project_name, "name": doc.id, **(doc.to_dict() or {})}
            )
            for doc in docs
        ]
