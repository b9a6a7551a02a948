"""Settings do registry de projetos e ambientes.

Seleciona o backend (memória ou Firestore) e as collections usadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

RegistryBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class RegistrySettings:
    """Configurações do registry.

    Attributes:
        backend: Backend de persistência (memory|firestore)
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        collection_projects: Collection raiz de projetos
        collection_environments: Sub-collection de ambientes por projeto
    """

    backend: RegistryBackend = "memory"
    project_id: str = ""
    collection_projects: str = "projects"
    collection_environments: str = "environments"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do registry.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "firestore"):
            errors.append(f"REGISTRY_BACKEND inválido: {self.backend}")

        effective_project = self.project_id or gcp_project
        if self.backend == "firestore" and not effective_project:
            errors.append(
                "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
            )

        if not self.collection_projects or not self.collection_environments:
            errors.append("Nomes de collection não podem ser vazios")

        return errors


def _load_registry_from_env() -> RegistrySettings:
    """Carrega RegistrySettings de variáveis de ambiente."""
    backend = os.getenv("REGISTRY_BACKEND", "memory").lower()
    return RegistrySettings(
        backend=backend,  # type: ignore[arg-type]
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_projects=os.getenv("FIRESTORE_COLLECTION_PROJECTS", "projects"),
        collection_environments=os.getenv(
            "FIRESTORE_COLLECTION_ENVIRONMENTS", "environments"
        ),
    )


@lru_cache(maxsize=1)
def get_registry_settings() -> RegistrySettings:
    """Retorna instância cacheada de RegistrySettings."""
    return _load_registry_from_env()
