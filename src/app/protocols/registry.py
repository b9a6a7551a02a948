"""Protocolos dos registries de projetos e ambientes."""

from __future__ import annotations

from typing import Protocol

from app.domain.project import Environment, Project


class ProjectStoreProtocol(Protocol):
    """Contrato do registry de projetos."""

    def create_project(self, project: Project) -> None:
        """Registra o projeto.

        Raises:
            ProjectAlreadyExistsError: Nome já registrado.
        """
        ...

    def list_projects(self) -> list[Project]:
        """Lista todos os projetos (ordem não significativa)."""
        ...


class EnvironmentStoreProtocol(Protocol):
    """Contrato do registry de ambientes (escopo por projeto)."""

    def create_environment(self, environment: Environment) -> None:
        """Registra o ambiente. O caller verifica existência antes."""
        ...

    def list_environments(self, project_name: str) -> list[Environment]:
        """Lista os ambientes do projeto."""
        ...
