"""Registries em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre invocações do CLI.
"""

from __future__ import annotations

from app.domain.project import Environment, Project
from app.protocols.registry import EnvironmentStoreProtocol, ProjectStoreProtocol
from utils.errors import ProjectAlreadyExistsError


class MemoryProjectStore(ProjectStoreProtocol):
    """Registry de projetos em memória (dev/test)."""

    def __init__(self, projects: list[Project] | None = None) -> None:
        self._projects: dict[str, Project] = {p.name: p for p in projects or []}

    def create_project(self, project: Project) -> None:
        if project.name in self._projects:
            raise ProjectAlreadyExistsError(project.name)
        self._projects[project.name] = project

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())


class MemoryEnvironmentStore(EnvironmentStoreProtocol):
    """Registry de ambientes em memória (dev/test)."""

    def __init__(self) -> None:
        self._environments: dict[str, dict[str, Environment]] = {}  # projeto -> nome -> env

    def create_environment(self, environment: Environment) -> None:
        envs = self._environments.setdefault(environment.project, {})
        envs[environment.name] = environment

    def list_environments(self, project_name: str) -> list[Environment]:
        return list(self._environments.get(project_name, {}).values())
