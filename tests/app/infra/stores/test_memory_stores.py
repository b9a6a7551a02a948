"""Testes dos registries em memória."""

from __future__ import annotations

import pytest

from app.domain.project import Environment, Project
from app.infra.stores.memory_stores import MemoryEnvironmentStore, MemoryProjectStore
from utils.errors import ProjectAlreadyExistsError, ToleratedConflictError


class TestMemoryProjectStore:
    """Testes do MemoryProjectStore."""

    def test_create_and_list(self) -> None:
        store = MemoryProjectStore()
        store.create_project(Project(name="shop"))
        store.create_project(Project(name="blog"))

        assert [p.name for p in store.list_projects()] == ["shop", "blog"]

    def test_duplicate_raises_tolerated_conflict(self) -> None:
        """Projeto repetido é conflito tolerável, não falha genérica."""
        store = MemoryProjectStore([Project(name="shop")])

        with pytest.raises(ProjectAlreadyExistsError) as exc_info:
            store.create_project(Project(name="shop"))

        assert isinstance(exc_info.value, ToleratedConflictError)
        assert exc_info.value.resource == "project"
        assert len(store.list_projects()) == 1

    def test_empty_registry(self) -> None:
        assert MemoryProjectStore().list_projects() == []


class TestMemoryEnvironmentStore:
    """Testes do MemoryEnvironmentStore."""

    def test_environments_are_scoped_by_project(self) -> None:
        store = MemoryEnvironmentStore()
        store.create_environment(Environment(project="shop", name="test"))
        store.create_environment(Environment(project="blog", name="prod"))

        assert store.list_environments("shop") == [Environment(project="shop", name="test")]
        assert store.list_environments("unknown") == []

    def test_recreate_overwrites_same_name(self) -> None:
        store = MemoryEnvironmentStore()
        store.create_environment(Environment(project="shop", name="test"))
        store.create_environment(
            Environment(project="shop", name="test", public_load_balancer=False)
        )

        envs = store.list_environments("shop")
        assert len(envs) == 1
        assert envs[0].public_load_balancer is False
