"""Protocolo do workspace local."""

from __future__ import annotations

from typing import Protocol

from app.domain.project import WorkspaceSummary


class WorkspaceProtocol(Protocol):
    """Contrato do diretório local vinculado a um projeto."""

    def summary(self) -> WorkspaceSummary:
        """Retorna o vínculo atual.

        Raises:
            WorkspaceNotFoundError: Diretório não vinculado.
        """
        ...

    def create(self, project_name: str) -> None:
        """Vincula o diretório ao projeto (idempotente)."""
        ...

    def write_manifest(self, content: bytes, app_name: str) -> str:
        """Persiste o manifesto da aplicação e retorna o caminho."""
        ...
