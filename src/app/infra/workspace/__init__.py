"""Workspace local do operador."""

from app.infra.workspace.local_workspace import LocalWorkspace

__all__ = ["LocalWorkspace"]
