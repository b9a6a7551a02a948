"""Workspace em disco.

Layout dentro do diretório de trabalho:
    .forja/workspace.yml       -> {"project": "<nome>"}
    .forja/<app>-app.yml       -> manifesto de cada aplicação
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from app.domain.project import WorkspaceSummary
from app.protocols.workspace import WorkspaceProtocol
from config.settings.workspace import DEFAULT_WORKSPACE_DIR_NAME
from utils.errors import WorkspaceConflictError, WorkspaceError, WorkspaceNotFoundError

logger = logging.getLogger(__name__)

SUMMARY_FILE_NAME = "workspace.yml"
MANIFEST_SUFFIX = "-app.yml"


class LocalWorkspace(WorkspaceProtocol):
    """Vínculo entre o diretório de trabalho e um projeto."""

    def __init__(
        self,
        working_dir: Path | str | None = None,
        dir_name: str = DEFAULT_WORKSPACE_DIR_NAME,
    ) -> None:
        self._root = Path(working_dir) if working_dir is not None else Path.cwd()
        self._meta_dir = self._root / dir_name

    @property
    def meta_dir(self) -> Path:
        return self._meta_dir

    @property
    def summary_path(self) -> Path:
        return self._meta_dir / SUMMARY_FILE_NAME

    def summary(self) -> WorkspaceSummary:
        path = self.summary_path
        if not path.is_file():
            raise WorkspaceNotFoundError(f"nenhum workspace em {self._root}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise WorkspaceError(f"falha ao ler {path}: {exc}") from exc

        project = data.get("project") if isinstance(data, dict) else None
        if not project:
            raise WorkspaceNotFoundError(f"{path} não define um projeto")
        return WorkspaceSummary(project_name=str(project))

    def create(self, project_name: str) -> None:
        try:
            current = self.summary().project_name
        except WorkspaceNotFoundError:
            current = None

        if current == project_name:
            logger.debug("workspace_already_initialized", extra={"project": project_name})
            return
        if current is not None:
            raise WorkspaceConflictError(
                f"{self._root} já pertence ao projeto {current}, não a {project_name}"
            )

        try:
            self._meta_dir.mkdir(parents=True, exist_ok=True)
            self.summary_path.write_text(
                yaml.safe_dump({"project": project_name}, sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise WorkspaceError(f"falha ao criar workspace em {self._root}: {exc}") from exc
        logger.info("workspace_initialized", extra={"project": project_name})

    def write_manifest(self, content: bytes, app_name: str) -> str:
        path = self._meta_dir / f"{app_name}{MANIFEST_SUFFIX}"
        try:
            self._meta_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise WorkspaceError(f"falha ao gravar manifesto {path}: {exc}") from exc
        logger.info("manifest_written", extra={"app": app_name, "path": str(path)})
        return str(path)
