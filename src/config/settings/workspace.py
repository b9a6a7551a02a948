"""Settings do workspace local e do prompt interativo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_WORKSPACE_DIR_NAME = ".forja"


@dataclass(frozen=True)
class WorkspaceSettings:
    """Configurações do workspace.

    Attributes:
        dir_name: Diretório de metadados dentro do diretório de trabalho
        prompt_max_attempts: Tentativas por campo antes de desistir
    """

    dir_name: str = DEFAULT_WORKSPACE_DIR_NAME
    prompt_max_attempts: int = 5

    def validate(self) -> list[str]:
        """Valida configurações do workspace."""
        errors: list[str] = []

        if not self.dir_name or "/" in self.dir_name:
            errors.append(f"WORKSPACE_DIR_NAME inválido: {self.dir_name!r}")

        if self.prompt_max_attempts < 1:
            errors.append("PROMPT_MAX_ATTEMPTS deve ser >= 1")

        return errors


def _load_workspace_from_env() -> WorkspaceSettings:
    """Carrega WorkspaceSettings de variáveis de ambiente."""
    return WorkspaceSettings(
        dir_name=os.getenv("WORKSPACE_DIR_NAME", DEFAULT_WORKSPACE_DIR_NAME),
        prompt_max_attempts=int(os.getenv("PROMPT_MAX_ATTEMPTS", "5")),
    )


@lru_cache(maxsize=1)
def get_workspace_settings() -> WorkspaceSettings:
    """Retorna instância cacheada de WorkspaceSettings."""
    return _load_workspace_from_env()
