"""Estado de uma invocação do `forja init`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass
class BootstrapRequest:
    """Entradas do bootstrap, preenchidas por flags, workspace ou prompt.

    Campo vazio significa "ainda não informado".

    Attributes:
        project: Nome do projeto.
        app_name: Nome da aplicação (único no projeto).
        app_type: Tipo de template da aplicação.
        should_deploy: Cria o ambiente de teste sem perguntar.
        should_skip_deploy: Não cria ambiente (tem precedência sobre should_deploy).
        existing_projects: Projetos do registry staged pelo Prepare.
            None = nada foi staged; [] = registry consultado e vazio.
        workspace_project: Projeto descoberto no workspace local, se houver.
    """

    project: str = ""
    app_name: str = ""
    app_type: str = ""
    should_deploy: bool = False
    should_skip_deploy: bool = False

    existing_projects: list[str] | None = None
    workspace_project: str | None = None


class ConfirmOutcome(StrEnum):
    """Resposta ao prompt de confirmação.

    FAILED separa falha do canal de entrada de um "não" real.
    """

    YES = "yes"
    NO = "no"
    FAILED = "failed"
