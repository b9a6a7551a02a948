"""Settings do ambiente criado pelo `forja init`.

Nome do ambiente e exposição do load balancer ficam aqui para que novas
opções não exijam mudanças no fluxo do orquestrador.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from app.domain.names import validate_environment_name
from utils.errors import EmptyValueError, NameValidationError

ConfirmFailurePolicy = Literal["skip", "abort"]

DEFAULT_ENVIRONMENT_NAME = "test"


@dataclass(frozen=True)
class DeploySettings:
    """Configurações do ambiente inicial.

    Attributes:
        environment_name: Nome do ambiente criado
        public_load_balancer: Se o load balancer do ambiente é público
        confirm_failure_policy: O que fazer se o prompt de confirmação falhar
            (skip = segue sem deploy, abort = interrompe o comando)
    """

    environment_name: str = DEFAULT_ENVIRONMENT_NAME
    public_load_balancer: bool = True
    confirm_failure_policy: ConfirmFailurePolicy = "skip"

    def validate(self) -> list[str]:
        """Valida configurações de deploy.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        try:
            validate_environment_name(self.environment_name)
        except EmptyValueError:
            errors.append("DEPLOY_ENVIRONMENT_NAME não pode ser vazio")
        except NameValidationError as exc:
            errors.append(f"DEPLOY_ENVIRONMENT_NAME inválido: {exc}")

        if self.confirm_failure_policy not in ("skip", "abort"):
            errors.append(
                f"DEPLOY_CONFIRM_FAILURE_POLICY inválido: {self.confirm_failure_policy}"
            )

        return errors


def _load_deploy_from_env() -> DeploySettings:
    """Carrega DeploySettings de variáveis de ambiente."""
    return DeploySettings(
        environment_name=os.getenv("DEPLOY_ENVIRONMENT_NAME", DEFAULT_ENVIRONMENT_NAME),
        public_load_balancer=os.getenv("DEPLOY_PUBLIC_LOAD_BALANCER", "true").lower()
        in ("true", "1", "yes"),
        confirm_failure_policy=os.getenv(  # type: ignore[arg-type]
            "DEPLOY_CONFIRM_FAILURE_POLICY", "skip"
        ).lower(),
    )


@lru_cache(maxsize=1)
def get_deploy_settings() -> DeploySettings:
    """Retorna instância cacheada de DeploySettings."""
    return _load_deploy_from_env()
