"""Settings do cliente HTTP do provisionador de ambientes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class DeployerSettings:
    """Configurações do provisionador.

    Attributes:
        base_url: URL base da API de stacks
        api_token: Token Bearer (opcional em dev)
        request_timeout_seconds: Timeout por requisição HTTP
        poll_interval_seconds: Intervalo entre consultas de status
        timeout_seconds: Tempo máximo de espera pelo estado terminal
    """

    base_url: str = ""
    api_token: str = ""
    request_timeout_seconds: float = 10.0
    poll_interval_seconds: float = 5.0
    timeout_seconds: float = 1800.0

    def validate(self) -> list[str]:
        """Valida configurações do provisionador.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("DEPLOYER_BASE_URL não configurado")

        if self.poll_interval_seconds <= 0:
            errors.append("DEPLOYER_POLL_INTERVAL_SECONDS deve ser > 0")

        if self.timeout_seconds < self.poll_interval_seconds:
            errors.append(
                "DEPLOYER_TIMEOUT_SECONDS deve ser >= DEPLOYER_POLL_INTERVAL_SECONDS"
            )

        return errors


def _load_deployer_from_env() -> DeployerSettings:
    """Carrega DeployerSettings de variáveis de ambiente."""
    return DeployerSettings(
        base_url=os.getenv("DEPLOYER_BASE_URL", "").rstrip("/"),
        api_token=os.getenv("DEPLOYER_API_TOKEN", ""),
        request_timeout_seconds=float(os.getenv("DEPLOYER_REQUEST_TIMEOUT_SECONDS", "10")),
        poll_interval_seconds=float(os.getenv("DEPLOYER_POLL_INTERVAL_SECONDS", "5")),
        timeout_seconds=float(os.getenv("DEPLOYER_TIMEOUT_SECONDS", "1800")),
    )


@lru_cache(maxsize=1)
def get_deployer_settings() -> DeployerSettings:
    """Retorna instância cacheada de DeployerSettings."""
    return _load_deployer_from_env()
