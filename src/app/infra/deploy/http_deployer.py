"""Cliente HTTP do provisionador de stacks.

Implementação concreta de IO para EnvironmentDeployerProtocol.

API consumida:
    POST {base_url}/stacks              -> 201/202 (409 = stack já existe)
    GET  {base_url}/stacks/{stack_name} -> {"status": "..."}
"""

from __future__ import annotations

import logging
import threading
import time
from enum import StrEnum
from typing import TYPE_CHECKING

import httpx

from app.protocols.environment_deployer import EnvironmentDeployerProtocol
from utils.errors import (
    DeploymentCancelledError,
    DeploymentError,
    DeploymentTimeoutError,
    StackAlreadyExistsError,
)

if TYPE_CHECKING:
    from app.domain.project import Environment

logger = logging.getLogger(__name__)


class StackStatus(StrEnum):
    """Estados reportados pelo provisionador."""

    CREATE_IN_PROGRESS = "CREATE_IN_PROGRESS"
    CREATE_COMPLETE = "CREATE_COMPLETE"
    CREATE_FAILED = "CREATE_FAILED"
    ROLLBACK_IN_PROGRESS = "ROLLBACK_IN_PROGRESS"
    ROLLBACK_COMPLETE = "ROLLBACK_COMPLETE"
    ROLLBACK_FAILED = "ROLLBACK_FAILED"


_FAILED_STATUSES = frozenset({
    StackStatus.CREATE_FAILED,
    StackStatus.ROLLBACK_COMPLETE,
    StackStatus.ROLLBACK_FAILED,
})


class HttpEnvironmentDeployer(EnvironmentDeployerProtocol):
    """Inicia stacks e acompanha o provisionamento por polling."""

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        poll_interval_seconds: float = 5.0,
        timeout_seconds: float = 1800.0,
    ) -> None:
        self._http = http_client
        self._poll_interval = poll_interval_seconds
        self._timeout = timeout_seconds

    def deploy_environment(self, environment: Environment) -> None:
        payload = {
            "stack_name": environment.stack_name,
            "template": "environment",
            "parameters": {
                "project": environment.project,
                "environment": environment.name,
                "public_load_balancer": environment.public_load_balancer,
            },
        }
        try:
            response = self._http.post("/stacks", json=payload)
        except httpx.HTTPError as exc:
            raise DeploymentError(f"falha ao contatar o provisionador: {exc}") from exc

        if response.status_code == httpx.codes.CONFLICT:
            raise StackAlreadyExistsError(environment.stack_name)
        if response.is_error:
            raise DeploymentError(
                f"provisionador recusou a stack {environment.stack_name}: "
                f"HTTP {response.status_code} {_error_message(response)}"
            )
        logger.info("stack_create_started", extra={"stack": environment.stack_name})

    def wait_for_environment_creation(
        self,
        environment: Environment,
        cancel_event: threading.Event | None = None,
    ) -> None:
        cancel = cancel_event or threading.Event()
        deadline = time.monotonic() + self._timeout
        stack_name = environment.stack_name

        while True:
            if cancel.is_set():
                raise DeploymentCancelledError(
                    f"espera pela stack {stack_name} cancelada"
                )

            status = self._fetch_status(stack_name)
            logger.debug("stack_status", extra={"stack": stack_name, "status": status})

            if status == StackStatus.CREATE_COMPLETE:
                logger.info("stack_create_complete", extra={"stack": stack_name})
                return
            if status in _FAILED_STATUSES:
                raise DeploymentError(f"stack {stack_name} terminou em {status}")

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise DeploymentTimeoutError(
                    f"stack {stack_name} não concluiu em {self._timeout:.0f}s"
                )
            # wait() retorna cedo quando o cancelamento é sinalizado
            cancel.wait(min(self._poll_interval, remaining))

    def _fetch_status(self, stack_name: str) -> str:
        try:
            response = self._http.get(f"/stacks/{stack_name}")
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise DeploymentError(
                f"falha ao consultar a stack {stack_name}: "
                f"HTTP {exc.response.status_code} {_error_message(exc.response)}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise DeploymentError(f"falha ao consultar a stack {stack_name}: {exc}") from exc
        return str(data.get("status", ""))


def _error_message(response: httpx.Response) -> str:
    """Extrai a mensagem de erro da API quando disponível."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or "")
    return ""
