"""Protocolo do provisionador de infraestrutura de ambientes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import threading

    from app.domain.project import Environment


class EnvironmentDeployerProtocol(Protocol):
    """Contrato para iniciar e acompanhar o provisionamento."""

    def deploy_environment(self, environment: Environment) -> None:
        """Inicia o provisionamento assíncrono.

        Raises:
            StackAlreadyExistsError: Infraestrutura já existe.
        """
        ...

    def wait_for_environment_creation(
        self,
        environment: Environment,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Bloqueia até o provisionamento chegar a estado terminal.

        Raises:
            DeploymentError: Provisionamento falhou.
            DeploymentCancelledError: cancel_event foi sinalizado.
        """
        ...
