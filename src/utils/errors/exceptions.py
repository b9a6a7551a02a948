"""Exceções de domínio do bootstrap de aplicações.

Hierarquia única para que o CLI trate falhas de forma uniforme e para
que os conflitos toleráveis (recurso já provisionado) sejam reconhecidos
por tipo, não por mensagem.
"""

from __future__ import annotations


class BootstrapError(RuntimeError):
    """Base para todas as falhas do fluxo de bootstrap."""


# ──────────────────────────────────────────────────────────────────────────────
# Validação de entrada
# ──────────────────────────────────────────────────────────────────────────────


class NameValidationError(BootstrapError, ValueError):
    """Nome de projeto/aplicação fora da regra de identificador."""


class EmptyValueError(NameValidationError):
    """Valor vazio, que significa "ainda não informado" antes do Ask."""

    def __init__(self) -> None:
        super().__init__("o valor não pode ser vazio")


class InvalidNameError(NameValidationError):
    """Nome não vazio que viola charset ou tamanho."""


class FieldValidationError(BootstrapError):
    """Valor inválido informado via flag, com o campo nomeado."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field} inválido: {reason}")
        self.field = field
        self.reason = reason


class PromptError(BootstrapError):
    """Falha do canal de entrada interativo."""


class AskError(BootstrapError):
    """Falha ao coletar um campo obrigatório."""


class ManifestError(BootstrapError):
    """Falha ao derivar ou serializar o manifesto da aplicação."""


# ──────────────────────────────────────────────────────────────────────────────
# Conflitos toleráveis (idempotência)
# ──────────────────────────────────────────────────────────────────────────────


class ToleratedConflictError(BootstrapError):
    """Recurso já provisionado por uma execução anterior.

    Attributes:
        resource: Tipo do recurso (ex: "project", "stack").
        name: Identificador do recurso em conflito.
    """

    resource = "resource"

    def __init__(self, name: str) -> None:
        super().__init__(f"{self.resource} {name} já existe")
        self.name = name


class ProjectAlreadyExistsError(ToleratedConflictError):
    """Projeto já registrado no registry."""

    resource = "project"


class StackAlreadyExistsError(ToleratedConflictError):
    """Infraestrutura do ambiente já existe no provisionador."""

    resource = "stack"


# ──────────────────────────────────────────────────────────────────────────────
# Infraestrutura
# ──────────────────────────────────────────────────────────────────────────────


class InfrastructureError(BootstrapError):
    """Base para falhas de infraestrutura (registry, provisionador)."""


class RegistryUnavailableError(InfrastructureError):
    """Falha de leitura/escrita no registry de projetos/ambientes."""


class DeploymentError(InfrastructureError):
    """Falha ao provisionar o ambiente."""


class DeploymentTimeoutError(DeploymentError):
    """Provisionamento não chegou a estado terminal no tempo limite."""


class DeploymentCancelledError(DeploymentError):
    """Espera pelo provisionamento cancelada pelo operador."""


# ──────────────────────────────────────────────────────────────────────────────
# Workspace local
# ──────────────────────────────────────────────────────────────────────────────


class WorkspaceError(BootstrapError):
    """Base para falhas do workspace local."""


class WorkspaceNotFoundError(WorkspaceError):
    """Diretório atual não está vinculado a nenhum projeto."""


class WorkspaceConflictError(WorkspaceError):
    """Workspace já vinculado a outro projeto."""


# ──────────────────────────────────────────────────────────────────────────────
# FSM
# ──────────────────────────────────────────────────────────────────────────────


class InvalidPhaseTransitionError(BootstrapError):
    """Fase solicitada fora da ordem permitida pela FSM."""
