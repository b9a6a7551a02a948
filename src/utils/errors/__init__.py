"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AskError,
    BootstrapError,
    DeploymentCancelledError,
    DeploymentError,
    DeploymentTimeoutError,
    EmptyValueError,
    FieldValidationError,
    InfrastructureError,
    InvalidNameError,
    InvalidPhaseTransitionError,
    ManifestError,
    NameValidationError,
    ProjectAlreadyExistsError,
    PromptError,
    RegistryUnavailableError,
    StackAlreadyExistsError,
    ToleratedConflictError,
    WorkspaceConflictError,
    WorkspaceError,
    WorkspaceNotFoundError,
)

__all__ = [
    "AskError",
    "BootstrapError",
    "DeploymentCancelledError",
    "DeploymentError",
    "DeploymentTimeoutError",
    "EmptyValueError",
    "FieldValidationError",
    "InfrastructureError",
    "InvalidNameError",
    "InvalidPhaseTransitionError",
    "ManifestError",
    "NameValidationError",
    "ProjectAlreadyExistsError",
    "PromptError",
    "RegistryUnavailableError",
    "StackAlreadyExistsError",
    "ToleratedConflictError",
    "WorkspaceConflictError",
    "WorkspaceError",
    "WorkspaceNotFoundError",
]
