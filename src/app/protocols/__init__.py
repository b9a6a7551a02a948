"""Protocolos e contratos dos colaboradores do bootstrap."""

from .environment_deployer import EnvironmentDeployerProtocol
from .registry import EnvironmentStoreProtocol, ProjectStoreProtocol
from .terminal import ProgressProtocol, PrompterProtocol, Validator
from .workspace import WorkspaceProtocol

__all__ = [
    "EnvironmentDeployerProtocol",
    "EnvironmentStoreProtocol",
    "ProgressProtocol",
    "ProjectStoreProtocol",
    "PrompterProtocol",
    "Validator",
    "WorkspaceProtocol",
]
