"""Provisionador de ambientes via API HTTP de stacks."""

from app.infra.deploy.http_deployer import HttpEnvironmentDeployer, StackStatus

__all__ = ["HttpEnvironmentDeployer", "StackStatus"]
