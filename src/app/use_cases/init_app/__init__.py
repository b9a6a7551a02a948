"""Use case: bootstrap de projeto + aplicação (`forja init`)."""

from app.use_cases.init_app.models import BootstrapRequest, ConfirmOutcome
from app.use_cases.init_app.orchestrator import InitAppOrchestrator

__all__ = ["BootstrapRequest", "ConfirmOutcome", "InitAppOrchestrator"]
