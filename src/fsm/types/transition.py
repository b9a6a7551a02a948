"""
Tipos para registrar transições de fase.

O histórico de transições é a trilha de auditoria de uma invocação:
mostra até onde o bootstrap chegou quando algo falhou.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.bootstrap import BootstrapPhase


@dataclass(frozen=True, slots=True)
class PhaseTransition:
    """
    Registro imutável de uma mudança de fase.

    Attributes:
        from_phase: Fase de origem
        to_phase: Fase de destino
        trigger: Operação que causou a transição (ex: 'execute')
        metadata: Dados adicionais para auditoria (sem credenciais)
        timestamp: Momento da transição (UTC)
    """

    from_phase: BootstrapPhase
    to_phase: BootstrapPhase
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação para logs estruturados."""
        return {
            "from_phase": self.from_phase.name,
            "to_phase": self.to_phase.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aplicada
        transition: Dados da transição (se success=True)
        error_reason: Motivo da falha (se success=False)
    """

    success: bool
    transition: PhaseTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
