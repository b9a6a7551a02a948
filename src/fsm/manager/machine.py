"""
Máquina de fases (BootstrapStateMachine) do `forja init`.

Controla a fase atual, valida transições e mantém histórico para
diagnóstico de execuções interrompidas.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.bootstrap import (
    DEFAULT_INITIAL_PHASE,
    BootstrapPhase,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import PhaseTransition, TransitionResult


class BootstrapStateMachine:
    """
    Máquina de fases de uma invocação do bootstrap.

    Attributes:
        current_phase: Fase atual
        history: Transições realizadas
    """

    __slots__ = ("_current_phase", "_history", "_run_id")

    def __init__(
        self,
        initial_phase: BootstrapPhase | None = None,
        run_id: str = "",
    ) -> None:
        self._current_phase = initial_phase or DEFAULT_INITIAL_PHASE
        self._history: list[PhaseTransition] = []
        self._run_id = run_id

    @property
    def current_phase(self) -> BootstrapPhase:
        """Fase atual da máquina."""
        return self._current_phase

    @property
    def history(self) -> list[PhaseTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def run_id(self) -> str:
        """Identificador da invocação."""
        return self._run_id

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_phase)

    def get_valid_targets(self) -> frozenset[BootstrapPhase]:
        return get_valid_targets(self._current_phase)

    def transition(
        self,
        target: BootstrapPhase,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de fase.

        Args:
            target: Fase de destino
            trigger: Operação que causou a transição (ex: 'prepare')
            metadata: Dados adicionais para auditoria

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_phase, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_phase.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_phase, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = PhaseTransition(
            from_phase=self._current_phase,
            to_phase=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_phase = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def get_phase_summary(self) -> dict[str, Any]:
        """Resumo da fase atual para logs."""
        return {
            "run_id": self._run_id,
            "current_phase": self._current_phase.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_fsm(
    run_id: str,
    initial_phase: BootstrapPhase | None = None,
) -> BootstrapStateMachine:
    """Factory function para criar a máquina de fases."""
    return BootstrapStateMachine(initial_phase=initial_phase, run_id=run_id)
