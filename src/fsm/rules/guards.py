"""
Guards para transições de fase.

Regras adicionais avaliadas depois do mapa de transições.
"""

from collections.abc import Callable

from fsm.states.bootstrap import TERMINAL_PHASES, BootstrapPhase, is_valid_phase


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[BootstrapPhase, BootstrapPhase], GuardResult]


def guard_valid_phase(
    from_phase: BootstrapPhase,
    to_phase: BootstrapPhase,
) -> GuardResult:
    """Guard: ambas as fases devem ser membros do enum."""
    if not is_valid_phase(from_phase):
        return GuardResult.deny(f"Fase de origem inválida: {from_phase}")
    if not is_valid_phase(to_phase):
        return GuardResult.deny(f"Fase de destino inválida: {to_phase}")
    return GuardResult.allow()


def guard_terminal_phase(
    from_phase: BootstrapPhase,
    to_phase: BootstrapPhase,
) -> GuardResult:
    """Guard: fases terminais não permitem saída."""
    del to_phase
    if from_phase in TERMINAL_PHASES:
        return GuardResult.deny(
            f"Fase {from_phase.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_phase(
    from_phase: BootstrapPhase,
    to_phase: BootstrapPhase,
) -> GuardResult:
    """Guard: cada fase é executada uma única vez por invocação."""
    if from_phase == to_phase:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_phase.name} → {to_phase.name}"
        )
    return GuardResult.allow()


# Todos devem retornar allow() para a transição prosseguir
DEFAULT_GUARDS: list[Guard] = [
    guard_valid_phase,
    guard_terminal_phase,
    guard_same_phase,
]


def evaluate_guards(
    from_phase: BootstrapPhase,
    to_phase: BootstrapPhase,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_phase, to_phase)
        if not result.allowed:
            return result

    return GuardResult.allow()
