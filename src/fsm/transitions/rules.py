"""
Regras de transição válidas entre fases do bootstrap.

Fases de entrada avançam apenas para frente (cada uma pode ser pulada,
ex: tudo informado via flags). A execução é uma cadeia estrita e
qualquer fase não terminal pode falhar.
"""

from fsm.states.bootstrap import TERMINAL_PHASES, BootstrapPhase

TransitionMap = dict[BootstrapPhase, frozenset[BootstrapPhase]]

VALID_TRANSITIONS: TransitionMap = {
    BootstrapPhase.INITIAL: frozenset({
        BootstrapPhase.PREPARED,
        BootstrapPhase.ASKED,
        BootstrapPhase.VALIDATED,
        BootstrapPhase.CREATING_PROJECT,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.PREPARED: frozenset({
        BootstrapPhase.ASKED,
        BootstrapPhase.VALIDATED,
        BootstrapPhase.CREATING_PROJECT,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.ASKED: frozenset({
        BootstrapPhase.VALIDATED,
        BootstrapPhase.CREATING_PROJECT,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.VALIDATED: frozenset({
        BootstrapPhase.CREATING_PROJECT,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.CREATING_PROJECT: frozenset({
        BootstrapPhase.INITIALIZING_WORKSPACE,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.INITIALIZING_WORKSPACE: frozenset({
        BootstrapPhase.CREATING_APP,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.CREATING_APP: frozenset({
        BootstrapPhase.DEPLOYING_ENV,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.DEPLOYING_ENV: frozenset({
        BootstrapPhase.COMPLETED,
        BootstrapPhase.FAILED,
    }),
    BootstrapPhase.COMPLETED: frozenset(),
    BootstrapPhase.FAILED: frozenset(),
}


def get_valid_targets(phase: BootstrapPhase) -> frozenset[BootstrapPhase]:
    """Retorna as fases de destino permitidas (vazio se terminal)."""
    return VALID_TRANSITIONS.get(phase, frozenset())


def is_transition_valid(from_phase: BootstrapPhase, to_phase: BootstrapPhase) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_phase: Fase de origem
        to_phase: Fase de destino

    Returns:
        True se a transição é permitida
    """
    if from_phase in TERMINAL_PHASES:
        return False
    return to_phase in get_valid_targets(from_phase)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todas as fases do enum estão no mapa
    - Fases terminais têm conjunto vazio
    - Toda fase não terminal alcança FAILED

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for phase in BootstrapPhase:
        if phase not in VALID_TRANSITIONS:
            errors.append(f"Fase {phase.name} ausente em VALID_TRANSITIONS")

    for phase in TERMINAL_PHASES:
        targets = VALID_TRANSITIONS.get(phase, frozenset())
        if targets:
            errors.append(
                f"Fase terminal {phase.name} não deveria ter transições: {targets}"
            )

    for from_phase, targets in VALID_TRANSITIONS.items():
        if from_phase not in TERMINAL_PHASES and BootstrapPhase.FAILED not in targets:
            errors.append(f"Fase {from_phase.name} não pode falhar")

    return errors
