"""
Módulo FSM: máquina de fases do `forja init`.

Estrutura:
    - states/: Fases do bootstrap (BootstrapPhase enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de fases (BootstrapStateMachine)
    - types/: Tipos de dados (PhaseTransition, TransitionResult)
"""

from fsm.manager import (
    BootstrapStateMachine,
    create_fsm,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    DEFAULT_INITIAL_PHASE,
    EXECUTION_PHASES,
    TERMINAL_PHASES,
    BootstrapPhase,
    is_terminal,
    is_valid_phase,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    PhaseTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_PHASE",
    "EXECUTION_PHASES",
    "TERMINAL_PHASES",
    "VALID_TRANSITIONS",
    "BootstrapPhase",
    "BootstrapStateMachine",
    "GuardResult",
    "PhaseTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_phase",
    "validate_transition_map",
]
