"""
Exports públicos do módulo fsm/states.

Fases canônicas do fluxo de bootstrap.
"""

from fsm.states.bootstrap import (
    DEFAULT_INITIAL_PHASE,
    EXECUTION_PHASES,
    TERMINAL_PHASES,
    BootstrapPhase,
    is_terminal,
    is_valid_phase,
)

__all__ = [
    "DEFAULT_INITIAL_PHASE",
    "EXECUTION_PHASES",
    "TERMINAL_PHASES",
    "BootstrapPhase",
    "is_terminal",
    "is_valid_phase",
]
