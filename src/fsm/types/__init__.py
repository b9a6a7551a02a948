"""
Exports públicos do módulo fsm/types.

Tipos e estruturas de dados para transições de fase.
"""

from fsm.types.transition import PhaseTransition, TransitionResult

__all__ = [
    "PhaseTransition",
    "TransitionResult",
]
