"""
Exports públicos do módulo fsm/manager.

Máquina de fases (BootstrapStateMachine) do bootstrap.
"""

from fsm.manager.machine import BootstrapStateMachine, create_fsm

__all__ = [
    "BootstrapStateMachine",
    "create_fsm",
]
