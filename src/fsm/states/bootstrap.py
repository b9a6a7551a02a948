"""
Fases canônicas do `forja init`.

Cada fase corresponde a um passo do orquestrador. Fases de entrada
(PREPARED, ASKED, VALIDATED) podem ser puladas; as fases de execução
formam uma cadeia estrita.
"""

from enum import StrEnum


class BootstrapPhase(StrEnum):
    """
    Fases de uma invocação do bootstrap.

    Fases de entrada:
        - INITIAL: Orquestrador recém-criado
        - PREPARED: Contexto carregado (workspace, projetos existentes)
        - ASKED: Campos obrigatórios coletados
        - VALIDATED: Valores de flags validados

    Fases de execução:
        - CREATING_PROJECT: Registro do projeto
        - INITIALIZING_WORKSPACE: Vinculação do diretório local
        - CREATING_APP: Escrita do manifesto
        - DEPLOYING_ENV: Ambiente inicial (opcional)

    Fases terminais:
        - COMPLETED: Execução concluída
        - FAILED: Primeira falha interrompeu o fluxo
    """

    INITIAL = "INITIAL"
    PREPARED = "PREPARED"
    ASKED = "ASKED"
    VALIDATED = "VALIDATED"

    CREATING_PROJECT = "CREATING_PROJECT"
    INITIALIZING_WORKSPACE = "INITIALIZING_WORKSPACE"
    CREATING_APP = "CREATING_APP"
    DEPLOYING_ENV = "DEPLOYING_ENV"

    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


TERMINAL_PHASES: frozenset[BootstrapPhase] = frozenset({
    BootstrapPhase.COMPLETED,
    BootstrapPhase.FAILED,
})

# Fases em que efeitos colaterais acontecem
EXECUTION_PHASES: tuple[BootstrapPhase, ...] = (
    BootstrapPhase.CREATING_PROJECT,
    BootstrapPhase.INITIALIZING_WORKSPACE,
    BootstrapPhase.CREATING_APP,
    BootstrapPhase.DEPLOYING_ENV,
)

DEFAULT_INITIAL_PHASE: BootstrapPhase = BootstrapPhase.INITIAL


def is_terminal(phase: BootstrapPhase) -> bool:
    """Verifica se a fase é terminal."""
    return phase in TERMINAL_PHASES


def is_valid_phase(phase: object) -> bool:
    """Verifica se o valor é uma fase válida do enum."""
    return isinstance(phase, BootstrapPhase)
