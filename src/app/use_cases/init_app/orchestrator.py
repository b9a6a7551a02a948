"""Orquestrador do `forja init`.

Fluxo: Prepare → Ask → Validate → Execute(createProject → initWorkspace →
createApp → deployEnv).

Efeitos colaterais só acontecem no Execute. A primeira falha interrompe
os passos seguintes e não há rollback dos passos já concluídos. Conflitos
toleráveis (projeto ou stack já existentes) não são tratados como erro.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from app.domain.manifest import SUPPORTED_APP_TYPES, create_manifest
from app.domain.names import validate_application_name, validate_project_name
from app.domain.project import Environment, Project
from app.observability import get_correlation_id
from app.use_cases.init_app.models import BootstrapRequest, ConfirmOutcome
from config.logging import get_logger, log_fallback
from config.settings.deploy import DeploySettings
from fsm import EXECUTION_PHASES, BootstrapPhase, BootstrapStateMachine, create_fsm
from utils.errors import (
    AskError,
    EmptyValueError,
    FieldValidationError,
    InvalidPhaseTransitionError,
    NameValidationError,
    PromptError,
    ToleratedConflictError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import (
        EnvironmentDeployerProtocol,
        EnvironmentStoreProtocol,
        ProgressProtocol,
        ProjectStoreProtocol,
        PrompterProtocol,
        WorkspaceProtocol,
    )

logger = get_logger(__name__)

PREPARING_LABEL = "Preparando deploy..."
DEPLOYING_LABEL = "Fazendo deploy do ambiente..."
DONE_LABEL = "Pronto!"
ERROR_LABEL = "Erro!"

PROJECT_HELP = (
    "Aplicações do mesmo projeto compartilham rede e cluster "
    "e se descobrem via service discovery."
)


class InitAppOrchestrator:
    """Conduz uma invocação do bootstrap de aplicação.

    Args:
        request: Entradas já conhecidas (flags).
        project_store: Registry de projetos.
        environment_store: Registry de ambientes.
        deployer: Provisionador de ambientes.
        workspace: Workspace local.
        prompter: Coleta interativa.
        progress: Indicador de progresso.
        deploy_settings: Nome/atributos do ambiente inicial.
        notify: Saída de mensagens informativas ao operador.
        run_id: Identificador da invocação (padrão: correlation_id atual).
    """

    def __init__(
        self,
        request: BootstrapRequest,
        *,
        project_store: ProjectStoreProtocol,
        environment_store: EnvironmentStoreProtocol,
        deployer: EnvironmentDeployerProtocol,
        workspace: WorkspaceProtocol,
        prompter: PrompterProtocol,
        progress: ProgressProtocol,
        deploy_settings: DeploySettings | None = None,
        notify: Callable[[str], None] = print,
        run_id: str | None = None,
    ) -> None:
        self.request = request
        self._project_store = project_store
        self._environment_store = environment_store
        self._deployer = deployer
        self._workspace = workspace
        self._prompter = prompter
        self._progress = progress
        self._deploy_settings = deploy_settings or DeploySettings()
        self._notify = notify
        self._cancel_event = threading.Event()
        self._waiting = False
        self._fsm = create_fsm(run_id or get_correlation_id())

    @property
    def fsm(self) -> BootstrapStateMachine:
        return self._fsm

    @property
    def cancel_event(self) -> threading.Event:
        """Token repassado à espera pelo provisionamento."""
        return self._cancel_event

    @property
    def waiting(self) -> bool:
        """True apenas enquanto a espera pelo provisionamento está em curso."""
        return self._waiting

    def cancel(self) -> None:
        """Sinaliza cancelamento para operações longas em andamento."""
        logger.info("bootstrap_cancel_requested", extra=self._fsm.get_phase_summary())
        self._cancel_event.set()

    # ──────────────────────────────────────────────────────────────────────
    # Prepare
    # ──────────────────────────────────────────────────────────────────────

    def prepare(self) -> None:
        """Resolve o projeto sem perguntar quando possível.

        Prioridade: flag > vínculo do workspace > projetos do registry >
        entrada livre no Ask.
        """
        self._advance(BootstrapPhase.PREPARED, "prepare")
        request = self.request
        if request.project:
            return

        try:
            summary = self._workspace.summary()
        except Exception as exc:  # workspace não vinculado (ou ilegível)
            logger.debug("workspace_not_bound", extra={"error_type": type(exc).__name__})
        else:
            request.project = summary.project_name
            request.workspace_project = summary.project_name
            logger.info("project_from_workspace", extra={"project": summary.project_name})
            return

        try:
            projects = self._project_store.list_projects()
        except Exception as exc:
            log_fallback(logger, "list_projects", reason="registry_read_failed", error=exc)
            projects = []
        request.existing_projects = [p.name for p in projects]

    # ──────────────────────────────────────────────────────────────────────
    # Ask
    # ──────────────────────────────────────────────────────────────────────

    def ask(self) -> None:
        """Pergunta os campos obrigatórios ainda vazios.

        Raises:
            AskError: Falha em qualquer prompt (interrompe o Ask).
        """
        self._advance(BootstrapPhase.ASKED, "ask")
        try:
            self._ask_fields()
        except Exception as exc:
            self._fail(BootstrapPhase.ASKED, exc)
            raise

    def _ask_fields(self) -> None:
        request = self.request
        if not request.project:
            request.project = self._ask_project()

        if not request.app_name:
            try:
                request.app_name = self._prompter.get_text(
                    "Qual é o nome da sua aplicação?",
                    "Conjunto de serviços que entrega uma capacidade de negócio. "
                    "Deve ser único dentro do projeto.",
                    validate_application_name,
                )
            except PromptError as exc:
                raise AskError(f"falha ao obter o nome da aplicação: {exc}") from exc

        if not request.app_type:
            try:
                request.app_type = self._prompter.select_one(
                    "Qual template você quer usar?",
                    "Templates de infraestrutura pré-definidos.",
                    list(SUPPORTED_APP_TYPES),
                )
            except PromptError as exc:
                raise AskError(f"falha ao obter a seleção de template: {exc}") from exc

    def _ask_project(self) -> str:
        existing = self.request.existing_projects
        if existing:
            try:
                return self._prompter.select_one(
                    "Qual projeto devemos usar?",
                    f"Escolha o projeto da nova aplicação. {PROJECT_HELP}",
                    existing,
                )
            except PromptError as exc:
                raise AskError(f"falha ao obter a seleção de projeto: {exc}") from exc

        try:
            return self._prompter.get_text(
                "Qual é o nome do seu projeto?",
                PROJECT_HELP,
                validate_project_name,
            )
        except PromptError as exc:
            raise AskError(f"falha ao obter o nome do projeto: {exc}") from exc

    # ──────────────────────────────────────────────────────────────────────
    # Validate
    # ──────────────────────────────────────────────────────────────────────

    def validate(self) -> None:
        """Rejeita valores malformados vindos de flags.

        Valor vazio não é erro aqui: significa "ainda não informado".

        Raises:
            FieldValidationError: Campo inválido, com o nome do campo.
        """
        self._advance(BootstrapPhase.VALIDATED, "validate")
        try:
            self._validate_fields()
        except FieldValidationError as exc:
            self._fail(BootstrapPhase.VALIDATED, exc)
            raise

    def _validate_fields(self) -> None:
        request = self.request
        rules = (
            ("nome do projeto", request.project, validate_project_name),
            ("nome da aplicação", request.app_name, validate_application_name),
        )
        for field, value, rule in rules:
            try:
                rule(value)
            except EmptyValueError:
                continue
            except NameValidationError as exc:
                raise FieldValidationError(field, str(exc)) from exc

        if request.app_type and request.app_type not in SUPPORTED_APP_TYPES:
            raise FieldValidationError(
                "tipo de aplicação",
                f"{request.app_type!r} não é um de: {', '.join(SUPPORTED_APP_TYPES)}",
            )

    # ──────────────────────────────────────────────────────────────────────
    # Execute
    # ──────────────────────────────────────────────────────────────────────

    def execute(self) -> None:
        """Cria projeto, workspace, manifesto e (opcionalmente) o ambiente.

        A primeira falha é propagada sem alteração; a fase em que ocorreu
        fica registrada na FSM e como nota da exceção.
        """
        steps = (
            self._create_validated_project,
            self.init_workspace,
            self.create_app,
            self.deploy_env,
        )
        for phase, step in zip(EXECUTION_PHASES, steps, strict=True):
            self._run_step(phase, step)
        self._advance(BootstrapPhase.COMPLETED, "execute")
        logger.info(
            "bootstrap_completed",
            extra={"project": self.request.project, "app": self.request.app_name},
        )

    def _create_validated_project(self) -> None:
        validate_project_name(self.request.project)
        self.create_project()

    def create_project(self) -> None:
        """Registra o projeto; projeto já existente não é erro."""
        try:
            self._project_store.create_project(Project(name=self.request.project))
        except ToleratedConflictError:
            logger.info("project_already_exists", extra={"project": self.request.project})

    def init_workspace(self) -> None:
        self._workspace.create(self.request.project)

    def create_app(self) -> None:
        """Deriva o manifesto e grava no workspace.

        Raises:
            ManifestError: Tipo não suportado ou falha de serialização.
        """
        manifest = create_manifest(self.request.app_name, self.request.app_type)
        content = manifest.to_yaml()
        path = self._workspace.write_manifest(content, self.request.app_name)
        logger.info("app_created", extra={"app": self.request.app_name, "path": path})

    def deploy_env(self) -> None:
        """Cria o ambiente de teste se o projeto ainda não tiver nenhum."""
        request = self.request
        if request.should_skip_deploy:
            logger.info("deploy_skipped", extra={"reason": "skip_flag"})
            return

        try:
            existing = self._environment_store.list_environments(request.project)
        except Exception as exc:
            log_fallback(logger, "list_environments", reason="registry_read_failed", error=exc)
            existing = []
        if existing:
            logger.info(
                "deploy_skipped",
                extra={"reason": "environment_exists", "count": len(existing)},
            )
            return

        if not request.should_deploy:
            outcome = self._confirm_deploy()
            if outcome is not ConfirmOutcome.YES:
                logger.info("deploy_skipped", extra={"reason": f"confirm_{outcome}"})
                return

        environment = Environment(
            project=request.project,
            name=self._deploy_settings.environment_name,
            public_load_balancer=self._deploy_settings.public_load_balancer,
        )
        self._provision(environment)

    def _confirm_deploy(self) -> ConfirmOutcome:
        try:
            accepted = self._prompter.confirm(
                "Deseja configurar um ambiente de teste?",
                "Você pode fazer deploy da aplicação no ambiente de teste.",
            )
        except PromptError as exc:
            if self._deploy_settings.confirm_failure_policy == "abort":
                raise AskError(f"falha ao confirmar o ambiente de teste: {exc}") from exc
            logger.warning(
                "deploy_confirmation_failed",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            self._notify(
                "Não foi possível ler a resposta; o ambiente de teste não será criado."
            )
            return ConfirmOutcome.FAILED
        return ConfirmOutcome.YES if accepted else ConfirmOutcome.NO

    def _provision(self, environment: Environment) -> None:
        self._progress.start(PREPARING_LABEL)
        try:
            self._deployer.deploy_environment(environment)
        except ToleratedConflictError:
            self._progress.stop(DONE_LABEL)
            self._notify(
                f"O ambiente {environment.name} já existe no projeto {environment.project}."
            )
            return
        except Exception:
            self._progress.stop(ERROR_LABEL)
            raise
        self._progress.stop(DONE_LABEL)

        self._progress.start(DEPLOYING_LABEL)
        try:
            self._waiting = True
            try:
                self._deployer.wait_for_environment_creation(environment, self._cancel_event)
            finally:
                self._waiting = False
            self._environment_store.create_environment(environment)
        except BaseException:  # inclui Ctrl+C durante a espera
            self._progress.stop(ERROR_LABEL)
            raise
        self._progress.stop(DONE_LABEL)
        logger.info(
            "environment_deployed",
            extra={"project": environment.project, "environment": environment.name},
        )

    # ──────────────────────────────────────────────────────────────────────
    # FSM
    # ──────────────────────────────────────────────────────────────────────

    def _advance(self, phase: BootstrapPhase, trigger: str) -> None:
        result = self._fsm.transition(phase, trigger=trigger)
        if not result.success:
            raise InvalidPhaseTransitionError(result.error_reason)
        logger.debug("bootstrap_phase", extra={"phase": str(phase), "trigger": trigger})

    def _run_step(self, phase: BootstrapPhase, step: Callable[[], None]) -> None:
        self._advance(phase, "execute")
        try:
            step()
        except Exception as exc:
            self._fail(phase, exc)
            raise

    def _fail(self, phase: BootstrapPhase, exc: Exception) -> None:
        self._fsm.transition(
            BootstrapPhase.FAILED,
            trigger="error",
            metadata={"phase": str(phase), "error_type": type(exc).__name__},
        )
        exc.add_note(f"fase: {phase}")
        logger.error(
            "bootstrap_phase_failed",
            extra={
                "phase": str(phase),
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
