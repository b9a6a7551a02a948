"""Testes da fase Execute (createProject → initWorkspace → createApp → deployEnv)."""

from __future__ import annotations

import threading

import pytest
import yaml

from app.domain.manifest import LOAD_BALANCED_WEB_APP
from app.domain.project import Environment
from app.use_cases.init_app import BootstrapRequest
from app.use_cases.init_app.orchestrator import (
    DEPLOYING_LABEL,
    DONE_LABEL,
    ERROR_LABEL,
    PREPARING_LABEL,
)
from config.settings.deploy import DeploySettings
from fsm import BootstrapPhase
from tests.fakes.fake_collaborators import ScriptedPrompter
from utils.errors import (
    AskError,
    DeploymentCancelledError,
    DeploymentError,
    EmptyValueError,
    InvalidNameError,
    InvalidPhaseTransitionError,
    ManifestError,
    PromptError,
    RegistryUnavailableError,
    StackAlreadyExistsError,
    WorkspaceConflictError,
)


def _request(**overrides) -> BootstrapRequest:
    values = {"project": "shop", "app_name": "web", "app_type": LOAD_BALANCED_WEB_APP}
    values.update(overrides)
    return BootstrapRequest(**values)


def _run(harness, request: BootstrapRequest):
    orchestrator = harness.build(request)
    orchestrator.prepare()
    orchestrator.ask()
    orchestrator.validate()
    orchestrator.execute()
    return orchestrator


class TestExecuteHappyPath:
    def test_new_project_with_confirmed_deploy(self, harness) -> None:
        """Projeto novo, sem ambientes, operador confirma o deploy."""
        harness.prompter = ScriptedPrompter(harness.calls, [True])

        orchestrator = _run(harness, _request())

        assert harness.calls == [
            "create_project",
            "workspace_create",
            "write_manifest",
            "list_environments",
            "confirm",
            "deploy_environment",
            "wait_for_environment_creation",
            "create_environment",
        ]
        assert harness.environments.environments == [
            Environment(project="shop", name="test", public_load_balancer=True)
        ]
        assert harness.progress.events == [
            ("start", PREPARING_LABEL),
            ("stop", DONE_LABEL),
            ("start", DEPLOYING_LABEL),
            ("stop", DONE_LABEL),
        ]
        assert orchestrator.fsm.current_phase == BootstrapPhase.COMPLETED

    def test_manifest_content_is_written(self, harness) -> None:
        _run(harness, _request(should_skip_deploy=True))

        manifest = yaml.safe_load(harness.workspace.manifests["web"])
        assert manifest["name"] == "web"
        assert manifest["type"] == LOAD_BALANCED_WEB_APP
        assert manifest["image"]["build"] == "web/Dockerfile"

    def test_existing_project_is_tolerated(self, harness) -> None:
        harness.projects.projects = ["shop"]

        orchestrator = _run(harness, _request(should_skip_deploy=True))

        assert harness.calls[:2] == ["create_project", "workspace_create"]
        assert orchestrator.fsm.current_phase == BootstrapPhase.COMPLETED

    def test_wait_receives_cancel_token(self, harness) -> None:
        orchestrator = _run(harness, _request(should_deploy=True))

        assert harness.deployer.cancel_events == [orchestrator.cancel_event]
        assert isinstance(orchestrator.cancel_event, threading.Event)

    def test_environment_settings_are_applied(self, harness) -> None:
        harness.deploy_settings = DeploySettings(
            environment_name="staging", public_load_balancer=False
        )

        _run(harness, _request(should_deploy=True))

        assert harness.deployer.deployed == [
            Environment(project="shop", name="staging", public_load_balancer=False)
        ]


class TestDeployDecision:
    def test_skip_flag_does_not_touch_registry(self, harness) -> None:
        _run(harness, _request(should_skip_deploy=True))

        assert "list_environments" not in harness.calls
        assert harness.deployer.deployed == []

    def test_skip_wins_over_deploy(self, harness) -> None:
        _run(harness, _request(should_deploy=True, should_skip_deploy=True))

        assert harness.deployer.deployed == []
        assert harness.prompter.asked == []

    def test_existing_environment_skips_deploy(self, harness) -> None:
        harness.environments.environments = [Environment(project="shop", name="prod")]

        _run(harness, _request(should_deploy=True))

        assert "confirm" not in harness.calls
        assert harness.deployer.deployed == []

    def test_deploy_flag_skips_confirmation(self, harness) -> None:
        _run(harness, _request(should_deploy=True))

        assert "confirm" not in harness.calls
        assert len(harness.deployer.deployed) == 1

    def test_declined_confirmation_skips_deploy(self, harness) -> None:
        harness.prompter = ScriptedPrompter(harness.calls, [False])

        orchestrator = _run(harness, _request())

        assert harness.deployer.deployed == []
        assert harness.progress.events == []
        assert orchestrator.fsm.current_phase == BootstrapPhase.COMPLETED

    def test_confirmation_failure_skips_with_notice(self, harness) -> None:
        """Falha do canal de entrada não vira um "não" silencioso."""
        harness.prompter = ScriptedPrompter(harness.calls, [PromptError("eof")])

        orchestrator = _run(harness, _request())

        assert harness.deployer.deployed == []
        assert any("não será criado" in message for message in harness.messages)
        assert orchestrator.fsm.current_phase == BootstrapPhase.COMPLETED

    def test_confirmation_failure_aborts_with_abort_policy(self, harness) -> None:
        harness.deploy_settings = DeploySettings(confirm_failure_policy="abort")
        harness.prompter = ScriptedPrompter(harness.calls, [PromptError("eof")])

        with pytest.raises(AskError) as exc_info:
            _run(harness, _request())

        assert "fase: DEPLOYING_ENV" in exc_info.value.__notes__
        assert harness.deployer.deployed == []

    def test_environment_listing_failure_falls_back_to_deploy(self, harness) -> None:
        harness.environments.list_error = RegistryUnavailableError("offline")

        _run(harness, _request(should_deploy=True))

        assert len(harness.deployer.deployed) == 1

    def test_existing_stack_is_tolerated(self, harness) -> None:
        harness.deployer.deploy_error = StackAlreadyExistsError("shop-test")

        orchestrator = _run(harness, _request(should_deploy=True))

        assert "wait_for_environment_creation" not in harness.calls
        assert "create_environment" not in harness.calls
        assert harness.progress.events == [("start", PREPARING_LABEL), ("stop", DONE_LABEL)]
        assert harness.messages == ["O ambiente test já existe no projeto shop."]
        assert orchestrator.fsm.current_phase == BootstrapPhase.COMPLETED


class TestExecuteFailures:
    def test_invalid_project_fails_before_side_effects(self, harness) -> None:
        """Projeto vazio passa no Validate, mas não no createProject."""
        orchestrator = harness.build(_request(project=""))
        orchestrator.validate()

        with pytest.raises(EmptyValueError) as exc_info:
            orchestrator.execute()

        assert "fase: CREATING_PROJECT" in exc_info.value.__notes__
        assert harness.calls == []

    def test_registry_failure_stops_pipeline(self, harness) -> None:
        error = RegistryUnavailableError("offline")
        harness.projects.create_error = error

        with pytest.raises(RegistryUnavailableError) as exc_info:
            _run(harness, _request())

        assert exc_info.value is error
        assert harness.calls == ["create_project"]

    def test_workspace_conflict_stops_before_manifest(self, harness) -> None:
        harness.workspace.create_error = WorkspaceConflictError("outro projeto")

        with pytest.raises(WorkspaceConflictError):
            _run(harness, _request())

        assert "write_manifest" not in harness.calls

    def test_unsupported_type_fails_in_create_app(self, harness) -> None:
        orchestrator = harness.build(_request(app_type="Worker"))

        with pytest.raises(ManifestError) as exc_info:
            orchestrator.execute()

        assert "fase: CREATING_APP" in exc_info.value.__notes__
        assert harness.calls == ["create_project", "workspace_create"]

    def test_deploy_failure_stops_progress_with_error(self, harness) -> None:
        harness.deployer.deploy_error = DeploymentError("quota")

        with pytest.raises(DeploymentError):
            _run(harness, _request(should_deploy=True))

        assert harness.progress.events == [("start", PREPARING_LABEL), ("stop", ERROR_LABEL)]
        assert harness.environments.environments == []

    def test_wait_failure_does_not_record_environment(self, harness) -> None:
        harness.deployer.wait_error = DeploymentCancelledError("cancelado")

        orchestrator = harness.build(_request(should_deploy=True))

        with pytest.raises(DeploymentCancelledError):
            orchestrator.execute()

        assert "create_environment" not in harness.calls
        assert harness.progress.events[-1] == ("stop", ERROR_LABEL)

    def test_environment_registry_failure_aborts_deploy(self, harness) -> None:
        error = RegistryUnavailableError("falha ao registrar ambiente test")
        harness.environments.create_error = error
        orchestrator = harness.build(_request(should_deploy=True))

        with pytest.raises(RegistryUnavailableError) as exc_info:
            orchestrator.execute()

        assert exc_info.value is error
        assert "fase: DEPLOYING_ENV" in exc_info.value.__notes__
        assert harness.calls[-2:] == ["wait_for_environment_creation", "create_environment"]
        assert harness.progress.events[-1] == ("stop", ERROR_LABEL)
        assert orchestrator.fsm.current_phase == BootstrapPhase.FAILED
        assert orchestrator.fsm.history[-1].metadata["phase"] == "DEPLOYING_ENV"
        assert orchestrator.waiting is False

    def test_waiting_only_during_wait(self, harness) -> None:
        seen: list[bool] = []
        orchestrator = harness.build(_request(should_deploy=True))
        harness.deployer.wait_for_environment_creation = (
            lambda environment, cancel_event=None: seen.append(orchestrator.waiting)
        )

        assert orchestrator.waiting is False
        orchestrator.execute()

        assert seen == [True]
        assert orchestrator.waiting is False

    def test_failure_is_recorded_in_fsm_history(self, harness) -> None:
        harness.workspace.create_error = WorkspaceConflictError("outro projeto")
        orchestrator = harness.build(_request())

        with pytest.raises(WorkspaceConflictError):
            orchestrator.execute()

        last = orchestrator.fsm.history[-1]
        assert last.to_phase == BootstrapPhase.FAILED
        assert last.metadata == {
            "phase": "INITIALIZING_WORKSPACE",
            "error_type": "WorkspaceConflictError",
        }

    def test_execute_after_failure_is_rejected(self, harness) -> None:
        harness.projects.create_error = RegistryUnavailableError("offline")
        orchestrator = harness.build(_request())
        with pytest.raises(RegistryUnavailableError):
            orchestrator.execute()

        with pytest.raises(InvalidPhaseTransitionError, match="Transição inválida"):
            orchestrator.execute()


def test_invalid_name_surfaces_name_error(harness) -> None:
    orchestrator = harness.build(_request(project="x" * 64))

    with pytest.raises(InvalidNameError):
        orchestrator.execute()


def test_cancel_sets_event(harness) -> None:
    orchestrator = harness.build(_request())
    orchestrator.cancel()
    assert orchestrator.cancel_event.is_set()
