"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    DeployerSettings,
    DeploySettings,
    RegistrySettings,
    WorkspaceSettings,
    get_base_settings,
    get_deploy_settings,
    get_deployer_settings,
    get_registry_settings,
    get_workspace_settings,
)


class TestBaseSettings:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("ENVIRONMENT", "LOG_LEVEL", "GCP_PROJECT", "GOOGLE_CLOUD_PROJECT"):
            monkeypatch.delenv(var, raising=False)

        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.log_level == "WARNING"
        assert settings.is_development is True
        assert settings.validate() == []

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(self, monkeypatch, raw: str, expected: str) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert get_base_settings().environment == expected

    def test_gcp_project_fallback(self, monkeypatch) -> None:
        monkeypatch.delenv("GCP_PROJECT", raising=False)
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "gcp-123")
        assert get_base_settings().gcp_project == "gcp-123"

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="TRACE").validate()
        assert any("LOG_LEVEL" in error for error in errors)

    def test_debug_forces_debug_level(self) -> None:
        assert BaseSettings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"
        assert BaseSettings(log_level="info").effective_log_level == "INFO"

    def test_strict_validation_outside_development(self) -> None:
        assert BaseSettings().strict_validation is False
        assert BaseSettings(environment="staging").strict_validation is True

    def test_cached(self) -> None:
        assert get_base_settings() is get_base_settings()


class TestRegistrySettings:
    def test_firestore_requires_project(self) -> None:
        errors = RegistrySettings(backend="firestore").validate(gcp_project="")
        assert errors == ["FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"]

    def test_firestore_uses_gcp_project(self) -> None:
        assert RegistrySettings(backend="firestore").validate(gcp_project="p") == []

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REGISTRY_BACKEND", "Firestore")
        monkeypatch.setenv("FIRESTORE_COLLECTION_PROJECTS", "forja_projects")

        settings = get_registry_settings()

        assert settings.backend == "firestore"
        assert settings.collection_projects == "forja_projects"
        assert settings.collection_environments == "environments"

    def test_unknown_backend(self) -> None:
        errors = RegistrySettings(backend="redis").validate(gcp_project="")  # type: ignore[arg-type]
        assert any("REGISTRY_BACKEND" in error for error in errors)


class TestDeployerSettings:
    def test_from_env_strips_trailing_slash(self, monkeypatch) -> None:
        monkeypatch.setenv("DEPLOYER_BASE_URL", "https://deployer.example/")
        monkeypatch.setenv("DEPLOYER_POLL_INTERVAL_SECONDS", "2")

        settings = get_deployer_settings()

        assert settings.base_url == "https://deployer.example"
        assert settings.poll_interval_seconds == 2.0

    def test_missing_base_url(self) -> None:
        assert "DEPLOYER_BASE_URL não configurado" in DeployerSettings().validate()

    def test_timeout_must_cover_one_poll(self) -> None:
        settings = DeployerSettings(base_url="x", poll_interval_seconds=10, timeout_seconds=5)
        assert len(settings.validate()) == 1


class TestDeploySettings:
    def test_defaults(self, monkeypatch) -> None:
        for var in (
            "DEPLOY_ENVIRONMENT_NAME",
            "DEPLOY_PUBLIC_LOAD_BALANCER",
            "DEPLOY_CONFIRM_FAILURE_POLICY",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = get_deploy_settings()

        assert settings == DeploySettings()
        assert settings.environment_name == "test"
        assert settings.public_load_balancer is True
        assert settings.confirm_failure_policy == "skip"

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("DEPLOY_PUBLIC_LOAD_BALANCER", "false")
        monkeypatch.setenv("DEPLOY_CONFIRM_FAILURE_POLICY", "ABORT")

        settings = get_deploy_settings()

        assert settings.public_load_balancer is False
        assert settings.confirm_failure_policy == "abort"

    def test_invalid_policy(self) -> None:
        settings = DeploySettings(confirm_failure_policy="retry")  # type: ignore[arg-type]
        assert len(settings.validate()) == 1

    def test_environment_name_follows_name_rule(self) -> None:
        """O nome compõe a stack `{projeto}-{ambiente}`."""
        assert DeploySettings(environment_name="qa-1").validate() == []
        assert DeploySettings(environment_name="").validate() == [
            "DEPLOY_ENVIRONMENT_NAME não pode ser vazio"
        ]
        for name in ("Test", "test_env", "test-", "x" * 64):
            errors = DeploySettings(environment_name=name).validate()
            assert len(errors) == 1
            assert errors[0].startswith("DEPLOY_ENVIRONMENT_NAME inválido")


class TestWorkspaceSettings:
    def test_defaults_are_valid(self) -> None:
        assert WorkspaceSettings().validate() == []

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("WORKSPACE_DIR_NAME", ".meta")
        monkeypatch.setenv("PROMPT_MAX_ATTEMPTS", "3")

        settings = get_workspace_settings()

        assert settings.dir_name == ".meta"
        assert settings.prompt_max_attempts == 3

    @pytest.mark.parametrize(
        "settings",
        [WorkspaceSettings(dir_name=""), WorkspaceSettings(dir_name="a/b"),
         WorkspaceSettings(prompt_max_attempts=0)],
    )
    def test_invalid(self, settings: WorkspaceSettings) -> None:
        assert len(settings.validate()) == 1
