"""Testes do HttpEnvironmentDeployer com httpx.MockTransport."""

from __future__ import annotations

import json
import threading

import httpx
import pytest

from app.domain.project import Environment
from app.infra.deploy import HttpEnvironmentDeployer
from utils.errors import (
    DeploymentCancelledError,
    DeploymentError,
    DeploymentTimeoutError,
    StackAlreadyExistsError,
)

ENV = Environment(project="shop", name="test")


def _deployer(handler, **kwargs) -> HttpEnvironmentDeployer:
    client = httpx.Client(base_url="https://deployer.test", transport=httpx.MockTransport(handler))
    kwargs.setdefault("poll_interval_seconds", 0)
    kwargs.setdefault("timeout_seconds", 5)
    return HttpEnvironmentDeployer(client, **kwargs)


def _status_sequence(*statuses: str):
    remaining = list(statuses)
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        status = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return httpx.Response(200, json={"status": status})

    return handler, seen


class TestDeployEnvironment:
    def test_posts_stack_request(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(202, json={})

        _deployer(handler).deploy_environment(ENV)

        assert captured[0].method == "POST"
        assert captured[0].url.path == "/stacks"
        assert json.loads(captured[0].content) == {
            "stack_name": "shop-test",
            "template": "environment",
            "parameters": {
                "project": "shop",
                "environment": "test",
                "public_load_balancer": True,
            },
        }

    def test_conflict_is_tolerated_error(self) -> None:
        deployer = _deployer(lambda request: httpx.Response(409, json={"message": "exists"}))

        with pytest.raises(StackAlreadyExistsError) as exc_info:
            deployer.deploy_environment(ENV)

        assert exc_info.value.resource == "stack"

    def test_server_error_is_deployment_error(self) -> None:
        deployer = _deployer(lambda request: httpx.Response(500, json={"message": "boom"}))

        with pytest.raises(DeploymentError, match="boom"):
            deployer.deploy_environment(ENV)

    def test_transport_error_is_deployment_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(DeploymentError, match="provisionador"):
            _deployer(handler).deploy_environment(ENV)


class TestWaitForEnvironmentCreation:
    def test_polls_until_complete(self) -> None:
        handler, seen = _status_sequence(
            "CREATE_IN_PROGRESS", "CREATE_IN_PROGRESS", "CREATE_COMPLETE"
        )

        _deployer(handler).wait_for_environment_creation(ENV)

        assert seen == ["/stacks/shop-test"] * 3

    @pytest.mark.parametrize("status", ["CREATE_FAILED", "ROLLBACK_COMPLETE", "ROLLBACK_FAILED"])
    def test_failed_status_raises(self, status: str) -> None:
        handler, _ = _status_sequence("CREATE_IN_PROGRESS", status)

        with pytest.raises(DeploymentError, match=status):
            _deployer(handler).wait_for_environment_creation(ENV)

    def test_timeout(self) -> None:
        handler, _ = _status_sequence("CREATE_IN_PROGRESS")

        with pytest.raises(DeploymentTimeoutError):
            _deployer(handler, timeout_seconds=0).wait_for_environment_creation(ENV)

    def test_cancel_before_first_poll(self) -> None:
        handler, seen = _status_sequence("CREATE_IN_PROGRESS")
        cancel = threading.Event()
        cancel.set()

        with pytest.raises(DeploymentCancelledError):
            _deployer(handler).wait_for_environment_creation(ENV, cancel)

        assert seen == []

    def test_cancel_during_polling(self) -> None:
        cancel = threading.Event()
        polls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            polls.append(1)
            cancel.set()
            return httpx.Response(200, json={"status": "CREATE_IN_PROGRESS"})

        deployer = _deployer(handler, poll_interval_seconds=60)

        with pytest.raises(DeploymentCancelledError):
            deployer.wait_for_environment_creation(ENV, cancel)

        assert len(polls) == 1

    def test_status_http_error(self) -> None:
        deployer = _deployer(lambda request: httpx.Response(404, json={"error": "not found"}))

        with pytest.raises(DeploymentError, match="404"):
            deployer.wait_for_environment_creation(ENV)

    def test_invalid_json_is_deployment_error(self) -> None:
        deployer = _deployer(lambda request: httpx.Response(200, content=b"not json"))

        with pytest.raises(DeploymentError):
            deployer.wait_for_environment_creation(ENV)
