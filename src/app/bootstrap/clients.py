"""Factories de clientes externos: Firestore e HTTP do provisionador."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from config.settings import DeployerSettings

logger = logging.getLogger(__name__)

USER_AGENT = "forja-cli"


def create_firestore_client(project_id: str | None) -> FirestoreClient:
    """Cria cliente Firestore.

    Args:
        project_id: Projeto GCP; None usa as credenciais padrão.
    """
    from google.cloud import firestore

    client = firestore.Client(project=project_id or None)
    logger.info("firestore_client_created", extra={"gcp_project": project_id})
    return client


def create_deployer_http_client(settings: DeployerSettings) -> httpx.Client:
    """Cria cliente HTTP síncrono para a API de stacks.

    Sem DEPLOYER_BASE_URL o cliente é criado mesmo assim; as chamadas
    falham com DeploymentError se o deploy for realmente solicitado.
    """
    if not settings.base_url:
        logger.warning("deployer_base_url_missing")

    headers = {"User-Agent": USER_AGENT}
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"

    client = httpx.Client(
        base_url=settings.base_url,
        headers=headers,
        timeout=settings.request_timeout_seconds,
    )
    logger.info("deployer_http_client_created", extra={"base_url": settings.base_url})
    return client
