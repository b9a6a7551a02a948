"""Manifesto da aplicação.

O manifesto é função pura de (nome, tipo) e é serializado em YAML para o
workspace. Os valores padrão descrevem um serviço web atrás de um load
balancer.
"""

from __future__ import annotations

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.errors import ManifestError

LOAD_BALANCED_WEB_APP = "Load Balanced Web App"

# Ordem importa: é a ordem apresentada no prompt
SUPPORTED_APP_TYPES: tuple[str, ...] = (LOAD_BALANCED_WEB_APP,)


class ImageConfig(BaseModel):
    """Como construir a imagem do container."""

    model_config = ConfigDict(extra="forbid")

    build: str = Field(..., description="Caminho do Dockerfile relativo ao workspace.")
    port: int = Field(default=80, ge=1, le=65535)


class HttpConfig(BaseModel):
    """Roteamento do load balancer."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(default="/")
    healthcheck: str = Field(default="/")


class AppManifest(BaseModel):
    """Descrição da aplicação gravada no workspace."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    type: str = Field(..., description="Tipo de template (ex: Load Balanced Web App).")
    image: ImageConfig
    http: HttpConfig = Field(default_factory=HttpConfig)
    cpu: int = Field(default=256, ge=1)
    memory: int = Field(default=512, ge=1)
    count: int = Field(default=1, ge=0)

    def to_yaml(self) -> bytes:
        """Serializa o manifesto em YAML (UTF-8).

        Raises:
            ManifestError: Se a serialização falhar.
        """
        try:
            text = yaml.safe_dump(
                self.model_dump(mode="json"),
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as exc:
            raise ManifestError(f"falha ao serializar o manifesto: {exc}") from exc
        return text.encode("utf-8")


def create_manifest(app_name: str, app_type: str) -> AppManifest:
    """Deriva o manifesto para a aplicação.

    Raises:
        ManifestError: Tipo não suportado ou campos inválidos.
    """
    if app_type not in SUPPORTED_APP_TYPES:
        raise ManifestError(
            f"tipo de aplicação não suportado: {app_type!r} "
            f"(suportados: {', '.join(SUPPORTED_APP_TYPES)})"
        )
    try:
        return AppManifest(
            name=app_name,
            type=app_type,
            image=ImageConfig(build=f"{app_name}/Dockerfile"),
        )
    except ValidationError as exc:
        raise ManifestError(f"falha ao gerar o manifesto: {exc}") from exc


__all__ = [
    "LOAD_BALANCED_WEB_APP",
    "SUPPORTED_APP_TYPES",
    "AppManifest",
    "HttpConfig",
    "ImageConfig",
    "create_manifest",
]
