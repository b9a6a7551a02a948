"""Modelos de domínio dos registros de projeto e ambiente."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """Namespace que agrupa aplicações e seus ambientes."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=1, description="Nome único no registry.")


class Environment(BaseModel):
    """Alvo de deploy pertencente a um único projeto."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    project: str = Field(..., min_length=1, description="Projeto dono do ambiente.")
    name: str = Field(..., min_length=1, description="Nome do ambiente (ex: test).")
    public_load_balancer: bool = Field(
        default=True,
        description="Se o load balancer do ambiente é exposto publicamente.",
    )

    @property
    def stack_name(self) -> str:
        """Nome da stack de infraestrutura do ambiente."""
        return f"{self.project}-{self.name}"


class WorkspaceSummary(BaseModel):
    """Visão somente leitura do vínculo do workspace local."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    project_name: str = Field(..., min_length=1)


__all__ = ["Environment", "Project", "WorkspaceSummary"]
