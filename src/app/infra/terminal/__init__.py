"""Prompt e indicador de progresso no terminal (rich)."""

from app.infra.terminal.rich_progress import RichProgress
from app.infra.terminal.rich_prompter import RichPrompter

__all__ = ["RichProgress", "RichPrompter"]
