"""Protocolos de interação com o operador (prompt e progresso)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

# Levanta NameValidationError se o valor for inválido
Validator = Callable[[str], None]


class PrompterProtocol(Protocol):
    """Coleta de entrada interativa com validação por campo.

    Falhas do canal de entrada levantam PromptError.
    """

    def get_text(
        self,
        message: str,
        help_text: str,
        validator: Validator | None = None,
    ) -> str: ...

    def select_one(
        self,
        message: str,
        help_text: str,
        options: Sequence[str],
    ) -> str: ...

    def confirm(self, message: str, help_text: str) -> bool: ...


class ProgressProtocol(Protocol):
    """Indicador visual em volta de operações longas."""

    def start(self, label: str) -> None: ...

    def stop(self, label: str) -> None: ...
