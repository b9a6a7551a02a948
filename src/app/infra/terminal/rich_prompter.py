"""Prompter interativo sobre rich.prompt."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from app.protocols.terminal import PrompterProtocol
from utils.errors import NameValidationError, PromptError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.terminal import Validator

logger = logging.getLogger(__name__)


class RichPrompter(PrompterProtocol):
    """Faz perguntas no terminal e repete em caso de valor inválido.

    Args:
        console: Console de saída (padrão: stdout).
        stream: Fonte de entrada alternativa (testes); padrão é stdin.
        max_attempts: Tentativas por campo antes de levantar PromptError.
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        max_attempts: int = 5,
    ) -> None:
        self._console = console or Console()
        self._stream = stream
        self._max_attempts = max_attempts

    def get_text(
        self,
        message: str,
        help_text: str,
        validator: Validator | None = None,
    ) -> str:
        self._print_help(help_text)
        for _ in range(self._max_attempts):
            value = self._ask(Prompt, message).strip()
            if validator is None:
                return value
            try:
                validator(value)
            except NameValidationError as exc:
                self._console.print(f"[red]Valor inválido: {exc}[/red]")
                continue
            return value
        raise PromptError(f"nenhum valor válido após {self._max_attempts} tentativas")

    def select_one(
        self,
        message: str,
        help_text: str,
        options: Sequence[str],
    ) -> str:
        if not options:
            raise PromptError("nenhuma opção disponível para seleção")
        self._print_help(help_text)
        return self._ask(Prompt, message, choices=list(options), default=options[0])

    def confirm(self, message: str, help_text: str) -> bool:
        self._print_help(help_text)
        return bool(self._ask(Confirm, message, default=False))

    def _print_help(self, help_text: str) -> None:
        if help_text:
            self._console.print(f"[dim]{help_text}[/dim]")

    def _ask(self, prompt_cls: type[Prompt] | type[Confirm], message: str, **kwargs: object):  # noqa: ANN202
        try:
            return prompt_cls.ask(
                message,
                console=self._console,
                stream=self._stream,
                **kwargs,  # type: ignore[arg-type]
            )
        except EOFError as exc:
            logger.debug("prompt_input_closed")
            raise PromptError("entrada encerrada antes da resposta") from exc
