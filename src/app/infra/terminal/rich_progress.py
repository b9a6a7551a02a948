"""Indicador de progresso sobre rich.status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from app.protocols.terminal import ProgressProtocol

if TYPE_CHECKING:
    from rich.status import Status


class RichProgress(ProgressProtocol):
    """Spinner único; start() com spinner ativo troca o texto."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._status: Status | None = None

    @property
    def active(self) -> bool:
        return self._status is not None

    def start(self, label: str) -> None:
        if self._status is not None:
            self._status.update(label)
            return
        self._status = self._console.status(label)
        self._status.start()

    def stop(self, label: str) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
        if label:
            self._console.print(label)
