"""Subcomando `forja init`: cria projeto, aplicação e ambiente de teste."""

from __future__ import annotations

import argparse
import signal
from typing import TYPE_CHECKING

from rich.console import Console

from app.bootstrap import build_init_orchestrator
from app.use_cases.init_app import BootstrapRequest
from config.logging import get_logger
from utils.errors import BootstrapError, DeploymentCancelledError

if TYPE_CHECKING:
    from app.use_cases.init_app import InitAppOrchestrator

logger = get_logger(__name__)

error_console = Console(stderr=True, highlight=False)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def register(subparsers: argparse._SubParsersAction) -> None:
    """Adiciona o subcomando `init` ao parser principal."""
    parser = subparsers.add_parser(
        "init",
        help="Cria uma nova aplicação.",
        description="Cria uma nova aplicação. Valores ausentes são perguntados interativamente.",
    )
    parser.add_argument("-p", "--project", default="", help="Nome do projeto.")
    parser.add_argument("-a", "--app", dest="app_name", default="", help="Nome da aplicação.")
    parser.add_argument(
        "-t",
        "--app-type",
        default="",
        help="Tipo de aplicação a criar.",
    )
    deploy_group = parser.add_mutually_exclusive_group()
    deploy_group.add_argument(
        "--deploy",
        dest="should_deploy",
        action="store_true",
        help='Faz deploy da aplicação num ambiente "test" (exclusivo com --skip-deploy).',
    )
    deploy_group.add_argument(
        "--skip-deploy",
        dest="should_skip_deploy",
        action="store_true",
        help="Não cria ambiente nem faz deploy (exclusivo com --deploy).",
    )
    parser.set_defaults(handler=run_init)


def request_from_args(args: argparse.Namespace) -> BootstrapRequest:
    return BootstrapRequest(
        project=args.project,
        app_name=args.app_name,
        app_type=args.app_type,
        should_deploy=args.should_deploy,
        should_skip_deploy=args.should_skip_deploy,
    )


def run_init(args: argparse.Namespace, console: Console | None = None) -> int:
    """Executa Prepare → Ask → Validate → Execute.

    Returns:
        Código de saída do processo.
    """
    console = console or Console()
    orchestrator = build_init_orchestrator(request_from_args(args), console)
    return run_orchestrator(orchestrator, console)


def run_orchestrator(orchestrator: InitAppOrchestrator, console: Console) -> int:
    """Roda as fases do orquestrador e traduz o resultado em código de saída."""
    previous_handler = _install_interrupt_handler(orchestrator)
    try:
        orchestrator.prepare()
        orchestrator.ask()
        orchestrator.validate()
        orchestrator.execute()
    except KeyboardInterrupt:
        console.print("[yellow]Interrompido.[/yellow]")
        return EXIT_INTERRUPTED
    except DeploymentCancelledError as exc:
        _print_error(exc)
        return EXIT_INTERRUPTED
    except BootstrapError as exc:
        _print_error(exc)
        return EXIT_ERROR
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    console.print(
        f"[green]Aplicação {orchestrator.request.app_name} criada "
        f"no projeto {orchestrator.request.project}.[/green]"
    )
    return EXIT_OK


def _install_interrupt_handler(orchestrator: InitAppOrchestrator):  # noqa: ANN202
    """Durante a espera do deploy, o primeiro Ctrl+C cancela; fora dela interrompe."""

    def _handle(signum: int, frame: object) -> None:
        if orchestrator.waiting and not orchestrator.cancel_event.is_set():
            orchestrator.cancel()
            return
        signal.default_int_handler(signum, frame)

    return signal.signal(signal.SIGINT, _handle)


def print_error(message: object, notes: list[str] | None = None) -> None:
    """Escreve o erro (e as notas de fase) em stderr."""
    error_console.print(f"erro: {message}", markup=False, soft_wrap=True)
    for note in notes or []:
        error_console.print(f"  {note}", markup=False, soft_wrap=True)


def _print_error(exc: BootstrapError) -> None:
    logger.debug("init_failed", extra={"error_type": type(exc).__name__})
    print_error(exc, getattr(exc, "__notes__", None))
