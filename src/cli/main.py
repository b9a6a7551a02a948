"""Entrypoint do CLI `forja`.

Uso:
    forja init --project acme --app api --app-type "Load Balanced Web App"
    forja init --skip-deploy
"""

from __future__ import annotations

import argparse

from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import reset_correlation_id, set_correlation_id
from cli import init_command
from config.settings import VALID_LOG_LEVELS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forja",
        description="Cria projetos e aplicações na nuvem.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Nível dos logs JSON em stderr (padrão: LOG_LEVEL ou WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    init_command.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    token = set_correlation_id()
    try:
        initialize_app(log_level=args.log_level, command=args.command)
        try:
            validate_runtime_settings()
        except RuntimeError as exc:
            init_command.print_error(exc)
            return init_command.EXIT_ERROR
        return args.handler(args)
    finally:
        reset_correlation_id(token)


if __name__ == "__main__":
    raise SystemExit(main())
