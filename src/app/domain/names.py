"""Regras de nome para projetos e aplicações.

Nomes viram parte de identificadores de infraestrutura (stacks, DNS),
então seguem a regra de label DNS: minúsculas, dígitos e hífen.
"""

from __future__ import annotations

import re

from utils.errors import EmptyValueError, InvalidNameError

NAME_MAX_LENGTH = 63

_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


def _validate_name(value: object) -> None:
    if not isinstance(value, str):
        raise InvalidNameError(f"esperado texto, recebido {type(value).__name__}")
    if value == "":
        raise EmptyValueError()
    if len(value) > NAME_MAX_LENGTH:
        raise InvalidNameError(f"o valor deve ter no máximo {NAME_MAX_LENGTH} caracteres")
    if not value[0].isalpha() or not value[0].islower():
        raise InvalidNameError("o valor deve começar com uma letra minúscula")
    if not _NAME_PATTERN.match(value):
        raise InvalidNameError(
            "o valor deve conter apenas letras minúsculas, números e hífens"
        )
    if value.endswith("-"):
        raise InvalidNameError("o valor não pode terminar com hífen")


def validate_project_name(value: object) -> None:
    """Valida nome de projeto.

    Raises:
        EmptyValueError: Valor vazio (tratado à parte pelo Validate).
        InvalidNameError: Qualquer outra violação.
    """
    _validate_name(value)


def validate_application_name(value: object) -> None:
    """Valida nome de aplicação (mesma regra do projeto)."""
    _validate_name(value)


def validate_environment_name(value: object) -> None:
    """Valida nome de ambiente; compõe o nome da stack junto com o projeto."""
    _validate_name(value)


__all__ = [
    "NAME_MAX_LENGTH",
    "validate_application_name",
    "validate_environment_name",
    "validate_project_name",
]
