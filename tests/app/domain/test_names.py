"""Testes das regras de nome de projeto e aplicação."""

from __future__ import annotations

import pytest

from app.domain.names import (
    NAME_MAX_LENGTH,
    validate_application_name,
    validate_project_name,
)
from utils.errors import EmptyValueError, InvalidNameError, NameValidationError

VALIDATORS = [validate_project_name, validate_application_name]


@pytest.mark.parametrize("validator", VALIDATORS)
@pytest.mark.parametrize("value", ["shop", "a", "web-app-2", "x" * NAME_MAX_LENGTH])
def test_accepts_dns_labels(validator, value: str) -> None:
    validator(value)


@pytest.mark.parametrize("validator", VALIDATORS)
def test_empty_value_has_distinct_error(validator) -> None:
    with pytest.raises(EmptyValueError):
        validator("")


@pytest.mark.parametrize("validator", VALIDATORS)
@pytest.mark.parametrize(
    "value",
    [
        "Shop",
        "1shop",
        "-shop",
        "shop-",
        "shop_app",
        "shop app",
        "açaí",
        "x" * (NAME_MAX_LENGTH + 1),
    ],
)
def test_rejects_malformed_names(validator, value: str) -> None:
    with pytest.raises(InvalidNameError):
        validator(value)


def test_non_text_is_invalid() -> None:
    with pytest.raises(InvalidNameError, match="texto"):
        validate_project_name(None)


def test_errors_share_validation_base() -> None:
    """Validate trata qualquer NameValidationError que não seja vazio."""
    assert issubclass(EmptyValueError, NameValidationError)
    assert issubclass(InvalidNameError, NameValidationError)
    assert issubclass(InvalidNameError, ValueError)
