"""Tests for repokit/domain/errors.py."""

import pytest

from repokit.domain.errors import (
    ConstraintViolationError,
    InvalidArgumentError,
    RepositoryError,
    StoreUnavailableError,
)


@pytest.mark.parametrize(
    "kind", [ConstraintViolationError, StoreUnavailableError, InvalidArgumentError]
)
def test_error_kinds_share_repository_error_base(kind):
    assert issubclass(kind, RepositoryError)


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


def test_store_errors_are_not_value_errors():
    assert not issubclass(StoreUnavailableError, ValueError)
    assert not issubclass(ConstraintViolationError, ValueError)
