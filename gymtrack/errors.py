from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError


class StorageFailure(Exception):
    """The underlying database rejected or failed an operation."""


class StorageUnavailable(StorageFailure):
    """The database could not be opened or initialised."""


class ValidationFailure(ValueError):
    """Input was rejected before it reached the store."""


M = TypeVar("M", bound=BaseModel)


def validated(model: type[M], data: Any) -> M:
    """Validate ``data`` as ``model``, raising ValidationFailure on bad input."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailure(str(exc)) from exc
