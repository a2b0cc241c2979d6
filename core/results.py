"""
core/results.py -- Explicit outcome variants returned by the service layer.

Services never raise for expected outcomes. They return one of:

    Ok(value)                  the operation succeeded
    ValidationFailed(message)  a field rule rejected the input
    DuplicateKey(message)      a uniqueness constraint fired
    NotFound(message)          the target id does not exist

Route handlers branch on the variant type to choose a status code. Anything
unexpected still travels as ApplicationError (core/errors.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True)
class ValidationFailed:
    message: str


@dataclass(frozen=True)
class DuplicateKey:
    message: str


@dataclass(frozen=True)
class NotFound:
    message: str


Result = Union[Ok[Any], ValidationFailed, DuplicateKey, NotFound]
