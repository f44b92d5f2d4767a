"""Errors raised by the inventory collaborators, and result values for edits."""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


class CheckoutError(Exception):
    """Base class for every error raised by this package."""


class InventoryError(CheckoutError):
    """An inventory edit was rejected (missing or malformed attributes)."""


class InventoryFormatError(InventoryError):
    """An inventory definition could not be read or parsed."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
