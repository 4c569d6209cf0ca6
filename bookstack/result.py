"""Result type for catalog and configuration loading."""

from dataclasses import dataclass
from typing import TypeAlias, TypeVar, Generic, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]


def unwrap(result: "Result[T, Exception]") -> T:
    """Return the value of an ``Ok`` or raise the error held by an ``Err``."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise error
    raise TypeError(f"Not a Result: {type(result).__name__}")
