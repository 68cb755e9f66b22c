"""Decode outcomes - the four things a response body can turn out to be."""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    """Expected status with the expected payload shape."""

    status: int
    variant: str
    payload: Any


@dataclass(frozen=True)
class UnexpectedVariant:
    """Well-formed response that is not one of the operation's success shapes."""

    status: int
    value: Optional[Any]


@dataclass(frozen=True)
class NeedMoreData:
    """Not enough bytes yet; append more from the same response and parse again."""


@dataclass(frozen=True)
class MalformedResponse:
    """Bytes that are not valid under the operation's grammar at all."""

    status: int
    diagnostic: str


DecodeOutcome = Union[Success, UnexpectedVariant, NeedMoreData, MalformedResponse]
