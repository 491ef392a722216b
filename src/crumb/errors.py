"""Crumb exception hierarchy.

Every parse failure is a ``ParseError`` (and therefore a ``ValueError``).
Errors are frozen dataclasses, so two failures for the same reason
compare equal, and ``str(error)`` gives the human-readable rendering.
"""

from dataclasses import dataclass
from enum import Enum


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ParseError(CrumbError, ValueError):
    """Raised when cookie text cannot be parsed.

    The parse is aborted entirely; there is no partial result.
    """


class Pair(Enum):
    """Which ``key=value`` pair was missing its ``=value`` half."""

    NAME_VALUE = "Name-Value"
    DOMAIN = "Domain"
    EXPIRES = "Expires"
    MAX_AGE = "Max-Age"
    PATH = "Path"
    SAME_SITE = "SameSite"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class EmptyName(ParseError):
    """The name of the leading ``name=value`` pair is empty after trimming."""

    def __str__(self) -> str:
        return "the provided name is empty."


@dataclass(frozen=True, slots=True)
class MissingPair(ParseError):
    """A required ``key=value`` pair had no ``=``."""

    pair: Pair

    def __str__(self) -> str:
        return f"missed pair: {self.pair}"


@dataclass(frozen=True, slots=True)
class UnknownAttribute(ParseError):
    """Strict mode only: an attribute outside the known vocabulary."""

    name: str

    def __str__(self) -> str:
        return f"unknown attribute: {self.name}"


@dataclass(frozen=True, slots=True)
class ParseMaxAgeError(ParseError):
    """The ``Max-Age`` value is not a non-negative integer.

    Raised ``from`` the underlying ``ValueError``, which is also
    available as ``cause``.
    """

    value: str

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        detail = self.__cause__ if self.__cause__ is not None else f"invalid value {self.value!r}"
        return f"failed to parse Max-Age: {detail}"


@dataclass(frozen=True, slots=True)
class ParseSameSiteError(ParseError):
    """The ``SameSite`` value is none of ``Strict``, ``Lax`` or ``None``."""

    value: str

    def __str__(self) -> str:
        return f"failed to parse SameSite: unknown SameSite value: {self.value}"
