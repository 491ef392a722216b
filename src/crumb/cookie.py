"""The Cookie entity and its ``Set-Cookie`` serialization.

A ``Cookie`` is immutable. Equality compares every field (``domain``
and ``path`` ignore case); ordering compares only ``name``, so sorted
or name-keyed containers hold at most one cookie per name.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from crumb.errors import ParseSameSiteError

if TYPE_CHECKING:
    from crumb.builder import CookieBuilder

_ONE_SECOND = timedelta(seconds=1)


class SameSite(Enum):
    """Value of the ``SameSite`` attribute."""

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> SameSite:
        """Match *value* case-insensitively against Strict, Lax and None.

        Raises ``ParseSameSiteError`` for anything else.
        """
        lowered = _ascii_lower(value)
        for member in cls:
            if _ascii_lower(member.value) == lowered:
                return member
        raise ParseSameSiteError(value)


# Case-insensitive comparisons fold ASCII letters only.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _fold(text: str | None) -> str | None:
    return _ascii_lower(text) if text is not None else None


@dataclass(frozen=True, slots=True, eq=False)
class Cookie:
    """A named value plus optional transport and lifetime attributes.

    Flag attributes (``http_only``, ``partitioned``, ``secure``) are
    tri-state: ``None`` (unset), ``False`` or ``True``. Only ``True``
    is ever written to the header.

    ``expires`` is opaque text; it is stored and emitted as given.
    ``max_age`` must not be negative.
    """

    name: str
    value: str
    domain: str | None = None
    expires: str | None = None
    http_only: bool | None = None
    max_age: timedelta | None = None
    partitioned: bool | None = None
    path: str | None = None
    same_site: SameSite | None = None
    secure: bool | None = None

    def __post_init__(self) -> None:
        if self.max_age is not None and self.max_age < timedelta(0):
            msg = f"max_age must not be negative, got {self.max_age!r}"
            raise ValueError(msg)

    # -- Construction --

    @classmethod
    def named(cls, name: str) -> Cookie:
        """A cookie with *name* and an empty value."""
        return cls(name, "")

    @classmethod
    def from_pair(cls, pair: tuple[str, str]) -> Cookie:
        """A cookie from a ``(name, value)`` tuple."""
        name, value = pair
        return cls(name, value)

    @classmethod
    def builder(cls, name: str, value: str) -> CookieBuilder:
        """Start a chained ``CookieBuilder`` for *name* and *value*."""
        from crumb.builder import CookieBuilder

        return CookieBuilder(name, value)

    @classmethod
    def parse(cls, text: str) -> Cookie:
        """Parse a ``Set-Cookie`` string, ignoring unknown attributes."""
        from crumb.parse import parse_cookie

        return parse_cookie(text)

    @classmethod
    def parse_strict(cls, text: str) -> Cookie:
        """Parse a ``Set-Cookie`` string, rejecting unknown attributes."""
        from crumb.parse import parse_cookie_strict

        return parse_cookie_strict(text)

    # -- Equality and ordering --

    def _key(self) -> tuple[object, ...]:
        return (
            self.name,
            self.value,
            _fold(self.domain),
            self.expires,
            self.http_only,
            self.max_age,
            self.partitioned,
            _fold(self.path),
            self.same_site,
            self.secure,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.name < other.name

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.name <= other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.name > other.name

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.name >= other.name

    # -- Serialization --

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string.

        Attributes are emitted in a fixed order, unescaped::

            name=value; Domain=..; Expires=..; HttpOnly; Max-Age=..;
            Partitioned; Path=..; SameSite=..; Secure
        """
        parts = [f"{self.name}={self.value}"]
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.expires is not None:
            parts.append(f"Expires={self.expires}")
        if self.http_only:
            parts.append("HttpOnly")
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age // _ONE_SECOND}")
        if self.partitioned:
            parts.append("Partitioned")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.same_site is not None:
            parts.append(f"SameSite={self.same_site}")
        if self.secure:
            parts.append("Secure")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header_value()
