"""Pending cookie changes: ``Create`` or ``Remove``.

A change is keyed by cookie name, so a jar holds at most one pending
change per name.
"""

from dataclasses import dataclass

from crumb.cookie import Cookie

REMOVAL_VALUE = "removed"


@dataclass(frozen=True, slots=True)
class Create:
    """Set *cookie* on the client."""

    cookie: Cookie

    @property
    def name(self) -> str:
        return self.cookie.name

    def as_header_value(self) -> str:
        return self.cookie.to_header_value()


@dataclass(frozen=True, slots=True)
class Remove:
    """Expire the cookie called *name* on the client.

    The header uses a fixed placeholder value and ``Max-Age=0``,
    independent of the attributes the cookie was set with.
    """

    name: str

    def as_header_value(self, removal_value: str = REMOVAL_VALUE) -> str:
        return f"{self.name}={removal_value}; Max-Age=0"


type CookieChange = Create | Remove
