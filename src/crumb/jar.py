"""Cookie jar: a committed cookie set plus pending changes.

The committed set is what the client sent (usually parsed from a
``Cookie`` request header). Pending changes are the outbound diff,
rendered as ``Set-Cookie`` values by ``as_header_values()``::

    jar = CookieJar.parse(request.headers.get("cookie", ""))
    jar.get("session")         # committed cookie, if any
    jar.add(Cookie("theme", "dark"))
    jar.remove("session")
    jar.as_header_values()     # ["session=removed; Max-Age=0", "theme=dark"]

Both collections are keyed by cookie name, so each holds at most one
entry per name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from types import MappingProxyType

from crumb.changes import CookieChange, Create, Remove
from crumb.config import JarConfig
from crumb.cookie import Cookie
from crumb.parse import parse_cookie, parse_cookie_strict, split_pair

logger = logging.getLogger("crumb.jar")


def parse_jar(text: str) -> tuple[Cookie, ...]:
    """Parse a ``Cookie`` request header into cookies, in header order.

    Only the first ``=`` of each pair is significant; attributes are not
    recognized here. Empty segments are skipped, so ``""``, ``" "`` and
    ``";"`` all yield no cookies. A malformed pair aborts the whole parse.
    """
    cookies: list[Cookie] = []
    for segment in text.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        name, value = split_pair(segment)
        cookies.append(Cookie(name, value))
    return tuple(cookies)


class CookieJar:
    """A committed cookie set with pending create/remove changes.

    ``committed`` is a snapshot and never changes after construction;
    ``remove()`` only masks a committed cookie. Pending changes replace
    each other by name (last call wins) and stay until ``clear_changes()``.

    Not safe for concurrent mutation; share a jar across threads only
    with external locking.
    """

    __slots__ = ("_changes", "_committed", "config")

    def __init__(
        self,
        cookies: Iterable[Cookie] = (),
        *,
        config: JarConfig | None = None,
    ) -> None:
        self.config = config or JarConfig()
        committed: dict[str, Cookie] = {}
        for cookie in cookies:
            if cookie.name in committed:
                logger.debug("Ignoring repeated cookie %r; keeping the first", cookie.name)
                continue
            committed[cookie.name] = cookie
        self._committed = committed
        self._changes: dict[str, CookieChange] = {}

    @classmethod
    def parse(cls, text: str, *, config: JarConfig | None = None) -> CookieJar:
        """Build a jar from a ``Cookie`` request header."""
        return cls(parse_jar(text), config=config)

    @classmethod
    def parse_strict(cls, text: str, *, config: JarConfig | None = None) -> CookieJar:
        """Like ``parse``, with ``strict`` switched on in the jar's config.

        The request-header grammar has no attributes, so the committed
        set is identical to ``parse``; strictness applies to later
        ``add_set_cookie()`` calls.
        """
        return cls(parse_jar(text), config=replace(config or JarConfig(), strict=True))

    # -- Lookup --

    def get(self, name: str) -> Cookie | None:
        """The effective cookie called *name*, or None.

        A pending create wins, a pending removal hides the committed
        cookie, otherwise the committed cookie is returned.
        """
        match self._changes.get(name):
            case Create(cookie=cookie):
                return cookie
            case Remove():
                return None
            case _:
                return self._committed.get(name)

    def cookie(self) -> tuple[Cookie, ...]:
        """The effective cookie set, sorted by name.

        Committed cookies without a pending removal, overlaid with every
        pending create.
        """
        effective = {
            name: cookie
            for name, cookie in self._committed.items()
            if not isinstance(self._changes.get(name), Remove)
        }
        for change in self._changes.values():
            if isinstance(change, Create):
                effective[change.name] = change.cookie
        return tuple(sorted(effective.values()))

    @property
    def committed(self) -> Mapping[str, Cookie]:
        """Read-only view of the committed cookies, keyed by name."""
        return MappingProxyType(self._committed)

    @property
    def changes(self) -> tuple[CookieChange, ...]:
        """Pending changes in ascending name order."""
        return tuple(self._changes[name] for name in sorted(self._changes))

    # -- Mutation --

    def add(self, cookie: Cookie) -> None:
        """Queue *cookie* to be set, replacing any pending change for its name."""
        self._changes[cookie.name] = Create(cookie)

    def add_set_cookie(self, text: str) -> Cookie:
        """Parse a ``Set-Cookie`` string with the configured mode and ``add()`` it."""
        cookie = parse_cookie_strict(text) if self.config.strict else parse_cookie(text)
        self.add(cookie)
        return cookie

    def remove(self, name: str) -> None:
        """Queue removal of *name*, replacing any pending change for it."""
        self._changes[name] = Remove(name)

    def clear_changes(self) -> None:
        """Drop every pending change. The committed set is untouched."""
        self._changes.clear()

    # -- Output --

    def as_header_values(self) -> list[str]:
        """One ``Set-Cookie`` value per pending change, in ascending name order."""
        values: list[str] = []
        for change in self.changes:
            match change:
                case Create():
                    values.append(change.as_header_value())
                case Remove():
                    values.append(change.as_header_value(self.config.removal_value))
        return values

    # -- Container protocol over the effective view --

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self.cookie())

    def __len__(self) -> int:
        return len(self.cookie())

    def __repr__(self) -> str:
        return f"CookieJar(committed={len(self._committed)}, changes={len(self._changes)})"
