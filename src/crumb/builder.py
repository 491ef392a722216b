"""Chained construction of a Cookie.

Each setter stores its argument and returns the builder::

    cookie = (
        CookieBuilder("session", "abc123")
        .path("/")
        .secure(True)
        .max_age(3600)
        .build()
    )
"""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

from crumb.cookie import Cookie, SameSite


class CookieBuilder:
    """Builds a ``Cookie`` through chained attribute setters."""

    __slots__ = ("_cookie",)

    def __init__(self, name: str, value: str) -> None:
        self._cookie = Cookie(name, value)

    def _set(self, **changes: object) -> CookieBuilder:
        self._cookie = replace(self._cookie, **changes)
        return self

    def domain(self, domain: str) -> CookieBuilder:
        return self._set(domain=domain)

    def expires(self, expires: str) -> CookieBuilder:
        return self._set(expires=expires)

    def http_only(self, http_only: bool) -> CookieBuilder:
        return self._set(http_only=http_only)

    def max_age(self, max_age: timedelta | int) -> CookieBuilder:
        """Set ``Max-Age`` from a timedelta or a number of whole seconds."""
        if isinstance(max_age, int):
            max_age = timedelta(seconds=max_age)
        return self._set(max_age=max_age)

    def partitioned(self, partitioned: bool) -> CookieBuilder:
        return self._set(partitioned=partitioned)

    def path(self, path: str) -> CookieBuilder:
        return self._set(path=path)

    def same_site(self, same_site: SameSite | str) -> CookieBuilder:
        """Set ``SameSite``; text is parsed case-insensitively."""
        if isinstance(same_site, str):
            same_site = SameSite.parse(same_site)
        return self._set(same_site=same_site)

    def secure(self, secure: bool) -> CookieBuilder:
        return self._set(secure=secure)

    def build(self) -> Cookie:
        return self._cookie
