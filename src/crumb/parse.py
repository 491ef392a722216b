"""Attribute parser: one ``name=value; Attr=val; ...`` string to a Cookie.

Two modes share one grammar:

- lenient (``parse_cookie``): unknown attribute names are skipped
- strict (``parse_cookie_strict``): unknown attribute names raise
  ``UnknownAttribute``

Attribute names are matched case-insensitively. Values are taken as-is
(trimmed, never unquoted or unescaped). Repeated attributes overwrite
earlier ones.
"""

import logging
import re
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from crumb.cookie import Cookie, SameSite
from crumb.errors import EmptyName, MissingPair, Pair, ParseMaxAgeError, UnknownAttribute

logger = logging.getLogger("crumb.parse")

_SECONDS = re.compile(r"\+?[0-9]+")

# Boolean flags: any attached value is ignored.
_FLAGS: dict[str, str] = {
    "httponly": "http_only",
    "partitioned": "partitioned",
    "secure": "secure",
}


def split_pair(segment: str) -> tuple[str, str]:
    """Split a ``name=value`` segment at the first ``=`` and trim both halves.

    Raises ``MissingPair(Pair.NAME_VALUE)`` when there is no ``=`` and
    ``EmptyName`` when the trimmed name is empty.
    """
    name, sep, value = segment.partition("=")
    if not sep:
        raise MissingPair(Pair.NAME_VALUE)
    name = name.strip()
    if not name:
        raise EmptyName()
    return name, value.strip()


def _parse_seconds(text: str) -> int:
    if not text:
        msg = "cannot parse integer from empty string"
        raise ValueError(msg)
    if _SECONDS.fullmatch(text) is None:
        msg = f"invalid digit found in {text!r}"
        raise ValueError(msg)
    return int(text)


def parse_max_age(value: str) -> timedelta:
    """Parse a ``Max-Age`` value (whole, non-negative seconds)."""
    try:
        return timedelta(seconds=_parse_seconds(value))
    except (ValueError, OverflowError) as exc:
        raise ParseMaxAgeError(value) from exc


def parse_same_site(value: str) -> SameSite:
    """Parse a ``SameSite`` value; see ``SameSite.parse``."""
    return SameSite.parse(value)


# Attributes that require a value: field name, missing-pair tag, converter.
_VALUED: dict[str, tuple[str, Pair, Callable[[str], Any]]] = {
    "domain": ("domain", Pair.DOMAIN, str),
    "expires": ("expires", Pair.EXPIRES, str),
    "max-age": ("max_age", Pair.MAX_AGE, parse_max_age),
    "path": ("path", Pair.PATH, str),
    "samesite": ("same_site", Pair.SAME_SITE, parse_same_site),
}


def _parse(text: str, *, strict: bool) -> Cookie:
    head, *segments = text.split(";")
    name, value = split_pair(head)

    attributes: dict[str, Any] = {}
    for segment in segments:
        attr, sep, raw = segment.partition("=")
        attr = attr.strip()
        if not attr and not strict:
            # Empty segment, e.g. a trailing ";"
            continue

        key = attr.lower()
        flag = _FLAGS.get(key)
        if flag is not None:
            attributes[flag] = True
            continue

        valued = _VALUED.get(key)
        if valued is None:
            if strict:
                raise UnknownAttribute(attr)
            logger.debug("Skipping unknown cookie attribute %r on %r", attr, name)
            continue

        field, pair, convert = valued
        if not sep:
            raise MissingPair(pair)
        attributes[field] = convert(raw.strip())

    return Cookie(name, value, **attributes)


def parse_cookie(text: str) -> Cookie:
    """Parse a ``Set-Cookie`` string, skipping unknown attributes.

    Example::

        cookie = parse_cookie("session=abc123; Path=/; Secure")
        cookie.path    # "/"
        cookie.secure  # True
    """
    return _parse(text, strict=False)


def parse_cookie_strict(text: str) -> Cookie:
    """Parse a ``Set-Cookie`` string; unknown attributes raise ``UnknownAttribute``."""
    return _parse(text, strict=True)
