"""ASGI glue: raw header pairs in, raw ``set-cookie`` pairs out.

ASGI carries headers as ``(name, value)`` byte pairs with lowercase
names; values are latin-1. A request may carry several ``cookie``
headers (HTTP/2 splits them), which are joined before parsing.
"""

from collections.abc import Iterable

from crumb.config import JarConfig
from crumb.jar import CookieJar

type RawHeaders = Iterable[tuple[bytes, bytes]]


def jar_from_headers(raw: RawHeaders, *, config: JarConfig | None = None) -> CookieJar:
    """Build a jar from every ``cookie`` header in *raw*.

    Typically called with ``scope["headers"]``.
    """
    values = [
        value.decode("latin-1") for name, value in raw if name.lower() == b"cookie"
    ]
    return CookieJar.parse("; ".join(values), config=config)


def set_cookie_headers(jar: CookieJar) -> list[tuple[bytes, bytes]]:
    """The jar's pending changes as ``set-cookie`` pairs for ``http.response.start``."""
    return [(b"set-cookie", value.encode("latin-1")) for value in jar.as_header_values()]
