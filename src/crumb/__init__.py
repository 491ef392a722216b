"""Crumb: HTTP cookie parsing, serialization and change tracking.

Read the ``Cookie`` request header, decide which cookies to set or
revoke, and emit the ``Set-Cookie`` values::

    from crumb import Cookie, CookieJar

    jar = CookieJar.parse("session=abc123; theme=light")
    jar.add(Cookie.builder("theme", "dark").path("/").build())
    jar.remove("session")
    jar.as_header_values()
    # ["session=removed; Max-Age=0", "theme=dark; Path=/"]

Single ``Set-Cookie`` strings::

    cookie = Cookie.parse("id=7; Max-Age=3600; Secure; SameSite=Lax")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Cookie",
    "CookieBuilder",
    "CookieChange",
    "CookieJar",
    "Create",
    "CrumbError",
    "EmptyName",
    "JarConfig",
    "MissingPair",
    "Pair",
    "ParseError",
    "ParseMaxAgeError",
    "ParseSameSiteError",
    "Remove",
    "SameSite",
    "UnknownAttribute",
    "parse_cookie",
    "parse_cookie_strict",
    "parse_jar",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Cookie": "crumb.cookie",
    "SameSite": "crumb.cookie",
    "CookieBuilder": "crumb.builder",
    "CookieChange": "crumb.changes",
    "Create": "crumb.changes",
    "Remove": "crumb.changes",
    "CookieJar": "crumb.jar",
    "parse_jar": "crumb.jar",
    "JarConfig": "crumb.config",
    "parse_cookie": "crumb.parse",
    "parse_cookie_strict": "crumb.parse",
    "CrumbError": "crumb.errors",
    "EmptyName": "crumb.errors",
    "MissingPair": "crumb.errors",
    "Pair": "crumb.errors",
    "ParseError": "crumb.errors",
    "ParseMaxAgeError": "crumb.errors",
    "ParseSameSiteError": "crumb.errors",
    "UnknownAttribute": "crumb.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
