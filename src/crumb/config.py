"""Jar configuration.

JarConfig is a frozen dataclass: immutable after creation, with
defaults that match the usual ``Set-Cookie`` conventions.
"""

from dataclasses import dataclass

from crumb.changes import REMOVAL_VALUE


@dataclass(frozen=True, slots=True)
class JarConfig:
    """Configuration for a ``CookieJar``. Immutable after creation.

    Override what you need::

        jar = CookieJar(config=JarConfig(strict=True))
    """

    # Reject unknown attributes when the jar parses a Set-Cookie string
    strict: bool = False

    # Placeholder value written by removal headers ("name=removed; Max-Age=0")
    removal_value: str = REMOVAL_VALUE
