#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Cookie lookups standing in for the current HTTP request.

The converter forwards a forms-authentication cookie from the request that
triggered the conversion. Rather than reaching into a framework's global
request object, it is given a :class:`CookieLookup`.

Examples
--------
Adapting a raw ``Cookie`` header:

    >>> lookup = CookieHeaderLookup("session=abc; auth=xyz")
    >>> lookup.get_cookie("auth")
    'xyz'

Adapting a framework's cookie mapping (Flask, Starlette, Django):

    >>> lookup = MappingCookieLookup(request.cookies)  # doctest: +SKIP

"""

from __future__ import annotations

from http.cookies import CookieError, SimpleCookie
from typing import Mapping, Protocol, runtime_checkable

from wkpdf.exceptions import ValidationError


@runtime_checkable
class CookieLookup(Protocol):
    """Read access to the cookies of the current request."""

    def get_cookie(self, name: str) -> str | None:
        """Return the value of cookie ``name``, or ``None`` if the request has none."""
        ...


class MappingCookieLookup:
    """Cookie lookup backed by a name-to-value mapping."""

    def __init__(self, cookies: Mapping[str, str]):
        """Initialize with a mapping of cookie names to values."""
        self._cookies = cookies

    def get_cookie(self, name: str) -> str | None:
        """Return the value of cookie ``name``, or ``None`` if absent."""
        if name not in self._cookies:
            return None
        return self._cookies[name]


class CookieHeaderLookup:
    """Cookie lookup parsed from a raw HTTP ``Cookie`` header.

    Parameters
    ----------
    header : str
        Header value such as ``"a=1; b=2"``

    Raises
    ------
    ValidationError
        If the header cannot be parsed.

    """

    def __init__(self, header: str):
        """Parse ``header`` into its cookies."""
        parsed: SimpleCookie = SimpleCookie()
        try:
            parsed.load(header or "")
        except CookieError as e:
            raise ValidationError(
                f"Invalid Cookie header: {e}", parameter_name="header", parameter_value=header, original_error=e
            ) from e
        self._cookies = {name: morsel.value for name, morsel in parsed.items()}

    def get_cookie(self, name: str) -> str | None:
        """Return the value of cookie ``name``, or ``None`` if absent."""
        return self._cookies.get(name)
