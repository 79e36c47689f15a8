#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Serialize conversion options into a wkhtmltopdf page flag string.

Flags are appended in a fixed order:

1. ``custom_page_flags`` (seed)
2. ``--user-style-sheet "<url>"``
3. ``--print-media-type``
4. ``--no-background``
5. ``--username <name>``
6. ``--password <password>``
7. ``--header-spacing <n>`` (only with a header)
8. ``--footer-spacing <n>`` (only with a footer)
9. ``--header-line``
10. ``--footer-line``
11. ``--post <key> <value>`` per entry
12. ``--cookie <key> <value>`` per entry
13. ``--cookie <name> <value>`` for the forms-authentication cookie taken from
    the current request, unless already listed in ``cookies``
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping

from wkpdf.constants import (
    FLAG_COOKIE,
    FLAG_FOOTER_LINE,
    FLAG_FOOTER_SPACING,
    FLAG_HEADER_LINE,
    FLAG_HEADER_SPACING,
    FLAG_NO_BACKGROUND,
    FLAG_PASSWORD,
    FLAG_POST,
    FLAG_PRINT_MEDIA_TYPE,
    FLAG_USER_STYLE_SHEET,
    FLAG_USERNAME,
)
from wkpdf.cookies import CookieLookup
from wkpdf.options.pdf import PdfConvertOptions
from wkpdf.utils.text import format_invariant, null_if_empty

logger = logging.getLogger(__name__)


def create_repeatable_flags(flag_name: str, values: Mapping[str, str | None]) -> Iterator[str]:
    """Yield one ``" <flag> <key> <value>"`` fragment per mapping entry.

    Entries are produced in the mapping's iteration order. A ``None`` value is
    rendered as an empty string.
    """
    for key, value in values.items():
        yield f" {flag_name} {key} {value if value is not None else ''}"


def _forms_auth_cookie_flag(options: PdfConvertOptions, cookie_lookup: CookieLookup | None) -> str | None:
    cookie_name = options.forms_authentication_cookie_name
    if null_if_empty(cookie_name) is None or cookie_lookup is None:
        return None
    if options.cookies and cookie_name in options.cookies:
        return None

    value = cookie_lookup.get_cookie(cookie_name)
    if value is None:
        logger.debug(f"Forms authentication cookie '{cookie_name}' not present in request, skipping")
        return None

    return f" {FLAG_COOKIE} {cookie_name} {value}"


def create_custom_page_flags(
    options: PdfConvertOptions,
    cookie_lookup: CookieLookup | None = None,
) -> str | None:
    """Build the page flag string for ``options``.

    Parameters
    ----------
    options : PdfConvertOptions
        Source options
    cookie_lookup : CookieLookup, optional
        Cookies of the current request, used to forward the forms
        authentication cookie. ``None`` when no request is available.

    Returns
    -------
    str or None
        The stripped flag string, or ``None`` when no flag applies

    """
    parts = [options.custom_page_flags or ""]

    if null_if_empty(options.user_stylesheet_url):
        parts.append(f' {FLAG_USER_STYLE_SHEET} "{options.user_stylesheet_url}"')

    if options.use_print_media_type:
        parts.append(f" {FLAG_PRINT_MEDIA_TYPE}")

    if options.background_disabled:
        parts.append(f" {FLAG_NO_BACKGROUND}")

    if null_if_empty(options.user_name):
        parts.append(f" {FLAG_USERNAME} {options.user_name}")

    if null_if_empty(options.password):
        parts.append(f" {FLAG_PASSWORD} {options.password}")

    if options.header_spacing is not None and options.page_header is not None:
        parts.append(f" {FLAG_HEADER_SPACING} {format_invariant(options.header_spacing)}")

    if options.footer_spacing is not None and options.page_footer is not None:
        parts.append(f" {FLAG_FOOTER_SPACING} {format_invariant(options.footer_spacing)}")

    if options.show_header_line:
        parts.append(f" {FLAG_HEADER_LINE}")

    if options.show_footer_line:
        parts.append(f" {FLAG_FOOTER_LINE}")

    if options.post:
        parts.extend(create_repeatable_flags(FLAG_POST, options.post))

    if options.cookies:
        parts.extend(create_repeatable_flags(FLAG_COOKIE, options.cookies))

    auth_flag = _forms_auth_cookie_flag(options, cookie_lookup)
    if auth_flag:
        parts.append(auth_flag)

    return null_if_empty("".join(parts).strip())
