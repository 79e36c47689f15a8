#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Header/footer resolution and margin correction.

Each header or footer is handed to the renderer according to its kind:

- ``url``: appended as ``--{role}-html "<url>"`` to the page flags
- ``args``: appended verbatim to the page flags
- ``html``: partial markup is assigned to the configuration's header/footer
  HTML slot; full documents (starting with ``<!DOCTYPE``) are not supported
  and are dropped

Plain-text (``args``) headers and footers are drawn inside the page margin, so
margins the caller left unset are filled in depending on which sides are
plain-text. See :func:`resolve_margins`.
"""

from __future__ import annotations

import logging

from wkpdf.constants import HTML_DOCTYPE_MARKER, HTML_HEADER_FOOTER_MARGIN, SIMPLE_HEADER_FOOTER_MARGIN
from wkpdf.options.header_footer import PdfHeaderFooter
from wkpdf.options.pdf import PdfConvertOptions, PdfPageMargins
from wkpdf.renderer_config import RendererConfig
from wkpdf.utils.text import null_if_empty

logger = logging.getLogger(__name__)


def is_partial_html(markup: str) -> bool:
    """Return True when ``markup`` is a fragment rather than a full HTML document."""
    return not markup.strip().upper().startswith(HTML_DOCTYPE_MARKER)


def apply_header_footer(role: str, spec: PdfHeaderFooter | None, config: RendererConfig) -> None:
    """Hand a header or footer to the renderer configuration.

    Parameters
    ----------
    role : {"header", "footer"}
        Which section is being applied
    spec : PdfHeaderFooter or None
        Section content; ``None`` is a no-op
    config : RendererConfig
        Configuration updated in place

    """
    if spec is None:
        return

    resolved = spec.resolve(role)
    if null_if_empty(resolved) is None:
        logger.debug(f"Page {role} resolved to empty content, skipping")
        return

    if spec.kind == "url":
        # Embedded quotes are passed through as-is
        config.append_page_args(f'--{role}-html "{resolved}"')
    elif spec.kind == "args":
        config.append_page_args(resolved)
    elif spec.kind == "html":
        if is_partial_html(resolved):
            config.set_section_html(role, resolved)
        else:
            # TODO: embed full HTML documents through a temporary file passed as --{role}-html
            logger.debug(f"Page {role} is a full HTML document, which is not supported; skipping")


def resolve_margins(options: PdfConvertOptions) -> PdfPageMargins | None:
    """Compute final margins, filling unset top/bottom next to headers and footers.

    Policy, applied only when both a header and a footer are present:

    - both plain-text (``args``): top and bottom default to 15
    - only the header is plain-text: top defaults to 15, bottom to 35
    - only the footer is plain-text: top defaults to 35, bottom to 15
    - neither is plain-text: nothing is injected

    Caller-supplied values are never overwritten, left and right are untouched.

    Parameters
    ----------
    options : PdfConvertOptions
        Source options; not modified

    Returns
    -------
    PdfPageMargins or None
        ``options.margins`` itself when nothing is injected, otherwise a new
        margins instance with the gaps filled

    """
    header = options.page_header
    footer = options.page_footer
    margins = options.margins

    if header is None or footer is None:
        return margins

    header_simple = header.kind == "args"
    footer_simple = footer.kind == "args"

    if header_simple and footer_simple:
        new_top, new_bottom = SIMPLE_HEADER_FOOTER_MARGIN, SIMPLE_HEADER_FOOTER_MARGIN
    elif footer_simple:
        new_top, new_bottom = HTML_HEADER_FOOTER_MARGIN, SIMPLE_HEADER_FOOTER_MARGIN
    elif header_simple:
        new_top, new_bottom = SIMPLE_HEADER_FOOTER_MARGIN, HTML_HEADER_FOOTER_MARGIN
    else:
        return margins

    current = margins if margins is not None else PdfPageMargins()
    updates = {}
    if current.top is None:
        updates["top"] = new_top
    if current.bottom is None:
        updates["bottom"] = new_bottom

    if not updates:
        return margins

    logger.debug(f"Applying header/footer margin correction: {updates}")
    return current.create_updated(**updates)
