#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML-to-PDF conversion through wkhtmltopdf.

:class:`WkHtmlToPdfConverter` turns a :class:`~wkpdf.options.pdf.PdfConvertOptions`
into a :class:`~wkpdf.renderer_config.RendererConfig` and hands it, together
with the HTML, to a rendering engine.

Examples
--------
    >>> converter = WkHtmlToPdfConverter(MyEngine, cookie_lookup=MappingCookieLookup(request.cookies))
    >>> options = PdfConvertOptions(
    ...     page_header=PdfHeaderFooter.simple(left="Order 1001"),
    ...     page_footer=PdfHeaderFooter.simple(right="[page]/[topage]"),
    ... )
    >>> pdf_bytes = converter.convert_html("<h1>Invoice</h1>", options)  # doctest: +SKIP

"""

from __future__ import annotations

import logging
import os
from typing import Any

from wkpdf.cookies import CookieLookup
from wkpdf.engine import EngineFactory
from wkpdf.exceptions import InvalidOptionsError, ValidationError
from wkpdf.flags import create_custom_page_flags
from wkpdf.geometry import map_geometry
from wkpdf.header_footer import apply_header_footer, resolve_margins
from wkpdf.options.pdf import PdfConvertOptions
from wkpdf.renderer_config import RendererConfig
from wkpdf.utils.text import null_if_empty
from wkpdf.utils.timing import debug_timer

logger = logging.getLogger(__name__)

CONVERSION_ERROR_MESSAGE = "Html to Pdf conversion error"


def _require_text(value: Any, parameter_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Argument '{parameter_name}' must be a non-empty string",
            parameter_name=parameter_name,
            parameter_value=value,
        )


def _require_options(options: Any) -> None:
    if options is None:
        raise ValidationError("Argument 'options' is required", parameter_name="options")
    if not isinstance(options, PdfConvertOptions):
        raise InvalidOptionsError(PdfConvertOptions, type(options))


class WkHtmlToPdfConverter:
    """Converts HTML to PDF by configuring a wkhtmltopdf rendering engine.

    Parameters
    ----------
    engine_factory : callable
        Called with the :class:`RendererConfig` of each conversion; returns
        the :class:`~wkpdf.engine.RenderEngine` that renders it.
    cookie_lookup : CookieLookup, optional
        Cookies of the current request. Required to forward the forms
        authentication cookie; without it the cookie is silently skipped.
    logger : logging.Logger, optional
        Logger receiving conversion errors. Defaults to this module's logger.

    """

    def __init__(
        self,
        engine_factory: EngineFactory,
        cookie_lookup: CookieLookup | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the converter with its collaborators."""
        self.engine_factory = engine_factory
        self.cookie_lookup = cookie_lookup
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def convert_html(self, html: str, options: PdfConvertOptions) -> bytes:
        """Convert an HTML string to PDF.

        Parameters
        ----------
        html : str
            Markup to render
        options : PdfConvertOptions
            Conversion options

        Returns
        -------
        bytes
            The rendered PDF

        Raises
        ------
        ValidationError
            If ``html`` is empty or ``options`` is missing.
        Exception
            Whatever the engine raised, logged and re-raised unchanged.

        """
        _require_text(html, "html")
        _require_options(options)

        try:
            engine = self.engine_factory(self.create_renderer_config(options))
            with debug_timer(self.logger, "Rendering (html)"):
                return engine.generate_pdf(html)
        except Exception as e:
            self.logger.error(CONVERSION_ERROR_MESSAGE, exc_info=e)
            raise

    def convert_file(
        self,
        html_file_path: str | os.PathLike,
        options: PdfConvertOptions,
        cover_html: str | None = None,
    ) -> bytes:
        """Convert an HTML file to PDF.

        Parameters
        ----------
        html_file_path : str or os.PathLike
            Path or URL of the HTML document to render
        options : PdfConvertOptions
            Conversion options
        cover_html : str, optional
            Markup for a cover page placed before the document

        Returns
        -------
        bytes
            The rendered PDF

        Raises
        ------
        ValidationError
            If ``html_file_path`` is empty or ``options`` is missing.
        Exception
            Whatever the engine raised, logged and re-raised unchanged.

        """
        if isinstance(html_file_path, os.PathLike):
            html_file_path = os.fspath(html_file_path)
        _require_text(html_file_path, "html_file_path")
        _require_options(options)

        try:
            engine = self.engine_factory(self.create_renderer_config(options))
            with debug_timer(self.logger, "Rendering (file)"):
                return engine.generate_pdf_from_file(html_file_path, cover_html)
        except Exception as e:
            self.logger.error(CONVERSION_ERROR_MESSAGE, exc_info=e)
            raise

    def create_renderer_config(self, options: PdfConvertOptions) -> RendererConfig:
        """Derive the renderer configuration for ``options``.

        The page flag string is built first, then the header and footer are
        applied (appending to it), and finally the margin correction is
        computed and the margins copied.
        """
        config = map_geometry(options, RendererConfig())

        config.custom_args = null_if_empty(options.custom_flags)
        config.custom_page_args = create_custom_page_flags(options, self.cookie_lookup)

        apply_header_footer("header", options.page_header, config)
        apply_header_footer("footer", options.page_footer, config)

        config.margins = resolve_margins(options)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Renderer configuration: {config.to_log_dict()}")

        return config


def convert_html(
    html: str,
    options: PdfConvertOptions,
    engine_factory: EngineFactory,
    cookie_lookup: CookieLookup | None = None,
) -> bytes:
    """Convert an HTML string to PDF with a one-off converter."""
    return WkHtmlToPdfConverter(engine_factory, cookie_lookup).convert_html(html, options)


def convert_file(
    html_file_path: str | os.PathLike,
    options: PdfConvertOptions,
    engine_factory: EngineFactory,
    cover_html: str | None = None,
    cookie_lookup: CookieLookup | None = None,
) -> bytes:
    """Convert an HTML file to PDF with a one-off converter."""
    return WkHtmlToPdfConverter(engine_factory, cookie_lookup).convert_file(html_file_path, options, cover_html)
