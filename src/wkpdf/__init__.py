"""wkpdf - Build wkhtmltopdf configurations from typed conversion options.

wkpdf translates PDF preferences (page geometry, headers and footers,
credentials, cookies, custom flags) into the renderer configuration and the
page flag string understood by wkhtmltopdf, then hands both to a rendering
engine supplied by the application.

Key Features
------------
- Frozen, typed options with ``create_updated`` copies
- Plain-text, URL and inline-HTML headers and footers
- Automatic top/bottom margins around plain-text headers and footers
- Forwarding of the forms-authentication cookie of the current request
- Options loaded from ``.wkpdf.toml``, YAML, JSON or ``pyproject.toml``

Requirements
------------
- Python 3.10+
- A rendering engine wrapping wkhtmltopdf (see :mod:`wkpdf.engine`)

Examples
--------
    >>> from wkpdf import PdfConvertOptions, PdfHeaderFooter, WkHtmlToPdfConverter
    >>> converter = WkHtmlToPdfConverter(MyEngine)
    >>> options = PdfConvertOptions(page_footer=PdfHeaderFooter.simple(right="[page]"))
    >>> converter.create_renderer_config(options).custom_page_args
    '--footer-right "[page]"'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "wkpdf requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from wkpdf.config import load_config_file, load_options, options_from_dict
from wkpdf.converter import WkHtmlToPdfConverter, convert_file, convert_html
from wkpdf.cookies import CookieHeaderLookup, CookieLookup, MappingCookieLookup
from wkpdf.engine import EngineFactory, RenderEngine
from wkpdf.exceptions import (
    ConfigurationError,
    InvalidOptionsError,
    RenderingError,
    ValidationError,
    WkPdfError,
)
from wkpdf.flags import create_custom_page_flags
from wkpdf.header_footer import apply_header_footer, resolve_margins
from wkpdf.options import PdfConvertOptions, PdfHeaderFooter, PdfPageMargins
from wkpdf.renderer_config import RendererConfig

__all__ = [
    "__version__",
    "WkHtmlToPdfConverter",
    "convert_html",
    "convert_file",
    "PdfConvertOptions",
    "PdfHeaderFooter",
    "PdfPageMargins",
    "RendererConfig",
    "RenderEngine",
    "EngineFactory",
    "CookieLookup",
    "MappingCookieLookup",
    "CookieHeaderLookup",
    "create_custom_page_flags",
    "apply_header_footer",
    "resolve_margins",
    "load_config_file",
    "load_options",
    "options_from_dict",
    "WkPdfError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "RenderingError",
]
