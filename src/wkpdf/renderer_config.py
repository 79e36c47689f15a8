#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration record.

A :class:`RendererConfig` is the bundle of scalar settings and composed flag
strings handed to a rendering engine. One is built per conversion call and
discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wkpdf.constants import DEFAULT_ORIENTATION, DEFAULT_PAGE_SIZE, DEFAULT_ZOOM
from wkpdf.options.pdf import PdfPageMargins
from wkpdf.utils.text import mask_secret_flags


@dataclass
class RendererConfig:
    """Settings consumed by a wkhtmltopdf rendering engine.

    Attributes
    ----------
    grayscale, low_quality : bool
        Output quality switches.
    orientation : str
        ``"portrait"`` or ``"landscape"``.
    page_size : str
        Paper size name.
    page_width, page_height : float or None
        Explicit page dimensions in millimetres.
    zoom : float
        Zoom factor.
    margins : PdfPageMargins or None
        Final margins after header/footer correction; ``None`` keeps the
        renderer defaults.
    custom_args : str or None
        Global renderer arguments.
    custom_page_args : str or None
        Composed page flag string.
    page_header_html, page_footer_html : str or None
        Partial HTML embedded by the engine as header/footer.

    """

    grayscale: bool = False
    low_quality: bool = False
    orientation: str = DEFAULT_ORIENTATION
    page_size: str = DEFAULT_PAGE_SIZE
    page_width: float | None = None
    page_height: float | None = None
    zoom: float = DEFAULT_ZOOM
    margins: PdfPageMargins | None = None
    custom_args: str | None = None
    custom_page_args: str | None = None
    page_header_html: str | None = None
    page_footer_html: str | None = None

    def set_section_html(self, role: str, html: str) -> None:
        """Assign partial HTML to the header or footer slot."""
        if role == "header":
            self.page_header_html = html
        elif role == "footer":
            self.page_footer_html = html
        else:
            raise ValueError(f"role must be 'header' or 'footer', got {role!r}")

    def append_page_args(self, args: str) -> None:
        """Append arguments to the composed page flag string, space separated."""
        if not args:
            return
        self.custom_page_args = f"{self.custom_page_args} {args}" if self.custom_page_args else args

    def to_log_dict(self) -> dict[str, Any]:
        """Return a dict view suitable for debug logging, with secrets masked."""
        return {
            "grayscale": self.grayscale,
            "low_quality": self.low_quality,
            "orientation": self.orientation,
            "page_size": self.page_size,
            "page_width": self.page_width,
            "page_height": self.page_height,
            "zoom": self.zoom,
            "margins": self.margins,
            "custom_args": mask_secret_flags(self.custom_args),
            "custom_page_args": mask_secret_flags(self.custom_page_args),
            "has_header_html": self.page_header_html is not None,
            "has_footer_html": self.page_footer_html is not None,
        }
