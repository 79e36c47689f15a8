#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML-to-PDF conversion.

This module defines the options record handed to
:class:`wkpdf.converter.WkHtmlToPdfConverter` and the page margins it
carries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wkpdf.constants import (
    DEFAULT_ORIENTATION,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ZOOM,
    PageOrientation,
    PageSize,
)
from wkpdf.options.base import CloneFrozenMixin
from wkpdf.options.header_footer import PdfHeaderFooter


@dataclass(frozen=True)
class PdfPageMargins(CloneFrozenMixin):
    """Page margins in millimetres.

    Any side left as ``None`` is unset: the header/footer margin correction may
    fill it, otherwise the renderer's default applies.

    Parameters
    ----------
    top, bottom, left, right : float or None, default None
        Margin for the respective side.

    """

    top: float | None = field(default=None, metadata={"help": "Top margin in mm", "type": float})
    bottom: float | None = field(default=None, metadata={"help": "Bottom margin in mm", "type": float})
    left: float | None = field(default=None, metadata={"help": "Left margin in mm", "type": float})
    right: float | None = field(default=None, metadata={"help": "Right margin in mm", "type": float})

    def __post_init__(self) -> None:
        """Validate that set margins are non-negative.

        Raises
        ------
        ValueError
            If any set margin is negative.

        """
        for side in ("top", "bottom", "left", "right"):
            value = getattr(self, side)
            if value is not None and value < 0:
                raise ValueError(f"margin {side} must be non-negative, got {value}")


@dataclass(frozen=True)
class PdfConvertOptions(CloneFrozenMixin):
    """Configuration options for converting HTML to PDF with wkhtmltopdf.

    Parameters
    ----------
    grayscale : bool, default False
        Render the PDF in grayscale.
    low_quality : bool, default False
        Produce a lower quality, smaller PDF.
    orientation : {"portrait", "landscape"}, default "portrait"
        Page orientation.
    page_size : str, default "A4"
        Paper size name understood by wkhtmltopdf (A4, Letter, Legal, ...).
    page_width, page_height : float or None, default None
        Explicit page dimensions in millimetres, overriding ``page_size``.
    zoom : float, default 1.0
        Zoom factor applied to the page content.
    custom_flags : str or None, default None
        Global renderer arguments passed through unchanged.
    custom_page_flags : str or None, default None
        Page arguments that seed the composed page flag string.
    user_stylesheet_url : str or None, default None
        Stylesheet applied to every page (``--user-style-sheet``).
    use_print_media_type : bool, default False
        Use the print media type instead of screen (``--print-media-type``).
    background_disabled : bool, default False
        Do not print backgrounds (``--no-background``).
    user_name, password : str or None, default None
        HTTP authentication credentials.
    forms_authentication_cookie_name : str or None, default None
        Name of a session cookie forwarded from the current request so the
        renderer can fetch protected resources.
    page_header, page_footer : PdfHeaderFooter or None, default None
        Header and footer content.
    header_spacing, footer_spacing : float or None, default None
        Spacing between header/footer and content in millimetres. Only emitted
        when the matching header/footer is present.
    show_header_line, show_footer_line : bool, default False
        Draw a line below the header / above the footer.
    margins : PdfPageMargins or None, default None
        Page margins; unset sides may be filled by the header/footer correction.
    post : dict[str, str], default {}
        Form fields posted to the page, in insertion order.
    cookies : dict[str, str], default {}
        Cookies sent with every request, in insertion order.

    """

    grayscale: bool = field(default=False, metadata={"help": "Render in grayscale", "importance": "core"})
    low_quality: bool = field(default=False, metadata={"help": "Produce a lower quality PDF", "importance": "advanced"})
    orientation: PageOrientation = field(
        default=DEFAULT_ORIENTATION,
        metadata={"help": "Page orientation", "choices": ["portrait", "landscape"], "importance": "core"},
    )
    page_size: PageSize = field(
        default=DEFAULT_PAGE_SIZE, metadata={"help": "Paper size (A4, Letter, ...)", "importance": "core"}
    )
    page_width: float | None = field(default=None, metadata={"help": "Page width in mm", "type": float})
    page_height: float | None = field(default=None, metadata={"help": "Page height in mm", "type": float})
    zoom: float = field(default=DEFAULT_ZOOM, metadata={"help": "Zoom factor", "type": float})

    custom_flags: str | None = field(
        default=None, metadata={"help": "Global renderer arguments", "importance": "advanced"}
    )
    custom_page_flags: str | None = field(
        default=None, metadata={"help": "Additional page arguments", "importance": "advanced"}
    )
    user_stylesheet_url: str | None = field(default=None, metadata={"help": "User stylesheet URL"})
    use_print_media_type: bool = field(default=False, metadata={"help": "Use print media type"})
    background_disabled: bool = field(default=False, metadata={"help": "Do not print backgrounds"})

    user_name: str | None = field(default=None, metadata={"help": "HTTP authentication user name"})
    password: str | None = field(
        default=None, metadata={"help": "HTTP authentication password", "importance": "security"}
    )
    forms_authentication_cookie_name: str | None = field(
        default=None, metadata={"help": "Session cookie forwarded from the current request", "importance": "security"}
    )

    page_header: PdfHeaderFooter | None = None
    page_footer: PdfHeaderFooter | None = None
    header_spacing: float | None = field(default=None, metadata={"help": "Header spacing in mm", "type": float})
    footer_spacing: float | None = field(default=None, metadata={"help": "Footer spacing in mm", "type": float})
    show_header_line: bool = field(default=False, metadata={"help": "Line below the header"})
    show_footer_line: bool = field(default=False, metadata={"help": "Line above the footer"})

    margins: PdfPageMargins | None = None

    post: dict[str, str | None] = field(default_factory=dict, metadata={"help": "Form fields to post"})
    cookies: dict[str, str | None] = field(default_factory=dict, metadata={"help": "Cookies to send"})

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")

        if self.page_width is not None and self.page_width <= 0:
            raise ValueError(f"page_width must be positive, got {self.page_width}")
        if self.page_height is not None and self.page_height <= 0:
            raise ValueError(f"page_height must be positive, got {self.page_height}")

        if self.orientation not in ("portrait", "landscape"):
            raise ValueError(f"orientation must be 'portrait' or 'landscape', got {self.orientation!r}")
