#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for wkpdf conversions.

Options are frozen dataclasses: a conversion never mutates the options it
receives, and modified copies are created with ``create_updated``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from wkpdf.options.base import CloneFrozenMixin
from wkpdf.options.header_footer import PdfHeaderFooter
from wkpdf.options.pdf import PdfConvertOptions, PdfPageMargins


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = PdfConvertOptions(grayscale=True)
    >>> updated = create_updated_options(original, zoom=1.5)
    >>> # original remains unchanged, updated has new values

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "PdfConvertOptions",
    "PdfHeaderFooter",
    "PdfPageMargins",
    "create_updated_options",
]
