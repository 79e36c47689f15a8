#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Copy page geometry and quality settings onto a renderer configuration."""

from __future__ import annotations

from wkpdf.options.pdf import PdfConvertOptions
from wkpdf.renderer_config import RendererConfig


def map_geometry(options: PdfConvertOptions, config: RendererConfig) -> RendererConfig:
    """Copy grayscale, quality, orientation, page size/dimensions and zoom.

    Parameters
    ----------
    options : PdfConvertOptions
        Source options
    config : RendererConfig
        Configuration updated in place

    Returns
    -------
    RendererConfig
        The same ``config`` instance, for chaining

    """
    config.grayscale = bool(options.grayscale)
    config.low_quality = bool(options.low_quality)
    config.orientation = options.orientation
    config.page_size = options.page_size
    config.page_width = float(options.page_width) if options.page_width is not None else None
    config.page_height = float(options.page_height) if options.page_height is not None else None
    config.zoom = float(options.zoom)
    return config
