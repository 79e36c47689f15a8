#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering engine interface.

wkpdf does not launch the renderer itself. A converter is given an engine
factory that receives the :class:`~wkpdf.renderer_config.RendererConfig` of
a conversion and returns an object implementing :class:`RenderEngine`.
Engines should report failures as :class:`~wkpdf.exceptions.RenderingError`.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from wkpdf.renderer_config import RendererConfig


@runtime_checkable
class RenderEngine(Protocol):
    """An HTML-to-PDF renderer configured for a single conversion."""

    def generate_pdf(self, html: str) -> bytes:
        """Render ``html`` and return the PDF bytes."""
        ...

    def generate_pdf_from_file(self, html_file_path: str, cover_html: str | None = None) -> bytes:
        """Render the HTML file at ``html_file_path``, optionally preceded by a cover page."""
        ...


EngineFactory = Callable[[RendererConfig], RenderEngine]
