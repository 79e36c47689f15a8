"""Test doubles for the wkpdf test suite."""

from wkpdf.renderer_config import RendererConfig


class FakeEngine:
    """Rendering engine double that records calls instead of running wkhtmltopdf."""

    def __init__(self, config: RendererConfig, result: bytes = b"%PDF-1.4 fake", error: Exception | None = None):
        self.config = config
        self.result = result
        self.error = error
        self.calls = []

    def generate_pdf(self, html: str) -> bytes:
        self.calls.append(("html", html))
        if self.error is not None:
            raise self.error
        return self.result

    def generate_pdf_from_file(self, html_file_path: str, cover_html: str | None = None) -> bytes:
        self.calls.append(("file", html_file_path, cover_html))
        if self.error is not None:
            raise self.error
        return self.result
