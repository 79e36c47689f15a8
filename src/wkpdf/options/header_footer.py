#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Header and footer content specifications.

A :class:`PdfHeaderFooter` is a tagged variant: its ``kind`` selects how the
converter hands the content to the renderer, and :meth:`PdfHeaderFooter.resolve`
yields the concrete text for a given role (``"header"`` or ``"footer"``).

Kinds
-----
- ``args``: pre-formatted renderer arguments, optionally generated from
  left/center/right text and font settings
- ``url``: reference to an external HTML resource
- ``html``: inline markup
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from wkpdf.constants import HEADER_FOOTER_KINDS, HEADER_FOOTER_ROLES, HeaderFooterKind, HeaderFooterRole
from wkpdf.options.base import CloneFrozenMixin
from wkpdf.utils.text import format_invariant


@dataclass(frozen=True)
class PdfHeaderFooter(CloneFrozenMixin):
    """Header or footer content for a PDF page.

    Parameters
    ----------
    kind : {"args", "url", "html"}
        How the content is interpreted.
    content : str, default ""
        Raw renderer arguments (args), the resource URL (url) or the markup (html).
    left, center, right : str or None, default None
        Text placed in the respective slot. Only used by ``args`` headers/footers,
        where wkhtmltopdf substitutes placeholders such as ``[page]``.
    font_name : str or None, default None
        Font used for the text slots (``args`` only).
    font_size : float or None, default None
        Font size used for the text slots (``args`` only).

    Examples
    --------
    >>> PdfHeaderFooter.simple(left="Invoice", right="[page]/[topage]").resolve("footer")
    '--footer-left "Invoice" --footer-right "[page]/[topage]"'

    """

    kind: HeaderFooterKind
    content: str = ""
    left: str | None = field(default=None, metadata={"help": "Left-aligned text (args only)"})
    center: str | None = field(default=None, metadata={"help": "Centered text (args only)"})
    right: str | None = field(default=None, metadata={"help": "Right-aligned text (args only)"})
    font_name: str | None = field(default=None, metadata={"help": "Font name (args only)"})
    font_size: float | None = field(default=None, metadata={"help": "Font size (args only)", "type": float})

    def __post_init__(self) -> None:
        """Validate the kind tag.

        Raises
        ------
        ValueError
            If ``kind`` is not one of the supported kinds.

        """
        if self.kind not in HEADER_FOOTER_KINDS:
            raise ValueError(f"kind must be one of {', '.join(HEADER_FOOTER_KINDS)}, got {self.kind!r}")
        if self.font_size is not None and self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")

    @classmethod
    def from_args(cls, args: str) -> PdfHeaderFooter:
        """Create a header/footer from pre-formatted renderer arguments."""
        return cls(kind="args", content=args)

    @classmethod
    def from_url(cls, url: str) -> PdfHeaderFooter:
        """Create a header/footer that the renderer loads from ``url``."""
        return cls(kind="url", content=url)

    @classmethod
    def from_html(cls, html: str) -> PdfHeaderFooter:
        """Create a header/footer from inline markup."""
        return cls(kind="html", content=html)

    @classmethod
    def simple(
        cls,
        left: str | None = None,
        center: str | None = None,
        right: str | None = None,
        font_name: str | None = None,
        font_size: float | None = None,
    ) -> PdfHeaderFooter:
        """Create a plain-text header/footer rendered by wkhtmltopdf itself."""
        return cls(kind="args", left=left, center=center, right=right, font_name=font_name, font_size=font_size)

    def resolve(self, role: HeaderFooterRole) -> str:
        """Return the concrete content for ``role``.

        Parameters
        ----------
        role : {"header", "footer"}
            Which page section the content is resolved for.

        Returns
        -------
        str
            Renderer arguments, URL or markup depending on ``kind``. May be empty.

        Raises
        ------
        ValueError
            If ``role`` is not ``"header"`` or ``"footer"``.

        """
        if role not in HEADER_FOOTER_ROLES:
            raise ValueError(f"role must be 'header' or 'footer', got {role!r}")
        return _RESOLVERS[self.kind](self, role)


def _resolve_args(spec: PdfHeaderFooter, role: str) -> str:
    parts = [spec.content.strip()] if spec.content and spec.content.strip() else []

    for slot in ("left", "center", "right"):
        text = getattr(spec, slot)
        if text:
            parts.append(f'--{role}-{slot} "{text}"')

    if spec.font_name:
        parts.append(f'--{role}-font-name "{spec.font_name}"')
    if spec.font_size is not None:
        parts.append(f"--{role}-font-size {format_invariant(spec.font_size)}")

    return " ".join(parts)


def _resolve_url(spec: PdfHeaderFooter, role: str) -> str:
    return spec.content.strip()


def _resolve_html(spec: PdfHeaderFooter, role: str) -> str:
    return spec.content


_RESOLVERS: dict[str, Callable[[PdfHeaderFooter, str], str]] = {
    "args": _resolve_args,
    "url": _resolve_url,
    "html": _resolve_html,
}
