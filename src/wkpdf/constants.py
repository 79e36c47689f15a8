#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for wkpdf.

Constants are organized by category:
1. Type Definitions - Literal types for roles, kinds and page geometry
2. Defaults - Default option values
3. Header/Footer Margin Correction - Margins injected around headers/footers
4. Renderer Flags - Command-line flag names understood by wkhtmltopdf
5. Configuration Files - Names searched by the config loader
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeaderFooterRole = Literal["header", "footer"]
HeaderFooterKind = Literal["args", "url", "html"]
PageOrientation = Literal["portrait", "landscape"]

# Paper sizes accepted by wkhtmltopdf's --page-size flag
PageSize = Literal[
    "A0",
    "A1",
    "A2",
    "A3",
    "A4",
    "A5",
    "A6",
    "A7",
    "A8",
    "A9",
    "B0",
    "B1",
    "B2",
    "B3",
    "B4",
    "B5",
    "B6",
    "B7",
    "B8",
    "B9",
    "B10",
    "C5E",
    "Comm10E",
    "DLE",
    "Executive",
    "Folio",
    "Ledger",
    "Legal",
    "Letter",
    "Tabloid",
]

HEADER_FOOTER_KINDS: tuple[str, ...] = ("args", "url", "html")
HEADER_FOOTER_ROLES: tuple[str, ...] = ("header", "footer")

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PAGE_SIZE: PageSize = "A4"
DEFAULT_ORIENTATION: PageOrientation = "portrait"
DEFAULT_ZOOM = 1.0

# =============================================================================
# Header/Footer Margin Correction (millimetres)
# =============================================================================

# Margin next to a plain-text (args) header or footer
SIMPLE_HEADER_FOOTER_MARGIN = 15.0
# Margin next to an HTML or URL header/footer when the opposite side is plain-text
HTML_HEADER_FOOTER_MARGIN = 35.0

# Case-insensitive marker that distinguishes a full HTML document from a fragment
HTML_DOCTYPE_MARKER = "<!DOCTYPE"

# =============================================================================
# Renderer Flags
# =============================================================================

FLAG_USER_STYLE_SHEET = "--user-style-sheet"
FLAG_PRINT_MEDIA_TYPE = "--print-media-type"
FLAG_NO_BACKGROUND = "--no-background"
FLAG_USERNAME = "--username"
FLAG_PASSWORD = "--password"
FLAG_HEADER_SPACING = "--header-spacing"
FLAG_FOOTER_SPACING = "--footer-spacing"
FLAG_HEADER_LINE = "--header-line"
FLAG_FOOTER_LINE = "--footer-line"
FLAG_POST = "--post"
FLAG_COOKIE = "--cookie"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (".wkpdf.toml", ".wkpdf.yaml", ".wkpdf.yml", ".wkpdf.json")
PYPROJECT_TOOL_SECTION = "wkpdf"
