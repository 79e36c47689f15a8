"""Property-based tests for the margin correction and flag ordering."""

import pytest

hypothesis = pytest.importorskip("hypothesis")

from hypothesis import given  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from wkpdf.flags import create_custom_page_flags  # noqa: E402
from wkpdf.header_footer import resolve_margins  # noqa: E402
from wkpdf.options import PdfConvertOptions, PdfHeaderFooter, PdfPageMargins  # noqa: E402

margin_values = st.one_of(st.none(), st.floats(min_value=0, max_value=500, allow_nan=False))

sections = st.one_of(
    st.none(),
    st.builds(PdfHeaderFooter.from_args, st.just("--header-center x")),
    st.builds(PdfHeaderFooter.from_url, st.just("http://localhost/x")),
    st.builds(PdfHeaderFooter.from_html, st.just("<p>x</p>")),
)

margins_strategy = st.one_of(
    st.none(),
    st.builds(PdfPageMargins, top=margin_values, bottom=margin_values, left=margin_values, right=margin_values),
)


def _is_args(section):
    return section is not None and section.kind == "args"


@pytest.mark.unit
@given(header=sections, footer=sections, margins=margins_strategy)
def test_supplied_margins_are_never_overwritten(header, footer, margins):
    options = PdfConvertOptions(page_header=header, page_footer=footer, margins=margins)
    resolved = resolve_margins(options)

    if margins is None:
        return
    for side in ("top", "bottom", "left", "right"):
        if getattr(margins, side) is not None:
            assert getattr(resolved, side) == getattr(margins, side)
    assert resolved.left == margins.left
    assert resolved.right == margins.right


@pytest.mark.unit
@given(header=sections, footer=sections)
def test_unset_margins_follow_policy(header, footer):
    resolved = resolve_margins(PdfConvertOptions(page_header=header, page_footer=footer))

    if header is None or footer is None or not (_is_args(header) or _is_args(footer)):
        assert resolved is None
    elif _is_args(header) and _is_args(footer):
        assert (resolved.top, resolved.bottom) == (15, 15)
    elif _is_args(header):
        assert (resolved.top, resolved.bottom) == (15, 35)
    else:
        assert (resolved.top, resolved.bottom) == (35, 15)


flag_options = st.fixed_dictionaries(
    {},
    optional={
        "user_stylesheet_url": st.just("http://localhost/s.css"),
        "use_print_media_type": st.booleans(),
        "background_disabled": st.booleans(),
        "user_name": st.just("user"),
        "password": st.just("pw"),
        "page_header": sections,
        "page_footer": sections,
        "header_spacing": st.floats(min_value=0, max_value=50, allow_nan=False),
        "footer_spacing": st.floats(min_value=0, max_value=50, allow_nan=False),
        "show_header_line": st.booleans(),
        "show_footer_line": st.booleans(),
    },
)

ORDERED_FLAGS = [
    "--user-style-sheet",
    "--print-media-type",
    "--no-background",
    "--username",
    "--password",
    "--header-spacing",
    "--footer-spacing",
    "--header-line",
    "--footer-line",
]


@pytest.mark.unit
@given(kwargs=flag_options)
def test_each_flag_appears_once_in_fixed_order(kwargs):
    flags = create_custom_page_flags(PdfConvertOptions(**kwargs)) or ""
    tokens = flags.split()

    present = [flag for flag in ORDERED_FLAGS if flag in tokens]
    for flag in present:
        assert tokens.count(flag) == 1
    assert present == sorted(present, key=tokens.index)
