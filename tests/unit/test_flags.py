"""Unit tests for the page flag serializer."""

import pytest

from wkpdf.cookies import MappingCookieLookup
from wkpdf.flags import create_custom_page_flags, create_repeatable_flags
from wkpdf.options import PdfConvertOptions, PdfHeaderFooter


@pytest.mark.unit
class TestCreateCustomPageFlags:
    """Test the fixed-order flag string."""

    def test_defaults_produce_no_value(self):
        assert create_custom_page_flags(PdfConvertOptions()) is None

    def test_blank_seed_collapses_to_none(self):
        assert create_custom_page_flags(PdfConvertOptions(custom_page_flags="   ")) is None

    def test_seed_is_stripped(self):
        options = PdfConvertOptions(custom_page_flags="  --disable-javascript  ")
        assert create_custom_page_flags(options) == "--disable-javascript"

    def test_all_flags_in_fixed_order(self):
        options = PdfConvertOptions(
            custom_page_flags="--disable-smart-shrinking",
            user_stylesheet_url="http://localhost/print.css",
            use_print_media_type=True,
            background_disabled=True,
            user_name="admin",
            password="secret",
            page_header=PdfHeaderFooter.from_args("--header-left Title"),
            page_footer=PdfHeaderFooter.from_url("http://localhost/footer"),
            header_spacing=2.5,
            footer_spacing=3,
            show_header_line=True,
            show_footer_line=True,
            post={"field": "value"},
            cookies={"lang": "en"},
        )

        assert create_custom_page_flags(options) == (
            "--disable-smart-shrinking"
            ' --user-style-sheet "http://localhost/print.css"'
            " --print-media-type"
            " --no-background"
            " --username admin"
            " --password secret"
            " --header-spacing 2.5"
            " --footer-spacing 3"
            " --header-line"
            " --footer-line"
            " --post field value"
            " --cookie lang en"
        )

    def test_spacing_requires_matching_section(self):
        options = PdfConvertOptions(header_spacing=5.0, footer_spacing=5.0)
        assert create_custom_page_flags(options) is None

    def test_header_spacing_only_with_header(self):
        options = PdfConvertOptions(
            page_header=PdfHeaderFooter.from_html("<p>h</p>"), header_spacing=5.0, footer_spacing=7.0
        )
        assert create_custom_page_flags(options) == "--header-spacing 5"

    def test_lines_do_not_require_sections(self):
        options = PdfConvertOptions(show_header_line=True, show_footer_line=True)
        assert create_custom_page_flags(options) == "--header-line --footer-line"

    def test_empty_credentials_are_omitted(self):
        options = PdfConvertOptions(user_name="", password="")
        assert create_custom_page_flags(options) is None

    def test_whitespace_only_strings_are_omitted(self):
        options = PdfConvertOptions(user_name="  ", password=" ", user_stylesheet_url=" ")
        assert create_custom_page_flags(options) is None

    def test_whitespace_stylesheet_does_not_hide_other_flags(self):
        options = PdfConvertOptions(user_stylesheet_url="\t", user_name="jane")
        assert create_custom_page_flags(options) == "--username jane"

    def test_numbers_use_invariant_format(self):
        options = PdfConvertOptions(page_header=PdfHeaderFooter.from_args("--header-left x"), header_spacing=1234.5)
        assert create_custom_page_flags(options) == "--header-spacing 1234.5"

    def test_post_and_cookies_keep_insertion_order(self):
        options = PdfConvertOptions(
            post={"b": "2", "a": "1"},
            cookies={"z": "26", "y": "25"},
        )
        assert create_custom_page_flags(options) == "--post b 2 --post a 1 --cookie z 26 --cookie y 25"

    def test_missing_repeatable_value_renders_empty(self):
        options = PdfConvertOptions(post={"a": None, "b": "2"})
        assert create_custom_page_flags(options) == "--post a  --post b 2"


@pytest.mark.unit
class TestFormsAuthenticationCookie:
    """Test forwarding of the forms authentication cookie."""

    def test_cookie_appended_after_explicit_cookies(self):
        options = PdfConvertOptions(cookies={"a": "1"}, forms_authentication_cookie_name="auth")
        lookup = MappingCookieLookup({"auth": "xyz"})

        flags = create_custom_page_flags(options, lookup)

        assert flags == "--cookie a 1 --cookie auth xyz"
        assert flags.index("--cookie a 1") < flags.index("--cookie auth xyz")

    def test_skipped_without_lookup(self):
        options = PdfConvertOptions(forms_authentication_cookie_name="auth")
        assert create_custom_page_flags(options, None) is None

    def test_skipped_without_cookie_name(self):
        lookup = MappingCookieLookup({"auth": "xyz"})
        assert create_custom_page_flags(PdfConvertOptions(), lookup) is None

    def test_skipped_with_whitespace_cookie_name(self):
        options = PdfConvertOptions(forms_authentication_cookie_name="  ")
        lookup = MappingCookieLookup({"  ": "xyz"})
        assert create_custom_page_flags(options, lookup) is None

    def test_empty_cookie_value_is_forwarded(self):
        options = PdfConvertOptions(cookies={"a": "1"}, forms_authentication_cookie_name="auth")
        lookup = MappingCookieLookup({"auth": ""})

        flags = create_custom_page_flags(options, lookup)

        # trailing space of the last flag is stripped
        assert flags == "--cookie a 1 --cookie auth"

    def test_skipped_when_request_lacks_cookie(self):
        options = PdfConvertOptions(forms_authentication_cookie_name="auth")
        lookup = MappingCookieLookup({"other": "1"})
        assert create_custom_page_flags(options, lookup) is None

    def test_skipped_when_explicitly_configured(self):
        options = PdfConvertOptions(cookies={"auth": "explicit"}, forms_authentication_cookie_name="auth")
        lookup = MappingCookieLookup({"auth": "from-request"})

        flags = create_custom_page_flags(options, lookup)

        assert flags == "--cookie auth explicit"
        assert flags.count("--cookie") == 1


@pytest.mark.unit
class TestCreateRepeatableFlags:
    """Test repeatable flag fragments."""

    def test_one_fragment_per_entry(self):
        assert list(create_repeatable_flags("--post", {"a": "1", "b": "2"})) == [" --post a 1", " --post b 2"]

    def test_empty_mapping(self):
        assert list(create_repeatable_flags("--cookie", {})) == []
