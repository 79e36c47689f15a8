"""Unit tests for text and timing helpers."""

import logging

import pytest

from wkpdf.renderer_config import RendererConfig
from wkpdf.utils.text import format_invariant, mask_secret_flags, null_if_empty
from wkpdf.utils.timing import debug_timer


@pytest.mark.unit
class TestFormatInvariant:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (15, "15"),
            (15.0, "15"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (-3.25, "-3.25"),
            (1234567.5, "1234567.5"),
        ],
    )
    def test_formats(self, value, expected):
        assert format_invariant(value) == expected

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            format_invariant(True)


@pytest.mark.unit
class TestNullIfEmpty:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n"])
    def test_blank(self, value):
        assert null_if_empty(value) is None

    def test_keeps_text_unchanged(self):
        assert null_if_empty(" --x ") == " --x "


@pytest.mark.unit
class TestMaskSecretFlags:
    def test_masks_password(self):
        assert mask_secret_flags("--username bob --password s3cret --no-background") == (
            "--username bob --password *** --no-background"
        )

    def test_none(self):
        assert mask_secret_flags(None) is None


@pytest.mark.unit
class TestRendererConfig:
    def test_append_page_args(self):
        config = RendererConfig()
        config.append_page_args("")
        assert config.custom_page_args is None
        config.append_page_args("--a")
        config.append_page_args("--b")
        assert config.custom_page_args == "--a --b"

    def test_set_section_html_rejects_unknown_role(self):
        with pytest.raises(ValueError):
            RendererConfig().set_section_html("body", "<p>x</p>")


@pytest.mark.unit
class TestDebugTimer:
    def test_logs_when_debug_enabled(self, caplog):
        logger = logging.getLogger("wkpdf.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="wkpdf.tests.timer"):
            with debug_timer(logger, "Rendering (html)"):
                pass
        assert "Rendering (html) completed in" in caplog.text

    def test_silent_otherwise(self, caplog):
        logger = logging.getLogger("wkpdf.tests.timer.quiet")
        with caplog.at_level(logging.INFO, logger="wkpdf.tests.timer.quiet"):
            with debug_timer(logger, "Rendering (html)"):
                pass
        assert caplog.text == ""

