"""
Unit tests for message rendering helpers.
"""
import re
import pytest
from logpool.core.errors import LogFormatError
from logpool.core.render import (interpolate, normalize_prefix, normalize_time_format,
                                 render, render_timestamp, strftime_renderer)


def _const(text):
    return lambda fmt: text


class TestTimestamp:

    def test_no_format_no_stamp(self):
        assert render_timestamp(None, _const("x")) == ""

    def test_plain_stamp_is_bracketed(self):
        assert render_timestamp("%H", _const("12:00")) == "[12:00]"

    def test_bracketed_stamp_is_kept(self):
        assert render_timestamp("%H", _const("[12:00]")) == "[12:00]"

    def test_half_bracketed_stamp_is_wrapped(self):
        assert render_timestamp("%H", _const("[12:00")) == "[[12:00]"

    def test_empty_or_non_string_stamp_is_dropped(self):
        assert render_timestamp("%H", _const("")) == ""
        assert render_timestamp("%H", _const(None)) == ""
        assert render_timestamp("%H", _const(42)) == ""

    def test_failing_renderer_is_dropped(self):
        def boom(fmt):
            raise ValueError("bad format")
        assert render_timestamp("%H", boom) == ""

    def test_strftime_renderer_local_and_utc(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", strftime_renderer("%Y-%m-%d"))
        assert re.fullmatch(r"\d{2}:\d{2}", strftime_renderer("!%H:%M"))


class TestNormalization:

    def test_prefix_gets_separator(self):
        assert normalize_prefix("INFO") == "INFO "
        assert normalize_prefix("[WARN]") == "[WARN] "
        assert normalize_prefix("INFO:") == "INFO: "

    def test_prefix_ending_in_whitespace_is_kept(self):
        assert normalize_prefix("INFO: ") == "INFO: "
        assert normalize_prefix("") == ""

    def test_non_string_prefix_clears(self):
        assert normalize_prefix(None) is None
        assert normalize_prefix(3) is None

    def test_time_format(self):
        assert normalize_time_format("%H:%M") == "%H:%M"
        assert normalize_time_format("*t") is None
        assert normalize_time_format("!*t") is None
        assert normalize_time_format(12) is None


class TestInterpolation:

    def test_no_args_leaves_template_alone(self):
        assert interpolate("100% done", ()) == "100% done"

    def test_args_are_interpolated(self):
        assert interpolate("disk at %d%%", (90,)) == "disk at 90%"
        assert interpolate("%s=%.2f", ("x", 1.5)) == "x=1.50"

    @pytest.mark.parametrize("template,args", [
        ("%d", ("abc",)),
        ("%s %s", ("one",)),
        ("no specifiers", (1,)),
    ])
    def test_mismatch_raises_format_error(self, template, args):
        with pytest.raises(LogFormatError):
            interpolate(template, args)

    def test_render_concatenates_segments(self):
        assert render("x=%d", (1,), "[DBG] ", "%H", _const("t")) == "[t][DBG] x=1"
        assert render("plain", (), None, None, _const("t")) == "plain"
