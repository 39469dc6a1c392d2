"""Tests for engine result rendering."""

import pytest

from cyberchef_mcp.output import RenderingError, is_byte_sequence, render_value, truncate_output


class TestRenderValue:
    """Test classification order: text, bytes, structured."""

    def test_text_unchanged(self):
        assert render_value("hello\n") == "hello\n"

    def test_byte_list_decoded(self):
        assert render_value([72, 101, 108, 108, 111]) == "Hello"

    def test_utf8_multibyte(self):
        assert render_value([0xC3, 0xA9]) == "é"

    def test_bytes_object(self):
        assert render_value(b"abc") == "abc"
        assert render_value(bytearray(b"xyz")) == "xyz"

    def test_empty_list_is_empty_text(self):
        assert render_value([]) == ""

    def test_out_of_range_falls_through_to_json(self):
        assert render_value([72, 256]) == "[72,256]"
        assert render_value([-1, 5]) == "[-1,5]"

    def test_non_integer_elements_fall_through(self):
        assert render_value([72, 1.5]) == "[72,1.5]"
        assert render_value([72, "a"]) == '[72,"a"]'

    def test_booleans_not_bytes(self):
        assert render_value([True, False]) == "[true,false]"

    def test_structured_value(self):
        assert render_value({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'
        assert render_value(None) == "null"
        assert render_value(3) == "3"

    def test_invalid_utf8_raises(self):
        with pytest.raises(RenderingError, match="not valid UTF-8"):
            render_value([0xFF, 0xFE])

    def test_unserializable_raises(self):
        with pytest.raises(RenderingError, match="not serializable"):
            render_value({"x": object()})


class TestIsByteSequence:
    def test_boundaries(self):
        assert is_byte_sequence([0, 255])
        assert not is_byte_sequence([0, 256])
        assert not is_byte_sequence("abc")
        assert not is_byte_sequence({"a": 1})


class TestTruncateOutput:
    def test_disabled(self):
        assert truncate_output("x" * 100, 0) == "x" * 100

    def test_under_limit(self):
        assert truncate_output("abc", 10) == "abc"

    def test_truncated(self):
        out = truncate_output("abcdef", 3)
        assert out.startswith("abc\n\n[TRUNCATED")
