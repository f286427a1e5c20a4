#!/usr/bin/env python3
"""
Tests for the CSV, JSON, XML, Base64, URL, HTML and hex helpers.
"""

import pytest

from fluent_text.config import TextConfig
from fluent_text.data_format import (
    from_base64,
    from_csv_field,
    from_csv_to_list,
    from_hex,
    from_html_encoded,
    from_json_string,
    from_json_to_list,
    from_url_encoded,
    from_xml_content,
    is_valid_base64,
    is_valid_hex,
    is_valid_json,
    split_csv_line,
    to_base64,
    to_csv,
    to_csv_field,
    to_csv_line,
    to_hex,
    to_html_encoded,
    to_json_array,
    to_json_string,
    to_url_encoded,
    to_xml_content,
)
from fluent_text.errors import FormatError, InvalidArgumentError, NullInputError


class TestCsv:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("hello", "hello"),
            ("hello, world", '"hello, world"'),
            ('say "hi"', '"say ""hi"""'),
            ("two\nlines", '"two\nlines"'),
            ("", ""),
        ],
    )
    def test_to_csv_field(self, value, expected):
        assert to_csv_field(value) == expected

    def test_custom_delimiter(self):
        assert to_csv_field("a;b", ";") == '"a;b"'
        assert to_csv_field("a,b", ";") == "a,b"

    def test_delimiter_must_be_single_char(self):
        with pytest.raises(InvalidArgumentError):
            to_csv_field("x", ";;")

    def test_from_csv_field(self):
        assert from_csv_field('"say ""hi"""') == 'say "hi"'
        assert from_csv_field("plain") == "plain"

    def test_split_csv_line(self):
        assert split_csv_line('a,"b,c","say ""hi"""') == ["a", "b,c", 'say "hi"']
        assert split_csv_line("a,,b") == ["a", "", "b"]
        assert split_csv_line("a|b", "|") == ["a", "b"]

    def test_to_csv_line(self):
        assert to_csv_line(["a", "b,c", None]) == 'a,"b,c",'

    def test_to_csv(self):
        assert to_csv([["name", "city"], ["Ann", "Oslo, NO"]]) == 'name,city\nAnn,"Oslo, NO"'

    def test_from_csv_to_list(self):
        text = 'name,city\n\nAnn,"Oslo, NO"\nBob\n'
        assert from_csv_to_list(text) == [["name", "city"], ["Ann", "Oslo, NO"], ["Bob"]]

    def test_from_csv_to_list_padded(self):
        assert from_csv_to_list("a,b\nc", pad=True) == [["a", "b"], ["c", ""]]

    def test_csv_round_trip(self):
        rows = [["id", "quote"], ["1", 'He said "no", twice']]
        assert from_csv_to_list(to_csv(rows)) == rows


class TestJson:
    def test_to_json_string(self):
        assert to_json_string('He said "hi"\n') == 'He said \\"hi\\"\\n'
        assert to_json_string("a/b\\c\t") == "a\\/b\\\\c\\t"

    def test_control_characters_use_unicode_escapes(self):
        assert to_json_string("\x01") == "\\u0001"

    def test_from_json_string(self):
        assert from_json_string('line\\nbreak \\u0041 \\"q\\"') == 'line\nbreak A "q"'
        assert from_json_string("a\\/b") == "a/b"

    def test_to_json_array(self):
        assert to_json_array([["a", "b"], ["c"]]) == '[["a","b"],["c"]]'
        assert to_json_array([]) == "[]"

    def test_from_json_to_list(self):
        assert from_json_to_list('[["a", null], ["b"]]') == [["a", ""], ["b"]]
        assert from_json_to_list('[["a", "b"], ["c"]]', pad=True) == [["a", "b"], ["c", ""]]

    def test_from_json_to_list_non_array_root(self):
        assert from_json_to_list('{"a": "b"}') == []
        assert from_json_to_list("   ") == []

    @pytest.mark.parametrize("value", ["not json", "[1, 2]", "[[1]]"])
    def test_from_json_to_list_rejects_bad_input(self, value):
        with pytest.raises(FormatError):
            from_json_to_list(value)

    def test_array_round_trip(self):
        rows = [["quote \"x\"", "path/to"], ["tab\there"]]
        assert from_json_to_list(to_json_array(rows)) == rows

    def test_is_valid_json(self):
        assert is_valid_json('{"a": 1}')
        assert is_valid_json("[1, 2]")
        assert not is_valid_json("{oops")
        assert not is_valid_json("")


class TestXml:
    def test_to_xml_content(self):
        value = '<a href="x">Tom & Jerry\'s</a>'
        expected = "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
        assert to_xml_content(value) == expected

    def test_from_xml_content(self):
        assert from_xml_content("&lt;b&gt; &amp; &quot;x&quot;") == '<b> & "x"'

    def test_escaped_entity_is_decoded_once(self):
        assert from_xml_content("&amp;lt;") == "&lt;"


class TestBase64:
    def test_encode(self):
        assert to_base64("Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
        assert to_base64("") == ""

    def test_decode(self):
        assert from_base64("SGVsbG8sIFdvcmxkIQ==") == "Hello, World!"

    def test_decode_ignores_whitespace(self):
        assert from_base64("SGVsbG8s\nIFdvcmxkIQ==") == "Hello, World!"

    def test_decode_invalid(self):
        with pytest.raises(FormatError):
            from_base64("not base64!")

    def test_decode_limit(self):
        with pytest.raises(InvalidArgumentError):
            from_base64("SGVsbG8=", TextConfig(max_decoded_bytes=4))

    def test_is_valid_base64(self):
        assert is_valid_base64("SGVsbG8=")
        assert not is_valid_base64("abc")
        assert not is_valid_base64("")


class TestUrl:
    def test_encode(self):
        assert to_url_encoded("hello world&x=1") == "hello+world%26x%3D1"
        assert to_url_encoded("a*b(c)!") == "a*b(c)!"

    def test_decode(self):
        assert from_url_encoded("hello+world%26x%3D1") == "hello world&x=1"


class TestHtml:
    def test_encode(self):
        value = "<b>\"Tom\" & 'Jerry'</b>"
        assert to_html_encoded(value) == "&lt;b&gt;&#34;Tom&#34; &amp; &#39;Jerry&#39;&lt;/b&gt;"

    def test_decode(self):
        assert from_html_encoded("&lt;b&gt; &amp; &#39;x&#39; &copy;") == "<b> & 'x' ©"

    def test_decode_returns_plain_str(self):
        assert type(from_html_encoded("&lt;")) is str


class TestHex:
    def test_encode(self):
        assert to_hex("Hi") == "4869"
        assert to_hex("é", uppercase=False) == "c3a9"

    def test_decode(self):
        assert from_hex("48656c6c6f") == "Hello"
        assert from_hex("C3A9") == "é"

    def test_odd_length(self):
        with pytest.raises(FormatError, match="even number"):
            from_hex("486")

    def test_non_hex(self):
        with pytest.raises(FormatError):
            from_hex("zz")

    def test_decode_limit(self):
        with pytest.raises(InvalidArgumentError):
            from_hex("4869", TextConfig(max_decoded_bytes=1))

    @pytest.mark.parametrize("value,expected", [("4869", True), ("486", False), ("GG", False), ("", False)])
    def test_is_valid_hex(self, value, expected):
        assert is_valid_hex(value) is expected


@pytest.mark.parametrize(
    "func",
    [
        to_csv_field,
        from_csv_field,
        split_csv_line,
        to_json_string,
        from_json_string,
        to_xml_content,
        from_xml_content,
        to_base64,
        from_base64,
        to_url_encoded,
        from_url_encoded,
        to_html_encoded,
        from_html_encoded,
        to_hex,
        from_hex,
    ],
)
def test_none_raises(func):
    with pytest.raises(NullInputError):
        func(None)


if __name__ == "__main__":
    pytest.main([__file__])
