"""Tests for WireString, WireStrings and the casting helpers."""

import math

import pytest

from textwire.text import (
    WireString, WireStrings, cast, format_items, format_keys, format_values, from_precise, interpolate, precise,
)


class TestWireString:
    """Test the extended string methods."""

    def test_circular_indexing(self):
        s = WireString("hello")
        assert s.at(0) == "h"
        assert s.at(5) == "h"
        assert s.at(-1) == "o"
        assert s.at(-6) == "o"
        assert s.at(12) == "l"

    def test_empty_indexing(self):
        s = WireString()
        assert s.at(3) == ""
        assert s.front() == ""
        assert s.back() == ""

    def test_front_back_and_pops(self):
        s = WireString("abc")
        assert s.front() == "a"
        assert s.back() == "c"
        assert s.pop_front() == "bc"
        assert s.pop_back() == "ab"
        assert WireString().pop_back() == ""

    def test_push(self):
        s = WireString("b")
        assert s.push_front("a").push_back(True) == "abtrue"
        assert s.wrap("[", "]") == "[b]"

    def test_case(self):
        s = WireString("MiXeD")
        assert s.uppercase() == "MIXED"
        assert s.lowercase() == "mixed"
        assert isinstance(s.uppercase(), WireString)

    def test_matching(self):
        s = WireString("Report.CSV")
        assert s.matches("*.CSV")
        assert not s.matches("*.csv")
        assert s.matchesi("*.csv")
        assert s.starts_withi("report")
        assert s.ends_withi(".csv")
        assert not s.starts_with("report")

    def test_left_and_right_of(self):
        s = WireString("key=value=more")
        assert s.left_of("=") == "key"
        assert s.right_of("=") == "value=more"
        assert s.right_of("->") == "key=value=more"
        assert WireString("a->b").right_of("->") == "b"

    def test_replacements(self):
        s = WireString("a-a-a")
        assert s.replace1("a", "b") == "b-a-a"
        assert s.replace_all("a", "bb") == "bb-bb-bb"
        assert s.replace_all("", "x") == "a-a-a"
        assert s.replace_map({"a": "1", "-": "+"}) == "1+1+1"

    def test_trim(self):
        s = WireString("  xx hi xx  ")
        assert s.trim() == "xx hi xx"
        assert s.ltrim() == "xx hi xx  "
        assert s.rtrim() == "  xx hi xx"
        assert WireString("xxhixx").trim("x") == "hi"

    def test_tokenize(self):
        tokens = WireString(",a,,b c,").tokenize(", ")
        assert tokens == ["a", "b", "c"]
        assert isinstance(tokens, WireStrings)
        assert WireString("").tokenize(",") == []

    def test_split_keep(self):
        assert WireString("--user=me").split_keep("=") == ["--user", "=", "me"]
        assert WireString("[sec]").split_keep("[]") == ["[", "sec", "]"]
        assert WireString("k==v").split_keep("=") == ["k", "=", "=", "v"]

    def test_as(self):
        assert WireString("12").as_(int) == 12
        assert WireString("false").as_(bool) is False
        assert WireString("z").as_('char') == "z"


class TestWireStrings:
    """Test the string list."""

    def test_circular_at(self):
        items = WireStrings(["a", "b", "c"])
        assert items.at(3) == "a"
        assert items.at(-1) == "c"
        assert WireStrings().at(0) == ""

    def test_items_are_wire_strings(self):
        items = WireStrings([1, True])
        items.append(2.5)
        assert items == ["1", "true", "2.5"]
        assert all(isinstance(item, WireString) for item in items)

    def test_str(self):
        items = WireStrings(["a", "b"])
        assert items.str() == "a\nb\n"
        assert items.str("<\x01>", "[", "]") == "[<a><b>]"
        assert WireStrings(["only"]).str("<\x01>", "(", ")") == "(only)"


class TestInterpolate:
    """Test positional placeholder formatting."""

    def test_placeholders(self):
        assert interpolate("\x01 + \x02 = \x03", 1, 2, 3) == "1 + 2 = 3"

    def test_repeated_and_reordered(self):
        assert interpolate("\x02\x01\x02", "a", "b") == "bab"

    def test_missing_argument_dropped(self):
        assert interpolate("x\x02y", "a") == "xy"

    def test_too_many_arguments(self):
        with pytest.raises(ValueError):
            interpolate("", *range(8))


class TestMappingFormatters:
    """Test rendering mappings through placeholder formats."""

    def setup_method(self):
        self.mapping = {"host": "localhost", "port": 8080, "debug": True}

    def test_keys(self):
        assert format_keys(self.mapping) == "host\nport\ndebug\n"
        assert format_keys(self.mapping, "\x01", "[", "]") == "[hostportdebug]"

    def test_values(self):
        assert format_values(self.mapping, "\x01;") == "localhost;8080;true;"

    def test_items(self):
        assert format_items(self.mapping) == "host=localhost\nport=8080\ndebug=true\n"
        assert format_items(self.mapping, "\x02<-\x01 ", "{", "}") == "{localhost<-host 8080<-port true<-debug }"

    def test_empty_mapping(self):
        assert format_items({}, pre="(", post=")") == "()"


class TestCasting:
    """Test cast() and the precise float helpers."""

    def test_cast_names(self):
        assert cast("3", "int") == 3
        assert cast("3.25", "float") == 3.25
        assert cast("on", "bool") is True
        assert cast("abc", "string") == "abc"

    def test_unsupported(self):
        with pytest.raises(ValueError):
            cast("1", "complex")

    @pytest.mark.parametrize("value", [0.1, -2.5, 1e300, 0.0])
    def test_precise_is_lossless(self, value):
        assert from_precise(precise(value)) == value

    def test_precise_special_values(self):
        assert precise(math.inf) == "INF"
        assert precise(-math.inf) == "-INF"
        assert precise(math.nan) == "NaN"
        assert from_precise("-INF") == -math.inf
        assert math.isnan(from_precise("NaN"))
