"""
Tests for the CollectorConf properties decoder.
"""

import unittest

from CollectorConf.config.properties import coerce_value, decode_properties
from CollectorConf.exceptions import ParseError


class TestCoerceValue(unittest.TestCase):
    """Test cases for value coercion."""

    def test_scalars(self):
        """Test coercion of numbers, booleans and nulls."""
        self.assertEqual(coerce_value("1"), 1)
        self.assertEqual(coerce_value("1.5"), 1.5)
        self.assertIs(coerce_value("true"), True)
        self.assertIs(coerce_value("false"), False)
        self.assertIsNone(coerce_value("null"))
        self.assertIsNone(coerce_value("~"))

    def test_strings(self):
        """Test that plain text stays a string."""
        self.assertEqual(coerce_value("2s"), "2s")
        self.assertEqual(coerce_value("0.0.0.0:4317"), "0.0.0.0:4317")
        self.assertEqual(coerce_value(""), "")

    def test_collections(self):
        """Test coercion of flow lists and maps."""
        self.assertEqual(coerce_value("[1,2]"), [1, 2])
        self.assertEqual(coerce_value("[otlp, jaeger]"), ["otlp", "jaeger"])
        self.assertEqual(coerce_value("{key: some_key, action: delete}"), {"key": "some_key", "action": "delete"})

    def test_unreadable_values_stay_raw(self):
        """Test that values YAML rejects or comments out are kept verbatim."""
        self.assertEqual(coerce_value("@timestamp"), "@timestamp")
        self.assertEqual(coerce_value("[1,2"), "[1,2")
        self.assertEqual(coerce_value("#fff"), "#fff")

    def test_block_style_stays_raw(self):
        """Test that block mappings and sequences are not typed."""
        self.assertEqual(coerce_value("Bearer: abc"), "Bearer: abc")
        self.assertEqual(coerce_value("- b"), "- b")
        self.assertEqual(coerce_value("key: value, other: 1"), "key: value, other: 1")

    def test_lossy_yaml_stays_raw(self):
        """Test that anchors, tags, aliases and comments keep their text."""
        self.assertEqual(coerce_value("&a x"), "&a x")
        self.assertEqual(coerce_value("!!str 1"), "!!str 1")
        self.assertEqual(coerce_value("*ref"), "*ref")
        self.assertEqual(coerce_value("value # note"), "value # note")
        self.assertEqual(coerce_value("10 # seconds"), "10 # seconds")

    def test_quoted_strings(self):
        """Test that quotes force a string value."""
        self.assertEqual(coerce_value('"1"'), "1")
        self.assertEqual(coerce_value("'true'"), "true")


class TestDecodeProperties(unittest.TestCase):
    """Test cases for decoding properties documents."""

    def test_nested_keys(self):
        """Test that dotted keys become nested maps."""
        tree = decode_properties("processors.batch.timeout=2s\nprocessors.batch.send_batch_size=100\n")
        self.assertEqual(tree, {"processors": {"batch": {"timeout": "2s", "send_batch_size": 100}}})

    def test_last_duplicate_wins(self):
        """Test that a repeated key keeps its last value."""
        self.assertEqual(decode_properties("a=1\na=2\n"), {"a": 2})

    def test_first_separator_splits(self):
        """Test that only the first '=' separates key and value."""
        tree = decode_properties("not-a-valid=line=two-equals-maybe-ok-or=bad-nesting\n")
        self.assertEqual(tree, {"not-a-valid": "line=two-equals-maybe-ok-or=bad-nesting"})

    def test_properties_syntax(self):
        """Test comments, colon separators and surrounding whitespace."""
        tree = decode_properties("# comment\n! also a comment\na.b: 1\n  c = x\n")
        self.assertEqual(tree, {"a": {"b": 1}, "c": "x"})

    def test_key_without_value(self):
        """Test that a bare key decodes to the empty string."""
        self.assertEqual(decode_properties("a.b\n"), {"a": {"b": ""}})

    def test_inline_maps_join(self):
        """Test that an inline map and dotted keys under it are joined."""
        tree = decode_properties("m={x: 1}\nm.y=2\n")
        self.assertEqual(tree, {"m": {"x": 1, "y": 2}})

    def test_empty_document(self):
        """Test that an empty document decodes to an empty tree."""
        self.assertEqual(decode_properties(""), {})

    def test_later_lines_win_across_shapes(self):
        """Test that a later line replaces an earlier value or map for the same key."""
        self.assertEqual(decode_properties("a=1\na.b=2\n"), {"a": {"b": 2}})
        self.assertEqual(decode_properties("a.b=2\na=1\n"), {"a": 1})
        self.assertEqual(decode_properties("a={x: 1}\na=5\n"), {"a": 5})
        self.assertEqual(decode_properties("a=5\na={x: 1}\n"), {"a": {"x": 1}})

    def test_keys_lowercased(self):
        """Test that keys, including inline map keys, are lowercased."""
        tree = decode_properties("Processors.Batch.Timeout=2s\nprocessors.batch.timeout=3s\nm={X: 1}\n")
        self.assertEqual(tree, {"processors": {"batch": {"timeout": "3s"}}, "m": {"x": 1}})

    def test_empty_segment(self):
        """Test that empty key segments are rejected."""
        with self.assertRaises(ParseError):
            decode_properties("a..b=1\n")
        with self.assertRaises(ParseError):
            decode_properties(".a=1\n")

    def test_invalid_unicode_escape(self):
        """Test that a malformed \\u escape raises ParseError."""
        with self.assertRaises(ParseError) as cm:
            decode_properties("a=\\uZZZZ\n")
        self.assertIsInstance(cm.exception.cause, ValueError)


if __name__ == "__main__":
    unittest.main()
