"""
Properties-format decoder for CollectorConf.

Turns a ``.properties`` document into a nested configuration tree. Line
syntax (comments, separators, escapes, continuation lines) is handled by
``javaproperties``; each raw value is then coerced with ``yaml.safe_load``
so that numbers, booleans, nulls, flow lists and flow maps come out typed:

    ``1``      -> 1
    ``1.5``    -> 1.5
    ``true``   -> True
    ``null``   -> None
    ``[1,2]``  -> [1, 2]
    ``{a: 1}`` -> {'a': 1}
    ``2s``     -> '2s'

Values YAML cannot read, block-style text and values YAML would shorten
are kept as the raw string. Keys are case-insensitive and stored lowercased.
"""

from typing import Any, Dict, Iterable, List, Tuple

import javaproperties
import yaml

from CollectorConf.config.utils import deep_merge, lower_keys, split_key
from CollectorConf.exceptions import ParseError

NULL_LITERALS = frozenset(['', '~', 'null', 'Null', 'NULL'])

# Anchors, tags, aliases and comments drop text from the value
YAML_LOSSY_PREFIXES = ('&', '!', '*', '#')
FLOW_COLLECTION_PREFIXES = ('{', '[')
QUOTES = ('"', "'")


def coerce_value(raw: str) -> Any:
    """
    Coerce a raw properties value to a typed Python value.

    Only flow scalars and flow collections are typed. Block-style text
    (``Bearer: abc``, ``- b``) and values YAML would shorten (anchors, tags,
    comments) stay the raw string. An empty value stays the empty string.
    """
    text = raw.strip()
    if not text:
        return raw

    if text.startswith(YAML_LOSSY_PREFIXES) or ' #' in text:
        return raw

    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return raw

    if isinstance(value, (dict, list)):
        return value if text.startswith(FLOW_COLLECTION_PREFIXES) else raw
    if value is None and text not in NULL_LITERALS:
        return raw
    if isinstance(value, str) and not text.startswith(QUOTES) and value != text:
        return raw
    return value


def decode_properties(text: str) -> Dict[str, Any]:
    """
    Decode a properties document into a nested tree.

    Keys are lowercased and split on dots. Later lines win over earlier
    ones, including when they change a key between a map and a value; map
    values for the same key are joined.

    Args:
        text: The properties document

    Returns:
        Dict[str, Any]: Nested tree of coerced values

    Raises:
        ParseError: If the document is not valid properties syntax or a key
            has an empty segment.

    Examples:
        >>> decode_properties("processors.batch.timeout=2s\\nreceivers.otlp.ports=[4317,4318]\\n")
        {'processors': {'batch': {'timeout': '2s'}}, 'receivers': {'otlp': {'ports': [4317, 4318]}}}
    """
    try:
        pairs = javaproperties.loads(text, object_pairs_hook=list)
    except ValueError as e:
        raise ParseError(f"Invalid properties syntax: {e}", cause=e) from e

    return _build_tree(pairs)


def _build_tree(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    tree: Dict[str, Any] = {}

    for key, raw in pairs:
        parts = split_key(key.lower())
        if not all(parts):
            raise ParseError(f"Invalid key '{key}': empty path segment", context={'key': key})

        node = _descend(tree, parts)
        leaf = parts[-1]
        value = lower_keys(coerce_value(raw))
        current = node.get(leaf)

        if isinstance(current, dict) and isinstance(value, dict):
            node[leaf] = deep_merge(current, value)
        else:
            node[leaf] = value

    return tree


def _descend(tree: Dict[str, Any], parts: List[str]) -> Dict[str, Any]:
    node = tree
    for part in parts[:-1]:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    return node
