"""Shared fixtures: a tagged-JSON stand-in for the external GBLN engine."""

import json
import sys

import pytest

sys.path.insert(0, str(__file__).rsplit('/', 2)[0])

from gbln import GValue, GType, MapEntry, ParseError


class TaggedJsonEngine:
    """
    Parser and printer over a JSON rendering of GValue trees.

    Each node becomes {"t": kind, "v": payload} (plus "c" for string
    capacity), so tags survive a print/parse round trip exactly.
    """

    def __init__(self):
        self.calls = []

    def print_value(self, value, *, mini, indent, strip_comments):
        self.calls.append({"mini": mini, "indent": indent, "strip_comments": strip_comments})
        tree = self._to_json(value)
        if mini:
            return json.dumps(tree, separators=(",", ":"), ensure_ascii=False)
        return json.dumps(tree, indent=indent, ensure_ascii=False)

    def parse(self, text):
        try:
            tree = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(str(e))
        return self._from_json(tree)

    def _to_json(self, v):
        t = v.type
        node = {"t": t.value}
        if t == GType.NULL:
            pass
        elif t == GType.BOOL:
            node["v"] = v.as_bool()
        elif t.is_integer or t.is_float:
            node["v"] = v.as_number()
        elif t == GType.STR:
            node["v"] = v.as_str()
            node["c"] = v.capacity
        elif t == GType.OBJECT:
            node["v"] = [[e.key, self._to_json(e.value)] for e in v.as_object()]
        elif t == GType.ARRAY:
            node["v"] = [self._to_json(item) for item in v.as_array()]
        return node

    def _from_json(self, node):
        t = GType(node["t"])
        if t == GType.NULL:
            return GValue.null()
        if t == GType.BOOL:
            return GValue.bool_(node["v"])
        if t.is_integer:
            return GValue.int_(t, node["v"])
        if t.is_float:
            return GValue.float_(t, node["v"])
        if t == GType.STR:
            return GValue.str_(node["v"], node["c"])
        if t == GType.OBJECT:
            return GValue.object_(*[MapEntry(k, self._from_json(c)) for k, c in node["v"]])
        return GValue.array_(*[self._from_json(c) for c in node["v"]])


@pytest.fixture
def engine():
    return TaggedJsonEngine()
