"""Shared stub parsers and Lark tree builders."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

import pytest
from lark import Token, Tree

from variant_data import ERR, FieldParseError
from variant_data.internals.report import span_of


class CountingParser:
    """Records every raw field it sees; fails on the raw values in `bad`."""

    def __init__(self, bad=(), fn=lambda raw: raw):
        self.bad = set(bad)
        self.fn = fn
        self.seen: List[object] = []

    def __call__(self, raw):
        self.seen.append(raw)
        if raw in self.bad:
            raise FieldParseError(ERR.VD1001, detail=f"cannot parse {raw!r}")
        return self.fn(raw)

    @property
    def calls(self) -> int:
        return len(self.seen)


@dataclass
class FieldDecl:
    """Parsed `struct_field` / tuple field tree: optional name plus a type name."""
    name: Optional[str]
    ty: str

    @classmethod
    def from_field(cls, t: Tree) -> "FieldDecl":
        if not isinstance(t, Tree) or t.data not in ("struct_field", "tuple_field"):
            raise FieldParseError(ERR.VD1004, span_of(t), node=getattr(t, "data", t))
        name = next((c for c in t.children if isinstance(c, Token) and c.type == "NAME"), None)
        type_node = next((c for c in t.children if isinstance(c, Tree) and c.data == "name_t"), None)
        if t.data == "struct_field" and name is None:
            raise FieldParseError(ERR.VD1002, span_of(t))
        if type_node is None:
            raise FieldParseError(ERR.VD1003, span_of(t), name=name or "_")
        return cls(str(name) if name is not None else None, str(type_node.children[0]))


def struct_field(name: Optional[str], ty: Optional[str]) -> Tree:
    children = []
    if name is not None:
        children.append(Token("NAME", name))
    if ty is not None:
        children.append(Tree("name_t", [Token("NAME", ty)]))
    return Tree("struct_field", children)


def tuple_field(ty: str) -> Tree:
    return Tree("tuple_field", [Tree("name_t", [Token("NAME", ty)])])


@pytest.fixture
def point_tree() -> Tree:
    """struct Point { x: i32, y: i32 }"""
    return Tree("struct_def", [
        Token("NAME", "Point"),
        Tree("struct_fields", [
            struct_field("x", "i32"),
            Token("COMMA", ","),
            struct_field("y", "i32"),
        ]),
    ])


@pytest.fixture
def pair_tree() -> Tree:
    """enum variant Pair(string, i64)"""
    return Tree("enum_variant", [
        Token("NAME", "Pair"),
        Tree("tuple_fields", [tuple_field("string"), tuple_field("i64")]),
    ])
