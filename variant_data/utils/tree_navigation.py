"""Tree navigation utilities for reading Lark parse trees."""
from __future__ import annotations
from typing import Callable, Collection, List, Optional
from lark import Tree, Token


def first(children: List[object], pred: Callable) -> Optional[object]:
    """Find first child matching predicate."""
    for ch in children:
        if pred(ch):
            return ch
    return None


def first_tree_of(children: List[object], names: Collection[str]) -> Optional[Tree]:
    """Get first Tree child whose data tag is one of `names`."""
    return first(children, lambda c: isinstance(c, Tree) and c.data in names)  # type: ignore[return-value]


def is_punctuation(ch: object, skipped: Collection[str]) -> bool:
    """True for separator tokens kept in the tree by `keep_all_tokens` grammars."""
    return isinstance(ch, Token) and (ch.type.startswith("_") or ch.type in skipped)
