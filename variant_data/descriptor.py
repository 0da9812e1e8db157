"""Shape descriptors and field-parser resolution.

A shape descriptor tells a container which layout a declaration uses and
hands over its raw, still unparsed field descriptors in declaration order.
Descriptors come either from `ShapeDescriptor` directly or from a Lark
parse tree through `ShapeDescriptor.from_tree`.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Tuple, TypeVar, Union, runtime_checkable

from lark import Tree

from variant_data.internals.errors import raise_internal_error
from variant_data.internals.report import Span, span_of
from variant_data.utils.tree_navigation import first_tree_of, is_punctuation

T = TypeVar("T")


class Shape(Enum):
    POSITIONAL = "positional"
    NAMED = "named"
    UNIT = "unit"

    def __str__(self) -> str:
        return self.value


# Lark rule names of field-list nodes
SHAPE_NODE_NAMES = {
    "tuple_fields": Shape.POSITIONAL,
    "struct_fields": Shape.NAMED,
    "unit_fields": Shape.UNIT,
}

# Declarations that are unit-like when they own no field-list node
FIELDLESS_DECLARATIONS = frozenset({"enum_variant", "unit_struct_def"})

PUNCTUATION_TOKENS = frozenset({"COMMA", "COLON", "LPAR", "RPAR", "LBRACE", "RBRACE", "SEMICOLON"})


@dataclass(frozen=True)
class ShapeDescriptor:
    """Shape tag plus the raw field descriptors of one declaration."""
    shape: Shape
    fields: Tuple[Any, ...] = ()
    loc: Optional[Span] = None

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        if self.shape is Shape.UNIT and self.fields:
            raise ValueError(f"unit shape cannot carry fields (got {len(self.fields)})")

    @classmethod
    def positional(cls, *fields: Any) -> "ShapeDescriptor":
        return cls(Shape.POSITIONAL, fields)

    @classmethod
    def named(cls, *fields: Any) -> "ShapeDescriptor":
        return cls(Shape.NAMED, fields)

    @classmethod
    def unit(cls) -> "ShapeDescriptor":
        return cls(Shape.UNIT)

    @classmethod
    def from_tree(cls, t: Tree) -> "ShapeDescriptor":
        """Read the field list of a Lark tree.

        `t` is either a field-list node (tuple_fields / struct_fields /
        unit_fields) or a declaration owning one, such as a struct_def or
        enum_variant.
        """
        node = t if t.data in SHAPE_NODE_NAMES else first_tree_of(t.children, SHAPE_NODE_NAMES)
        if node is None:
            if t.data in FIELDLESS_DECLARATIONS:
                return cls(Shape.UNIT, loc=span_of(t))
            raise_internal_error("VD0001", node=t.data)

        shape = SHAPE_NODE_NAMES[node.data]
        fields = tuple(ch for ch in node.children if not is_punctuation(ch, PUNCTUATION_TOKENS))
        if shape is Shape.UNIT and fields:
            raise_internal_error("VD0002", count=len(fields))
        return cls(shape, fields, loc=span_of(node))

    def __len__(self) -> int:
        return len(self.fields)


ShapeSource = Union[ShapeDescriptor, Tree]


def as_descriptor(src: ShapeSource) -> ShapeDescriptor:
    if isinstance(src, ShapeDescriptor):
        return src
    if isinstance(src, Tree):
        return ShapeDescriptor.from_tree(src)
    raise TypeError(f"expected ShapeDescriptor or lark Tree, got {type(src).__name__}")


@runtime_checkable
class FromField(Protocol[T]):
    """A field representation that knows how to parse itself from one raw field.

    `from_field` raises (usually `FieldParseError`) on malformed input.
    """
    @classmethod
    def from_field(cls, field: Any) -> T: ...


FieldParser = Union[Callable[[Any], Any], type]


def field_parser(parser: FieldParser) -> Callable[[Any], T]:
    """Resolve a FromField type or a plain callable into a unary parse function."""
    from_field = getattr(parser, "from_field", None)
    if callable(from_field):
        return from_field
    if callable(parser):
        return parser
    raise TypeError(f"expected a FromField type or a callable, got {type(parser).__name__}")
