"""Shape-preserving containers for the fields of a declared aggregate.

`VariantData` is a closed union of three variants:

- `Positional`: fields identified by position (tuple structs, tuple-like enum arms)
- `Named`: fields identified by name, kept in declaration order
- `Empty`: no fields at all (unit-like)

Containers are frozen. Every transform returns a new container of the same
variant and never reorders elements. `Positional(())` and `Empty()` are
distinct values; only `fields()` treats them alike.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Iterator, List, Tuple, TypeVar

from variant_data.descriptor import FieldParser, Shape, ShapeSource, as_descriptor, field_parser

T = TypeVar("T")
U = TypeVar("U")


class VariantData(Generic[T]):
    """Base of `Positional`, `Named` and `Empty`. Not instantiated directly."""

    shape: ClassVar[Shape]
    elements: Tuple[T, ...]

    @classmethod
    def new(cls, shape: Shape, elements=()) -> "VariantData[T]":
        """Build the variant matching `shape` around `elements`."""
        elements = tuple(elements)
        if shape is Shape.UNIT:
            if elements:
                raise ValueError(f"unit shape cannot carry fields (got {len(elements)})")
            return Empty()
        return _VARIANTS[shape](elements)

    @classmethod
    def empty_from(cls, src: ShapeSource) -> "VariantData[T]":
        """Mirror the shape of `src` with no elements."""
        return cls.new(as_descriptor(src).shape)

    @classmethod
    def from_descriptor(cls, src: ShapeSource, parser: FieldParser) -> "VariantData[T]":
        """Parse every raw field of `src`, keeping its shape.

        Fields are parsed in declaration order. The first exception raised
        by `parser` propagates as is and the remaining fields are never
        handed to it. A unit-like descriptor yields `Empty()` without
        calling `parser`.
        """
        descriptor = as_descriptor(src)
        if descriptor.shape is Shape.UNIT:
            return Empty()

        parse = field_parser(parser)
        parsed: List[T] = []
        for raw in descriptor.fields:
            parsed.append(parse(raw))
        return cls.new(descriptor.shape, parsed)

    def fields(self) -> List[T]:
        """All elements in order; an empty list for `Empty`."""
        return list(self.elements)

    def map(self, fn: Callable[[T], U]) -> "VariantData[U]":
        """Apply `fn` to each element left to right, keeping the variant."""
        return self._rebuild(tuple(fn(e) for e in self.elements))

    def as_ref(self) -> "VariantData[T]":
        """Same variant over the very same element objects; nothing is copied."""
        return self._rebuild(self.elements)

    def split(self) -> Tuple[Shape, List[T]]:
        return self.shape, self.fields()

    @property
    def is_newtype(self) -> bool:
        """True for a positional container with exactly one field."""
        return self.shape is Shape.POSITIONAL and len(self.elements) == 1

    def _rebuild(self, elements: Tuple[Any, ...]) -> "VariantData[Any]":
        return type(self)(elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)


@dataclass(frozen=True)
class Positional(VariantData[T]):
    shape: ClassVar[Shape] = Shape.POSITIONAL
    elements: Tuple[T, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class Named(VariantData[T]):
    shape: ClassVar[Shape] = Shape.NAMED
    elements: Tuple[T, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class Empty(VariantData[T]):
    shape: ClassVar[Shape] = Shape.UNIT

    @property
    def elements(self) -> Tuple[T, ...]:
        return ()

    def _rebuild(self, elements: Tuple[Any, ...]) -> "Empty[Any]":
        return Empty()


_VARIANTS = {
    Shape.POSITIONAL: Positional,
    Shape.NAMED: Named,
}
