"""Variant Data - shape-preserving containers for declared fields."""
from importlib.metadata import version, PackageNotFoundError

from variant_data.descriptor import (
    FromField,
    Shape,
    ShapeDescriptor,
    as_descriptor,
    field_parser,
)
from variant_data.internals.errors import ERR, FieldParseError
from variant_data.internals.field_errors import collect_from_descriptor
from variant_data.internals.report import Reporter, Span
from variant_data.shapes import Empty, Named, Positional, VariantData

try:
    __version__ = version("variant-data")
except PackageNotFoundError:
    # Source checkout - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

__all__ = [
    "VariantData",
    "Positional",
    "Named",
    "Empty",
    "Shape",
    "ShapeDescriptor",
    "FromField",
    "as_descriptor",
    "field_parser",
    "collect_from_descriptor",
    "FieldParseError",
    "ERR",
    "Reporter",
    "Span",
]
