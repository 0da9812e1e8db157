"""Reporter-based field parsing for calling layers that want every error."""
from __future__ import annotations

from typing import List, Optional

from variant_data.descriptor import FieldParser, Shape, ShapeSource, as_descriptor, field_parser
from variant_data.internals import errors as er
from variant_data.internals.report import Reporter
from variant_data.shapes import VariantData


def handle_field_exception(exc: Exception, reporter: Reporter) -> bool:
    """Record a field parse exception as a diagnostic.

    Returns:
        True if the exception was handled, False otherwise.
    """
    if isinstance(exc, er.FieldParseError):
        if exc.severity == er.Severity.ERROR:
            reporter.error(exc.code, exc.text, exc.span)
        else:
            reporter.warn(exc.code, exc.text, exc.span)
        return True

    return False


def collect_from_descriptor(src: ShapeSource, parser: FieldParser,
                            reporter: Reporter) -> Optional[VariantData]:
    """Parse every field of `src`, reporting each failure instead of stopping.

    Unlike `VariantData.from_descriptor`, every raw field is handed to the
    parser even after one has failed. Only `FieldParseError` is collected;
    any other exception propagates.

    Returns:
        The populated container, or None if any field failed.
    """
    descriptor = as_descriptor(src)
    if descriptor.shape is Shape.UNIT:
        return VariantData.new(Shape.UNIT)

    if not descriptor.fields:
        er.emit(reporter, er.ERR.VD2001, descriptor.loc, shape=descriptor.shape)

    parse = field_parser(parser)
    parsed: List[object] = []
    failed = False
    for raw in descriptor.fields:
        try:
            parsed.append(parse(raw))
        except er.FieldParseError as exc:
            handle_field_exception(exc, reporter)
            failed = True

    if failed:
        return None
    return VariantData.new(descriptor.shape, parsed)
