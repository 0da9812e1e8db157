# variant_data/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from variant_data.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    FIELD     = "field"
    SHAPE     = "shape"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.FIELD
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class FieldParseError(Exception):
    """Raised by a field parser when one raw field cannot be parsed.

    Containers never wrap or annotate it: whatever the parser raised is
    what the caller of ``VariantData.from_descriptor`` sees.
    """
    def __init__(self, em: ErrorMessage, span: Optional[Span] = None, **kwargs) -> None:
        self.code = em.code
        self.severity = em.severity
        self.text = _fmt(em.code, **kwargs)
        self.span = span
        super().__init__(f"{self.code}: {self.text}")


def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **kwargs) -> None:
    text = _fmt(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for a misused descriptor or container.

    Internal errors (VD0xxx) indicate a bug in the calling layer, not a
    malformed field.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Internal errors (caller bugs) - VD0xxx range
_add(ErrorMessage("VD0001", Severity.ERROR,
    "unknown shape node '{node}'",
    Category.INTERNAL, "Tree is neither a field-list node nor a declaration that owns one."))

_add(ErrorMessage("VD0002", Severity.ERROR,
    "unit shape cannot carry fields (got {count})",
    Category.INTERNAL, "Unit-like descriptors and Empty containers never hold elements."))

# Field errors - VD1xxx range, raised by field parsers
_add(ErrorMessage("VD1001", Severity.ERROR,
    "malformed field declaration: {detail}",
    Category.FIELD, "A raw field could not be turned into its parsed representation."))

_add(ErrorMessage("VD1002", Severity.ERROR,
    "field declaration is missing a name",
    Category.FIELD, "Named field lists require every field to carry a NAME."))

_add(ErrorMessage("VD1003", Severity.ERROR,
    "field '{name}' is missing a type",
    Category.FIELD))

_add(ErrorMessage("VD1004", Severity.ERROR,
    "unexpected node '{node}' in field list",
    Category.FIELD, "Field lists may only contain field declarations."))

# Shape warnings - VD2xxx range
_add(ErrorMessage("VD2001", Severity.WARNING,
    "{shape} field list is empty",
    Category.SHAPE, "Declare the aggregate as unit-like if it has no fields."))
