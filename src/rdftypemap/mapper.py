"""Datatype mapping between native Python values and typed RDF literals.

The mapper owns a fixed, ordered table from Python classes to
:class:`~rdftypemap.vocab.TypeTag` members:

* ``str`` values become plain (untyped) literals.
* ``bool``, ``int``, ``float``, ``Decimal``, the numpy fixed-width scalars,
  ``URIRef`` and :class:`~rdftypemap.values.Char` become literals tagged
  with the matching XML-Schema (or custom) datatype.
* ``datetime`` values become ``xsd:dateTime`` literals in ISO-8601 form.

Decoding dispatches on the literal's datatype; datatypes outside the
closed set decode to the lexical string.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Mapping

import numpy as np
from rdflib import Literal, URIRef

from rdftypemap.factory import LiteralFactory
from rdftypemap.utils import qualified_name
from rdftypemap.values import Char
from rdftypemap.vocab import TypeTag

logger = logging.getLogger(__name__)

__all__ = [
    "DATATYPE_MAP",
    "DatatypeMapper",
    "DefaultDatatypeMapper",
    "LiteralParseError",
    "decode_literal",
    "encode_value",
    "get_datatype_uri",
    "lexical_form",
    "resolve_tag",
]


class LiteralParseError(ValueError):
    """The lexical form of a literal is not valid for its datatype."""

    def __init__(self, lexical: str, datatype: URIRef, reason: str) -> None:
        self.lexical = lexical
        self.datatype = datatype
        self.reason = reason
        super().__init__(f"Cannot parse {lexical!r} as <{datatype}>: {reason}")


# ── Mapping table ────────────────────────────────────────────────────

# Insertion order is significant: a class without an exact entry takes the
# tag of the first entry it is a subclass of.
DATATYPE_MAP: Mapping[type, TypeTag] = MappingProxyType({
    str: TypeTag.STRING,
    int: TypeTag.INT,
    np.int32: TypeTag.INT,
    datetime: TypeTag.DATETIME,
    bool: TypeTag.BOOLEAN,
    np.float32: TypeTag.FLOAT,
    float: TypeTag.DOUBLE,
    np.float64: TypeTag.DOUBLE,
    np.int8: TypeTag.BYTE,
    np.int64: TypeTag.LONG,
    np.int16: TypeTag.SHORT,
    Decimal: TypeTag.DECIMAL,
    URIRef: TypeTag.ANYURI,
    Char: TypeTag.CHAR,
})


def resolve_tag(cls: Any) -> TypeTag | None:
    """Return the tag for *cls*, or ``None`` if it has no mapping.

    An exact entry wins. Otherwise the table is scanned in insertion order
    and the first entry *cls* is a subclass of is used, which is not
    necessarily the most specific one.
    """
    if not isinstance(cls, type):
        return None
    tag = DATATYPE_MAP.get(cls)
    if tag is not None:
        return tag
    for mapped, tag in DATATYPE_MAP.items():
        if issubclass(cls, mapped):
            return tag
    return None


def get_datatype_uri(cls: Any) -> URIRef | None:
    """Return the datatype IRI for *cls*, or ``None`` if it has no mapping."""
    tag = resolve_tag(cls)
    return tag.iri if tag is not None else None


def lexical_form(value: Any) -> str:
    """Serialise *value* to the lexical space of its XML-Schema datatype."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _representable(value: Any, tag: TypeTag) -> bool:
    """Whether *value* fits the value space of *tag*."""
    if tag is TypeTag.INT and isinstance(value, int):
        info = np.iinfo(np.int32)
        return info.min <= value <= info.max
    if tag is TypeTag.DECIMAL:
        return value.is_finite()
    return True


# ── Value converters ─────────────────────────────────────────────────

# rdflib parses the lexical form when a Literal is built; the converters
# only narrow its Python value to the type the tag decodes to.


def _python_value(literal: Literal) -> Any:
    value = literal.value
    if value is None:
        raise ValueError("no value for lexical form")
    return value


def _integer_converter(dtype: type[np.integer]) -> Callable[[Literal], np.integer]:
    info = np.iinfo(dtype)

    def convert(literal: Literal) -> np.integer:
        value = int(_python_value(literal))
        if not info.min <= value <= info.max:
            raise ValueError(f"out of range [{info.min}, {info.max}]")
        return dtype(value)

    return convert


def _to_datetime(literal: Literal) -> datetime:
    value = _python_value(literal)
    if not isinstance(value, datetime):
        raise ValueError("not a date/time value")
    return value


def _to_char(literal: Literal) -> Char:
    lexical = str(literal)
    return Char(lexical[0]) if lexical else Char.NUL


_CONVERTERS: Mapping[TypeTag, Callable[[Literal], Any]] = MappingProxyType({
    TypeTag.STRING: str,
    TypeTag.BOOLEAN: lambda literal: bool(_python_value(literal)),
    TypeTag.INT: _integer_converter(np.int32),
    TypeTag.BYTE: _integer_converter(np.int8),
    TypeTag.SHORT: _integer_converter(np.int16),
    TypeTag.LONG: _integer_converter(np.int64),
    TypeTag.FLOAT: lambda literal: np.float32(_python_value(literal)),
    TypeTag.DOUBLE: lambda literal: float(_python_value(literal)),
    TypeTag.DECIMAL: lambda literal: Decimal(_python_value(literal)),
    TypeTag.ANYURI: lambda literal: URIRef(str(literal)),
    TypeTag.DATETIME: _to_datetime,
    TypeTag.CHAR: _to_char,
})


# ── Mappers ──────────────────────────────────────────────────────────


class DatatypeMapper(ABC):
    """Conversion between native values and RDF literals."""

    @abstractmethod
    def decode(self, literal: Literal) -> Any:
        """Return the native value of *literal*."""

    @abstractmethod
    def encode(
        self, value: Any, factory: LiteralFactory | None = None,
    ) -> Literal | None:
        """Return a literal for *value*, or ``None`` if it cannot be mapped."""


class DefaultDatatypeMapper(DatatypeMapper):
    """XML-Schema based mapper over :data:`DATATYPE_MAP`.

    Parameters
    ----------
    factory:
        Literal factory used when :meth:`encode` is called without one.
        Defaults to a plain :class:`~rdftypemap.factory.LiteralFactory`.
    """

    def __init__(self, factory: LiteralFactory | None = None) -> None:
        self.factory = factory if factory is not None else LiteralFactory()

    def decode(self, literal: Literal) -> Any:
        """Return the native value of *literal*.

        Raises
        ------
        LiteralParseError
            If the lexical form is invalid for a known datatype.
        """
        lexical = str(literal)
        tag = TypeTag.from_iri(literal.datatype)
        if tag is None:
            if literal.datatype is not None:
                logger.debug(
                    "Unknown datatype %s, returning lexical form",
                    literal.datatype,
                )
            return lexical

        if literal.ill_typed:
            raise LiteralParseError(lexical, tag.iri, "ill-typed lexical form")

        try:
            return _CONVERTERS[tag](literal)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise LiteralParseError(lexical, tag.iri, str(exc)) from exc

    def encode(
        self, value: Any, factory: LiteralFactory | None = None,
    ) -> Literal | None:
        """Return a literal for *value*, or ``None`` if it cannot be represented.

        That is the case for unmapped types, Python ints outside the
        ``xsd:int`` range and non-finite decimals.
        """
        if factory is None:
            factory = self.factory

        if isinstance(value, datetime):
            return factory.create_datetime_literal(value)

        tag = resolve_tag(type(value))
        if tag is None:
            logger.debug("No datatype mapping for %s", qualified_name(type(value)))
            return None
        if not _representable(value, tag):
            logger.debug("%r is outside the value space of %s", value, tag.iri)
            return None
        if tag is TypeTag.STRING:
            return factory.create_literal(str(value))
        return factory.create_typed_literal(lexical_form(value), tag.iri)


_DEFAULT_MAPPER = DefaultDatatypeMapper()


def encode_value(value: Any, factory: LiteralFactory | None = None) -> Literal | None:
    """Encode *value* with the shared :class:`DefaultDatatypeMapper`."""
    return _DEFAULT_MAPPER.encode(value, factory)


def decode_literal(literal: Literal) -> Any:
    """Decode *literal* with the shared :class:`DefaultDatatypeMapper`."""
    return _DEFAULT_MAPPER.decode(literal)
