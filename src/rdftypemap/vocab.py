"""Datatype vocabulary.

Standard XML-Schema datatypes come from :data:`rdflib.namespace.XSD`;
the character datatype has no XML-Schema counterpart and lives in the
project namespace :data:`TYPEMAP`.
"""

from __future__ import annotations

from enum import Enum

from rdflib import Namespace, URIRef
from rdflib.namespace import XSD

from rdftypemap.config import Config

__all__ = [
    "CHAR",
    "TYPEMAP",
    "TypeTag",
]

CHAR = URIRef(Config.CHAR_DATATYPE)

# Namespace containing CHAR, e.g. "http://rdftypemap.org/datatype#"
TYPEMAP = Namespace(CHAR[: max(CHAR.rfind("#"), CHAR.rfind("/")) + 1])


class TypeTag(Enum):
    """Closed set of datatypes understood by the mapper."""

    STRING = XSD.string
    BOOLEAN = XSD.boolean
    INT = XSD.int
    BYTE = XSD.byte
    SHORT = XSD.short
    LONG = XSD.long
    FLOAT = XSD.float
    DOUBLE = XSD.double
    DECIMAL = XSD.decimal
    ANYURI = XSD.anyURI
    DATETIME = XSD.dateTime
    CHAR = CHAR

    @property
    def iri(self) -> URIRef:
        return self.value

    @classmethod
    def from_iri(cls, iri: str | None) -> TypeTag | None:
        """Return the tag for *iri*, or ``None`` if it is not one of ours."""
        if iri is None:
            return None
        return _BY_IRI.get(URIRef(iri))


_BY_IRI = {tag.value: tag for tag in TypeTag}
