"""Literal construction on top of :class:`rdflib.Literal`."""

from __future__ import annotations

from datetime import datetime

from rdflib import Literal, URIRef


class LiteralFactory:
    """Create RDF literals.

    The mapper never calls :class:`rdflib.Literal` directly, so a caller
    can pass a subclass that builds literals differently (for example
    normalising date/time values to UTC before serialisation).
    """

    def create_literal(self, lexical: str) -> Literal:
        """Create a plain literal without a datatype."""
        return Literal(lexical)

    def create_typed_literal(self, lexical: str, datatype: URIRef) -> Literal:
        """Create a literal tagged with *datatype*."""
        return Literal(lexical, datatype=datatype)

    def create_datetime_literal(self, value: datetime) -> Literal:
        """Create an ``xsd:dateTime`` literal in rdflib's canonical form."""
        return Literal(value)
