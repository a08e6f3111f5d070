"""rdftypemap: map native Python values to typed RDF literals and back.

Main modules:
- mapper: DatatypeMapper interface, DefaultDatatypeMapper and the datatype table
- vocab: TypeTag enumeration and the custom datatype namespace
- values: Char, the single-character value type
- factory: LiteralFactory used to construct rdflib literals
"""

from .factory import LiteralFactory
from .mapper import (
    DATATYPE_MAP,
    DatatypeMapper,
    DefaultDatatypeMapper,
    LiteralParseError,
    decode_literal,
    encode_value,
    get_datatype_uri,
    resolve_tag,
)
from .values import Char
from .version import VERSION
from .vocab import CHAR, TYPEMAP, TypeTag

__all__ = [
    "CHAR",
    "Char",
    "DATATYPE_MAP",
    "DatatypeMapper",
    "DefaultDatatypeMapper",
    "LiteralFactory",
    "LiteralParseError",
    "TYPEMAP",
    "TypeTag",
    "VERSION",
    "decode_literal",
    "encode_value",
    "get_datatype_uri",
    "resolve_tag",
]
