"""Command line interface for :mod:`rdftypemap`."""

import json
import logging

import click
from rdflib import Literal, URIRef
from rdflib.namespace import XSD

from .config import Config
from .mapper import (
    DATATYPE_MAP,
    LiteralParseError,
    decode_literal,
    encode_value,
    resolve_tag,
)
from .models import DatatypeEntry, DecodedValue
from .utils import compact_uri, expand_curie, import_object, qualified_name
from .version import VERSION
from .vocab import TYPEMAP

__all__ = [
    "main",
]

PREFIXES = {
    "xsd": str(XSD),
    "rdftypemap": str(TYPEMAP),
}


@click.group()
@click.version_option(VERSION)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool) -> None:
    r"""rdftypemap - map Python values to typed RDF literals and back.

    Inspect the datatype table, resolve Python classes to XML-Schema
    datatypes, and encode or decode single literals.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,
        )
        logging.getLogger("rdftypemap").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(
            level=Config.LOG_LEVEL, format="%(levelname)s: %(message)s", force=True,
        )


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def datatypes(as_json: bool) -> None:
    """List the datatype table in lookup order.

    Example:
      rdftypemap datatypes --json
    """
    entries = [
        DatatypeEntry(
            python_type=qualified_name(cls),
            tag=tag.name,
            datatype=str(tag.iri),
        )
        for cls, tag in DATATYPE_MAP.items()
    ]

    if as_json:
        click.echo(json.dumps([e.model_dump() for e in entries], indent=2))
        return

    width = max(len(e.python_type) for e in entries)
    for e in entries:
        click.echo(f"{e.python_type:<{width}}  {compact_uri(e.datatype, PREFIXES)}")


@main.command()
@click.argument("python_type")
def resolve(python_type: str) -> None:
    """Show the datatype a Python class is written with.

    PYTHON_TYPE is a dotted path such as ``numpy.int8``; builtins may be
    given without a module (``int``, ``str``).
    """
    try:
        cls = import_object(python_type)
    except ImportError as exc:
        raise click.ClickException(str(exc)) from exc

    tag = resolve_tag(cls)
    if tag is None:
        click.echo(f"No datatype mapping for {python_type}", err=True)
        raise SystemExit(1)
    click.echo(f"{tag.name} {compact_uri(str(tag.iri), PREFIXES)}")


@main.command()
@click.argument("value")
def encode(value: str) -> None:
    """Encode VALUE as an RDF literal and print it in N3 form.

    VALUE is parsed as JSON first, so ``42`` is an integer, ``true`` a
    boolean and ``1.5`` a float; anything else is taken as a string.

    Example:
      rdftypemap encode 42
    """
    try:
        native = json.loads(value)
    except json.JSONDecodeError:
        native = value

    literal = encode_value(native)
    if literal is None:
        click.echo(f"Cannot represent {native!r} as an RDF literal", err=True)
        raise SystemExit(1)
    click.echo(literal.n3())


@main.command()
@click.argument("lexical")
@click.option(
    "--datatype",
    "-d",
    default=None,
    help="Datatype IRI or CURIE (e.g. xsd:int); omit for a plain literal",
)
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def decode(lexical: str, datatype: str, as_json: bool) -> None:
    """Decode a literal with the given LEXICAL form.

    Example:
      rdftypemap decode 42 --datatype xsd:byte
    """
    dt = URIRef(expand_curie(datatype, PREFIXES)) if datatype else None
    literal = Literal(lexical, datatype=dt)

    try:
        value = decode_literal(literal)
    except LiteralParseError as exc:
        raise click.ClickException(
            f"Cannot parse {lexical!r} as <{exc.datatype}>: {exc.reason}"
        ) from exc

    if as_json:
        result = DecodedValue(
            lexical=lexical,
            datatype=str(dt) if dt is not None else None,
            python_type=qualified_name(type(value)),
            value=repr(value),
        )
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(repr(value))


if __name__ == "__main__":
    main()
