"""
Pydantic models for machine-readable output.

Used by the command line interface to emit JSON descriptions of the
mapping table and of decoded literals.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DatatypeEntry(BaseModel):
    """One row of the datatype mapping table."""

    python_type: str = Field(..., description="Dotted name of the Python class")
    tag: str = Field(..., description="Type tag name")
    datatype: str = Field(..., description="Datatype IRI")


class DecodedValue(BaseModel):
    """The result of decoding a single literal."""

    lexical: str = Field(..., description="Lexical form of the literal")
    datatype: Optional[str] = Field(None, description="Datatype IRI, if any")
    python_type: str = Field(..., description="Dotted name of the decoded value's class")
    value: str = Field(..., description="repr() of the decoded value")
