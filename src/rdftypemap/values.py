"""Native value types that have no direct Python builtin."""

from __future__ import annotations


class Char(str):
    """A string of exactly one character.

    Python has no character type, so ``Char`` marks values that should be
    written with the custom character datatype instead of ``xsd:string``.
    """

    __slots__ = ()

    NUL: Char

    def __new__(cls, value: str = "\x00") -> Char:
        if len(value) != 1:
            raise ValueError(
                f"Char requires exactly one character, got {len(value)}"
            )
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Char({str.__repr__(self)})"


Char.NUL = Char("\x00")
