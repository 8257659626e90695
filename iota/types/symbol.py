"""Interned identifier type."""

from __future__ import annotations
import sys


class Symbol:
    """An identifier resolved against an Environment when evaluated.

    Symbols compare by name. Names are interned, so equal symbols share one
    string object and hashing stays cheap for frame lookups.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
