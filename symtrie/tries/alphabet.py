"""Alphabet configuration shared by the trie engines.

An alphabet bounds the symbols a key may contain. R-way tries allocate one
child slot per symbol, so the alphabet size is also their branching factor.
"""

from dataclasses import dataclass
from typing import Optional

MAX_ALPHABET_SIZE = 0x110000


class SymbolError(ValueError):
    """A key contains a symbol outside the configured alphabet."""
    pass


@dataclass(frozen=True)
class Alphabet:
    """Bounded alphabet of single-character symbols.

    Symbols are indexed by code point, so an alphabet of size 256 covers
    extended ASCII (code points 0-255).

    Attributes:
        size: Number of symbols; valid code points are ``0..size-1``.
        wildcard: Pattern symbol matching any single symbol.
    """
    size: int = 256
    wildcard: str = '.'

    def __post_init__(self):
        if not isinstance(self.size, int) or isinstance(self.size, bool):
            raise ValueError(f"Alphabet size must be an integer, got {self.size!r}")
        if not 1 <= self.size <= MAX_ALPHABET_SIZE:
            raise ValueError(
                f"Alphabet size must be between 1 and {MAX_ALPHABET_SIZE}, got {self.size}"
            )
        if not isinstance(self.wildcard, str) or len(self.wildcard) != 1:
            raise ValueError(f"Wildcard must be a single character, got {self.wildcard!r}")

    def index(self, symbol: str) -> int:
        """Return the slot index of a symbol.

        Raises:
            SymbolError: If the symbol is outside the alphabet.
        """
        code = ord(symbol)
        if code >= self.size:
            raise SymbolError(
                f"Symbol {symbol!r} (code point {code}) is outside "
                f"the alphabet of size {self.size}"
            )
        return code

    def find(self, symbol: str) -> Optional[int]:
        """Return the slot index of a symbol, or None if it is out of range."""
        code = ord(symbol)
        return code if code < self.size else None

    def symbol(self, index: int) -> str:
        """Return the symbol stored at a slot index."""
        return chr(index)

    def validate(self, key: str) -> None:
        """Check every symbol of key.

        Raises:
            SymbolError: On the first symbol outside the alphabet.
        """
        for symbol in key:
            self.index(symbol)

    def is_wildcard(self, symbol: str) -> bool:
        return symbol == self.wildcard


EXTENDED_ASCII = Alphabet()
