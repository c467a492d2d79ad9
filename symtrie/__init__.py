"""String-keyed tries with prefix, longest-prefix and wildcard queries."""

from .tries import (
    Alphabet,
    SymbolError,
    EXTENDED_ASCII,
    StringTrie,
    RWayTrie,
    RWayTrieSet,
    TernarySearchTrie,
)

__version__ = '0.1.0'

__all__ = [
    'Alphabet',
    'SymbolError',
    'EXTENDED_ASCII',
    'StringTrie',
    'RWayTrie',
    'RWayTrieSet',
    'TernarySearchTrie',
]
