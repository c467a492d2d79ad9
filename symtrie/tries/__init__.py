"""Trie engines for string-keyed maps and sets.

Three containers share one operation set (see StringTrie):

- RWayTrie: map with one child slot per alphabet symbol, O(k) lookups
- RWayTrieSet: the same structure storing only membership
- TernarySearchTrie: map with less/equal/greater branching, compact for
  sparse alphabets and ordered key enumeration

Example:
    from symtrie.tries import TernarySearchTrie

    trie = TernarySearchTrie()
    for i, word in enumerate(["she", "sells", "sea", "shells"]):
        trie.put(word, i)

    trie.keys_with_prefix("sh")         # Returns ["she", "shells"]
    trie.longest_prefix_of("shellsort") # Returns "shells"
"""

from .alphabet import Alphabet, SymbolError, EXTENDED_ASCII
from .protocols import StringTrie
from .rway import RWayNode, RWayTrie, RWayTrieSet
from .ternary import TernaryNode, TernarySearchTrie

__all__ = [
    # Configuration
    'Alphabet',
    'SymbolError',
    'EXTENDED_ASCII',
    # Protocols
    'StringTrie',
    # Data structures
    'RWayNode',
    'RWayTrie',
    'RWayTrieSet',
    'TernaryNode',
    'TernarySearchTrie',
]
