"""Build trie containers from parsed definitions."""

import logging
from pathlib import Path
from typing import Optional, Union

from symtrie.tries import Alphabet, RWayTrie, RWayTrieSet, TernarySearchTrie

from .parser import TrieDefinition, parse_trie_file

logger = logging.getLogger(__name__)

_FACTORIES = {
    'rway': RWayTrie,
    'rway-set': RWayTrieSet,
    'ternary': TernarySearchTrie,
}


def make_trie(kind: str = 'ternary', alphabet: Optional[Alphabet] = None):
    """Create an empty trie of the given kind.

    Args:
        kind: One of 'rway', 'rway-set' or 'ternary'.
        alphabet: Alphabet for the new trie (extended ASCII if omitted).

    Raises:
        ValueError: If kind is unknown.
    """
    try:
        factory = _FACTORIES[kind]
    except KeyError:
        raise ValueError(f"Unknown trie kind: {kind}")
    return factory(alphabet)


def build_trie(definition: TrieDefinition):
    """Create the trie a definition describes and insert its entries.

    Set tries record membership only; entry values are ignored.

    Raises:
        SymbolError: If an entry key falls outside the configured alphabet.
    """
    config = definition.config
    alphabet = Alphabet(
        size=config.get('alphabet_size', 256),
        wildcard=config.get('wildcard', '.'),
    )
    trie = make_trie(definition.kind, alphabet)

    for key, value in definition.entries:
        if isinstance(trie, RWayTrieSet):
            trie.add(key)
        else:
            trie.put(key, value)

    logger.debug(
        "Built %s trie with %d key(s) from %d entries",
        definition.kind, len(trie), len(definition.entries),
    )
    return trie


def load_trie(path: Union[str, Path]):
    """Parse a definition file and build its trie."""
    return build_trie(parse_trie_file(path))
