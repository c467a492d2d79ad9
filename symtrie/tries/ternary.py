"""Ternary search trie: a string-keyed map with three-way branching.

Each node holds a single symbol and three child slots. ``less`` and
``greater`` lead to sibling symbols at the same key position, ``equal``
advances to the next position. Space grows with the number of distinct
symbols actually used rather than with the alphabet size, which makes
this the better choice for sparse alphabets.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .alphabet import Alphabet, EXTENDED_ASCII

T = TypeVar('T')


@dataclass
class TernaryNode(Generic[T]):
    """Node in a ternary search trie.

    Attributes:
        symbol: Symbol compared against the key at this node.
        less: Subtrie of sibling symbols ordered before symbol.
        equal: Subtrie for the key position after symbol.
        greater: Subtrie of sibling symbols ordered after symbol.
        value: Associated value if this node is a terminal.
        is_terminal: Whether a stored key ends at this node.
    """
    symbol: str
    less: Optional['TernaryNode[T]'] = None
    equal: Optional['TernaryNode[T]'] = None
    greater: Optional['TernaryNode[T]'] = None
    value: Optional[T] = None
    is_terminal: bool = False


def _merge_siblings(
    less: Optional[TernaryNode[T]],
    greater: Optional[TernaryNode[T]],
) -> Optional[TernaryNode[T]]:
    """Join two sibling subtries whose symbols are all ordered less < greater."""
    if less is None:
        return greater
    if greater is None:
        return less
    node = less
    while node.greater is not None:
        node = node.greater
    node.greater = greater
    return less


class TernarySearchTrie(Generic[T]):
    """String-keyed map backed by a ternary search trie.

    Keys come back from keys() in ascending code point order, unlike the
    R-way tries whose walk is pre-order.

    Example:
        trie = TernarySearchTrie()
        trie.put("she", 0)
        trie.put("sea", 6)

        trie.keys()                 # Returns ["sea", "she"]
        trie.keys_that_match("s.a") # Returns ["sea"]
    """

    def __init__(self, alphabet: Optional[Alphabet] = None):
        self._alphabet = alphabet or EXTENDED_ASCII
        self._root: Optional[TernaryNode[T]] = None
        self._length = 0

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def put(self, key: str, value: Optional[T]) -> None:
        """Associate value with key.

        Args:
            key: Non-empty key; an empty key is silently ignored.
            value: Value to store. None deletes the key.

        Raises:
            SymbolError: If key contains a symbol outside the alphabet.
        """
        if not key:
            return
        if value is None:
            self.delete(key)
            return
        self._alphabet.validate(key)
        is_new = not self.contains(key)
        self._put(key, value)
        if is_new:
            self._length += 1

    def _put(self, key: str, value: T) -> None:
        # New nodes hold the symbol being compared when the slot was empty
        if self._root is None:
            self._root = TernaryNode(key[0])
        node = self._root
        depth = 0
        while True:
            symbol = key[depth]
            if symbol < node.symbol:
                if node.less is None:
                    node.less = TernaryNode(symbol)
                node = node.less
            elif symbol > node.symbol:
                if node.greater is None:
                    node.greater = TernaryNode(symbol)
                node = node.greater
            elif depth < len(key) - 1:
                depth += 1
                if node.equal is None:
                    node.equal = TernaryNode(key[depth])
                node = node.equal
            else:
                break
        node.value = value
        node.is_terminal = True

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        node = self._get_node(self._root, key)
        if node is None or not node.is_terminal:
            return default
        return node.value

    def _get_node(self, node: Optional[TernaryNode[T]], key: str) -> Optional[TernaryNode[T]]:
        """Return the node holding the last symbol of key, or None."""
        if not key:
            return None
        depth = 0
        while node is not None:
            symbol = key[depth]
            if symbol < node.symbol:
                node = node.less
            elif symbol > node.symbol:
                node = node.greater
            elif depth < len(key) - 1:
                node = node.equal
                depth += 1
            else:
                return node
        return None

    def delete(self, key: str) -> None:
        """Remove key if present.

        Nodes left without a key and without an ``equal`` subtrie are
        unlinked, and their ``less``/``greater`` siblings are spliced into
        the freed slot so the trie keeps no dead branches.
        """
        if not key:
            return
        node = self._root
        path: List[Tuple[TernaryNode[T], str]] = []  # (parent, slot name)
        depth = 0
        while node is not None:
            symbol = key[depth]
            if symbol < node.symbol:
                path.append((node, 'less'))
                node = node.less
            elif symbol > node.symbol:
                path.append((node, 'greater'))
                node = node.greater
            elif depth < len(key) - 1:
                path.append((node, 'equal'))
                node = node.equal
                depth += 1
            else:
                break
        if node is None:
            return

        if node.is_terminal:
            self._length -= 1
        node.value = None
        node.is_terminal = False

        # A node survives while it ends a key or leads to longer keys
        while not node.is_terminal and node.equal is None:
            replacement = _merge_siblings(node.less, node.greater)
            if not path:
                self._root = replacement
                return
            parent, slot = path.pop()
            setattr(parent, slot, replacement)
            node = parent

    def contains(self, key: str) -> bool:
        node = self._get_node(self._root, key)
        return node is not None and node.is_terminal

    def is_empty(self) -> bool:
        return self._length == 0

    def longest_prefix_of(self, query: str) -> str:
        """Return the longest stored key that is a prefix of query, or ''."""
        length = 0
        depth = 0
        node = self._root
        while node is not None and depth < len(query):
            symbol = query[depth]
            if symbol < node.symbol:
                node = node.less
            elif symbol > node.symbol:
                node = node.greater
            else:
                depth += 1
                if node.is_terminal:
                    length = depth
                node = node.equal
        return query[:length]

    def keys(self) -> List[str]:
        """Return all stored keys in ascending code point order."""
        results: List[str] = []
        self._collect(self._root, [], results)
        return results

    def keys_with_prefix(self, prefix: str) -> List[str]:
        if not prefix:
            return self.keys()
        results: List[str] = []
        node = self._get_node(self._root, prefix)
        if node is None:
            return results
        if node.is_terminal:
            results.append(prefix)
        self._collect(node.equal, list(prefix), results)
        return results

    def _collect(self, node: Optional[TernaryNode[T]], path: List[str], results: List[str]) -> None:
        """Append keys under node to results, in-order: less, self, equal, greater.

        path holds the symbols leading to node. A node is expanded once to
        schedule its branches and visited again to place its own symbol.
        """
        stack = [(node, len(path), False)]
        while stack:
            node, depth, expanded = stack.pop()
            if node is None:
                continue
            if expanded:
                del path[depth:]
                path.append(node.symbol)
                if node.is_terminal:
                    results.append(''.join(path))
                continue
            stack.append((node.greater, depth, False))
            stack.append((node.equal, depth + 1, False))
            stack.append((node, depth, True))
            stack.append((node.less, depth, False))

    def keys_that_match(self, pattern: str) -> List[str]:
        """Return stored keys of len(pattern) matching pattern.

        The alphabet's wildcard matches any symbol. Concrete pattern
        symbols prune the ``less``/``greater`` branches that cannot match.
        """
        results: List[str] = []
        if not pattern:
            return results

        path: List[str] = []
        stack = [(self._root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if node is None:
                continue
            if expanded:
                del path[depth:]
                path.append(node.symbol)
                if depth == len(pattern) - 1:
                    if node.is_terminal:
                        results.append(''.join(path))
                else:
                    stack.append((node.equal, depth + 1, False))
                continue

            symbol = pattern[depth]
            wildcard = self._alphabet.is_wildcard(symbol)
            if wildcard or symbol > node.symbol:
                stack.append((node.greater, depth, False))
            if wildcard or symbol == node.symbol:
                stack.append((node, depth, True))
            if wildcard or symbol < node.symbol:
                stack.append((node.less, depth, False))
        return results

    def items(self) -> List[Tuple[str, T]]:
        """Return (key, value) pairs in keys() order."""
        return [(key, self.get(key)) for key in self.keys()]

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, key: str) -> T:
        node = self._get_node(self._root, key)
        if node is None or not node.is_terminal:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: str, value: Optional[T]) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.contains(key):
            raise KeyError(key)
        self.delete(key)
