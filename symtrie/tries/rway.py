"""R-way tries: direct-indexed maps and sets over string keys.

Every node owns one child slot per alphabet symbol, so descending one level
is a list index rather than a search. Lookups cost O(k) for a key of
length k regardless of how many keys are stored, at the price of
``alphabet.size`` slots per node. For sparse alphabets prefer
:class:`~symtrie.tries.ternary.TernarySearchTrie`.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from .alphabet import Alphabet, EXTENDED_ASCII

T = TypeVar('T')


@dataclass
class RWayNode(Generic[T]):
    """Node in an R-way trie.

    Attributes:
        children: One slot per alphabet symbol, None where no child exists.
        value: Associated value if this node is a terminal.
        is_terminal: Whether a stored key ends at this node.
    """
    children: List[Optional['RWayNode[T]']]
    value: Optional[T] = None
    is_terminal: bool = False

    def is_dead(self) -> bool:
        """Return True if the node carries no key and has no children."""
        if self.is_terminal:
            return False
        return all(child is None for child in self.children)


class _RWayTrieBase(Generic[T]):
    """Traversal and pruning shared by the R-way map and set."""

    def __init__(self, alphabet: Optional[Alphabet] = None):
        self._alphabet = alphabet or EXTENDED_ASCII
        self._root: Optional[RWayNode[T]] = None
        self._length = 0

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def _new_node(self) -> RWayNode[T]:
        return RWayNode(children=[None] * self._alphabet.size)

    def _put(self, key: str, value: T) -> None:
        """Store value at the node for key, creating missing nodes.

        Callers validate key first so a bad symbol never leaves a
        partially built path behind.
        """
        if self._root is None:
            self._root = self._new_node()
        node = self._root
        for symbol in key:
            index = self._alphabet.index(symbol)
            child = node.children[index]
            if child is None:
                child = self._new_node()
                node.children[index] = child
            node = child
        if not node.is_terminal:
            self._length += 1
        node.value = value
        node.is_terminal = True

    def _get_node(self, key: str) -> Optional[RWayNode[T]]:
        """Return the node reached by following key, or None."""
        node = self._root
        for symbol in key:
            if node is None:
                return None
            index = self._alphabet.find(symbol)
            if index is None:
                return None
            node = node.children[index]
        return node

    def delete(self, key: str) -> None:
        """Remove key if present, pruning nodes left without keys."""
        node = self._root
        path: List[Tuple[RWayNode[T], int]] = []  # (parent, child index)
        for symbol in key:
            if node is None:
                return
            index = self._alphabet.find(symbol)
            if index is None:
                return
            path.append((node, index))
            node = node.children[index]
        if node is None:
            return

        if node.is_terminal:
            self._length -= 1
        node.value = None
        node.is_terminal = False

        # Unlink nodes bottom-up while they hold no keys
        while path and node.is_dead():
            parent, index = path.pop()
            parent.children[index] = None
            node = parent
        if self._root is not None and self._root.is_dead():
            self._root = None

    def contains(self, key: str) -> bool:
        node = self._get_node(key)
        return node is not None and node.is_terminal

    def is_empty(self) -> bool:
        return self._length == 0

    def longest_prefix_of(self, query: str) -> str:
        """Return the longest stored key that is a prefix of query.

        Args:
            query: String whose prefixes are looked up.

        Returns:
            The longest matching key, or '' if no stored key prefixes query.

        Example:
            With "she" and "shells" stored, "shellsort" yields "shells"
            and "shell" yields "she".
        """
        node = self._root
        length = 0
        depth = 0
        while node is not None:
            if node.is_terminal:
                length = depth
            if depth == len(query):
                break
            index = self._alphabet.find(query[depth])
            if index is None:
                break
            node = node.children[index]
            depth += 1
        return query[:length]

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """Return all stored keys starting with prefix.

        Keys are produced by a pre-order walk visiting child slots in
        ascending code point order, so a key precedes its extensions.
        """
        results: List[str] = []
        node = self._get_node(prefix)
        if node is None:
            return results

        path = list(prefix)
        # Entries are (node, depth, symbol on the edge into node)
        stack: List[Tuple[RWayNode[T], int, Optional[str]]] = [(node, len(path), None)]
        while stack:
            node, depth, symbol = stack.pop()
            if symbol is not None:
                del path[depth - 1:]
                path.append(symbol)
            if node.is_terminal:
                results.append(''.join(path))
            self._push_children(stack, node, depth)
        return results

    def _push_children(self, stack: list, node: RWayNode[T], depth: int) -> None:
        """Push live children so the lowest symbol is popped first."""
        children = node.children
        for index in range(len(children) - 1, -1, -1):
            child = children[index]
            if child is not None:
                stack.append((child, depth + 1, self._alphabet.symbol(index)))

    def keys_that_match(self, pattern: str) -> List[str]:
        """Return stored keys of len(pattern) matching pattern.

        The alphabet's wildcard matches any symbol; every other pattern
        symbol must match exactly.
        """
        results: List[str] = []
        if self._root is None:
            return results

        path: List[str] = []
        stack: List[Tuple[RWayNode[T], int, Optional[str]]] = [(self._root, 0, None)]
        while stack:
            node, depth, symbol = stack.pop()
            if symbol is not None:
                del path[depth - 1:]
                path.append(symbol)
            if depth == len(pattern):
                if node.is_terminal:
                    results.append(''.join(path))
                continue

            wanted = pattern[depth]
            if self._alphabet.is_wildcard(wanted):
                self._push_children(stack, node, depth)
                continue
            index = self._alphabet.find(wanted)
            if index is None:
                continue
            child = node.children[index]
            if child is not None:
                stack.append((child, depth + 1, wanted))
        return results

    def keys(self) -> List[str]:
        return self.keys_with_prefix('')

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


class RWayTrie(_RWayTrieBase[T]):
    """String-keyed map backed by an R-way trie.

    Storing None deletes a key; any other value, including falsy ones
    such as 0 or '', is stored as is.

    Example:
        trie = RWayTrie()
        trie.put("she", 0)
        trie.put("shells", 3)

        trie.get("she")                      # Returns 0
        trie.longest_prefix_of("shellsort")  # Returns "shells"
        trie.keys_that_match(".he")          # Returns ["she"]
    """

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
        self._put(key, value)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        node = self._get_node(key)
        if node is None or not node.is_terminal:
            return default
        return node.value

    def items(self) -> List[Tuple[str, T]]:
        """Return (key, value) pairs in keys() order."""
        return [(key, self.get(key)) for key in self.keys()]

    def __getitem__(self, key: str) -> T:
        node = self._get_node(key)
        if node is None or not node.is_terminal:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: str, value: Optional[T]) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.contains(key):
            raise KeyError(key)
        self.delete(key)


class RWayTrieSet(_RWayTrieBase[bool]):
    """Set of strings backed by an R-way trie.

    Nodes carry only a terminal flag. Putting a false or None flag removes
    the key, mirroring how the map treats None.
    """

    def put(self, key: str, present: Optional[bool] = True) -> None:
        """Mark key as present or absent.

        Args:
            key: Non-empty key; an empty key is silently ignored.
            present: True to add the key, False or None to remove it.

        Raises:
            SymbolError: If a key being added contains a symbol outside
                the alphabet.
        """
        if not key:
            return
        if not present:
            self.delete(key)
            return
        self._alphabet.validate(key)
        self._put(key, True)

    def get(self, key: str, default: Optional[Any] = False) -> Any:
        """Return True for a member, otherwise default."""
        if self.contains(key):
            return True
        return default

    def add(self, key: str) -> None:
        self.put(key, True)

    def discard(self, key: str) -> None:
        self.delete(key)
