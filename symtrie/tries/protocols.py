"""Protocols for the trie containers.

This module defines the operation set every string-keyed trie in the
package supports, so callers can pick an engine by its density/memory
trade-off without changing the code that queries it.
"""

from typing import Any, Iterator, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class StringTrie(Protocol):
    """Operation set shared by every trie map.

    Keys are non-empty strings over a bounded alphabet. Storing ``None``
    removes a key, so ``None`` is never a stored value.
    """

    def put(self, key: str, value: Any) -> None:
        """Associate value with key, replacing any previous value.

        Empty keys are ignored. A value of None deletes the key.
        """
        ...

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the value for key, or default if key is not stored."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present; absent keys are ignored."""
        ...

    def contains(self, key: str) -> bool:
        ...

    def is_empty(self) -> bool:
        ...

    def longest_prefix_of(self, query: str) -> str:
        """Return the longest stored key that is a prefix of query.

        Returns the empty string when no stored key prefixes query.
        """
        ...

    def keys_with_prefix(self, prefix: str) -> List[str]:
        ...

    def keys_that_match(self, pattern: str) -> List[str]:
        """Return stored keys matching pattern position by position.

        The alphabet's wildcard symbol matches any single symbol. Matching
        is anchored at both ends, so results have exactly len(pattern)
        symbols.
        """
        ...

    def keys(self) -> List[str]:
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def __iter__(self) -> Iterator[str]:
        ...
