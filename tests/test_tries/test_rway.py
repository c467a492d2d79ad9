"""Tests for RWayTrie map."""

import pytest

from symtrie.tries.alphabet import Alphabet, SymbolError
from symtrie.tries.rway import RWayNode, RWayTrie


WORDS = ["she", "sells", "sea", "shells", "by", "the", "sea", "shore"]


def _build(words=WORDS, alphabet=None):
    trie = RWayTrie(alphabet)
    for i, word in enumerate(words):
        trie.put(word, i)
    return trie


def _walk(node):
    """Yield every node reachable from node."""
    stack = [node]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.extend(node.children)


def _terminal_count(trie):
    return sum(1 for node in _walk(trie._root) if node.is_terminal)


class TestRWayNode:
    """Tests for RWayNode dataclass."""

    def test_default_values(self):
        """Test default node initialization."""
        node = RWayNode(children=[None] * 4)
        assert node.children == [None] * 4
        assert node.value is None
        assert node.is_terminal is False
        assert node.is_dead() is True

    def test_terminal_is_not_dead(self):
        """Test a terminal node without children is kept."""
        node = RWayNode(children=[None] * 4, value=0, is_terminal=True)
        assert node.is_dead() is False

    def test_node_with_child_is_not_dead(self):
        """Test a non-terminal node with a child is kept."""
        node = RWayNode(children=[None, RWayNode(children=[None] * 2)])
        assert node.is_dead() is False

    def test_children_sized_by_alphabet(self):
        """Test new nodes get one slot per alphabet symbol."""
        trie = RWayTrie(Alphabet(size=16))
        trie.put("\x01", 1)
        assert len(trie._root.children) == 16


class TestRWayTrieBasic:
    """Basic map operations."""

    def test_empty_trie(self):
        """Test a new trie is empty."""
        trie = RWayTrie()
        assert len(trie) == 0
        assert trie.is_empty() is True
        assert trie.get("she") is None
        assert trie.keys() == []

    def test_len_counts_distinct_keys(self):
        """Test duplicate insert collapses to one key."""
        trie = _build()
        assert len(trie) == 7
        assert trie.is_empty() is False

    def test_get(self):
        """Test values are returned for every stored key."""
        trie = _build()
        assert trie.get("by") == 4
        assert trie.get("sea") == 6
        assert trie.get("sells") == 1
        assert trie.get("she") == 0
        assert trie.get("shells") == 3
        assert trie.get("shore") == 7
        assert trie.get("the") == 5
        assert trie.get("null") is None

    def test_get_default(self):
        """Test default is returned for missing keys."""
        trie = _build()
        assert trie.get("null", "missing") == "missing"
        assert trie.get("sh", -1) == -1

    def test_overwrite(self):
        """Test later put replaces the value without recounting."""
        trie = RWayTrie()
        trie.put("key", "a")
        trie.put("key", "b")
        assert trie.get("key") == "b"
        assert len(trie) == 1

    def test_idempotent_put(self):
        """Test same key and value twice leaves len unchanged."""
        trie = RWayTrie()
        trie.put("key", 1)
        trie.put("key", 1)
        assert len(trie) == 1

    def test_falsy_values_are_stored(self):
        """Test 0, '' and False are values, not absence."""
        trie = RWayTrie()
        trie.put("zero", 0)
        trie.put("blank", "")
        trie.put("no", False)
        assert len(trie) == 3
        assert trie.contains("zero") is True
        assert trie.get("zero") == 0
        assert trie.get("blank") == ""
        assert trie.get("no") is False

    def test_contains(self):
        """Test contains for stored keys, inner nodes and missing keys."""
        trie = _build()
        assert trie.contains("shells") is True
        assert trie.contains("shell") is False
        assert trie.contains("kare") is False

    def test_dunder_methods(self):
        """Test mapping-style access."""
        trie = RWayTrie()
        trie["she"] = 1
        assert trie["she"] == 1
        assert "she" in trie
        assert "sh" not in trie
        assert 42 not in trie
        assert list(trie) == ["she"]
        del trie["she"]
        assert "she" not in trie
        assert not trie

    def test_getitem_missing_raises(self):
        """Test missing key raises KeyError."""
        trie = _build()
        with pytest.raises(KeyError):
            trie["kare"]

    def test_delitem_missing_raises(self):
        """Test deleting a missing key by subscript raises KeyError."""
        trie = _build()
        with pytest.raises(KeyError):
            del trie["kare"]
        assert len(trie) == 7

    def test_items(self):
        """Test items pairs keys with their values."""
        trie = _build(["b", "a"])
        assert trie.items() == [("a", 1), ("b", 0)]


class TestRWayTrieDelete:
    """Tests for delete and pruning."""

    def test_delete(self):
        """Test delete removes exactly one key."""
        trie = _build()
        trie.delete("she")
        assert len(trie) == 6
        assert trie.contains("she") is False
        assert trie.get("shells") == 3

    def test_delete_missing_key(self):
        """Test deleting an absent key is a no-op."""
        trie = _build()
        trie.delete("null")
        trie.delete("shell")
        trie.delete("")
        assert len(trie) == 7

    def test_delete_on_empty_trie(self):
        """Test delete on an empty trie leaves it empty."""
        trie = RWayTrie()
        trie.delete("null")
        assert len(trie) == 0
        assert trie._root is None

    def test_put_none_deletes(self):
        """Test storing None removes the key."""
        trie = RWayTrie()
        trie.put("key", "value")
        assert trie.contains("key")
        trie.put("key", None)
        assert not trie.contains("key")
        assert len(trie) == 0

    def test_put_none_for_missing_key(self):
        """Test storing None for an absent key leaves the trie alone."""
        trie = _build()
        trie.put("kare", None)
        assert len(trie) == 7

    def test_delete_prunes_leaf_branch(self):
        """Test nodes only used by the deleted key are removed."""
        trie = RWayTrie()
        trie.put("she", 1)
        trie.put("shells", 2)
        trie.delete("shells")
        assert trie._get_node("she") is not None
        assert trie._get_node("shel") is None

    def test_delete_keeps_shared_path(self):
        """Test deleting a prefix key keeps its extensions."""
        trie = RWayTrie()
        trie.put("she", 1)
        trie.put("shells", 2)
        trie.delete("she")
        assert trie.keys() == ["shells"]
        assert trie._get_node("she") is not None

    def test_delete_all_empties_root(self):
        """Test removing every key leaves no nodes."""
        trie = _build()
        for word in set(WORDS):
            trie.delete(word)
        assert trie.is_empty()
        assert trie._root is None
        assert trie.keys() == []

    @pytest.mark.parametrize("order", [
        ["shells", "she", "sea", "sells", "shore", "by", "the"],
        ["by", "the", "she", "shells", "shore", "sells", "sea"],
    ])
    def test_no_dead_nodes_after_deletes(self, order):
        """Test every reachable node holds a key or has children."""
        trie = _build()
        for i, word in enumerate(order):
            trie.delete(word)
            assert len(trie) == 7 - i - 1
            assert _terminal_count(trie) == len(trie)
            assert not any(node.is_dead() for node in _walk(trie._root))


class TestRWayTrieQueries:
    """Tests for prefix and pattern queries."""

    def test_keys(self):
        """Test keys come back in code point order."""
        trie = _build()
        assert trie.keys() == ["by", "sea", "sells", "she", "shells", "shore", "the"]

    def test_keys_with_prefix(self):
        """Test prefix collection."""
        trie = _build()
        assert trie.keys_with_prefix("shor") == ["shore"]
        assert trie.keys_with_prefix("sh") == ["she", "shells", "shore"]
        assert trie.keys_with_prefix("she") == ["she", "shells"]
        assert trie.keys_with_prefix("kare") == []

    def test_keys_with_empty_prefix(self):
        """Test empty prefix returns every key."""
        trie = _build()
        assert trie.keys_with_prefix("") == trie.keys()

    def test_keys_that_match(self):
        """Test wildcard matching."""
        trie = _build()
        assert trie.keys_that_match(".he.l.") == ["shells"]
        assert trie.keys_that_match(".he") == ["she", "the"]
        assert trie.keys_that_match("s..") == ["sea", "she"]
        assert trie.keys_that_match(".....") == ["sells", "shore"]

    def test_keys_that_match_is_anchored(self):
        """Test matching requires the exact pattern length."""
        trie = _build()
        assert trie.keys_that_match("sh") == []
        assert trie.keys_that_match("she") == ["she"]
        assert trie.keys_that_match("........") == []

    def test_keys_that_match_empty_pattern(self):
        """Test empty pattern matches nothing."""
        trie = _build()
        assert trie.keys_that_match("") == []

    def test_longest_prefix_of(self):
        """Test longest prefix lookup."""
        trie = _build()
        assert trie.longest_prefix_of("shellsort") == "shells"
        assert trie.longest_prefix_of("shell") == "she"
        assert trie.longest_prefix_of("shells") == "shells"
        assert trie.longest_prefix_of("sh") == ""
        assert trie.longest_prefix_of("kare") == ""

    def test_longest_prefix_of_empty_query(self):
        """Test empty query yields empty string."""
        trie = _build()
        assert trie.longest_prefix_of("") == ""
        assert RWayTrie().longest_prefix_of("") == ""

    def test_longest_prefix_of_stored_keys(self):
        """Test every stored key is its own longest prefix."""
        trie = _build()
        for key in trie.keys():
            assert trie.longest_prefix_of(key) == key


class TestRWayTrieEdgeCases:
    """Edge cases for keys and alphabets."""

    def test_empty_key_ignored(self):
        """Test the empty key is never stored."""
        trie = RWayTrie()
        trie.put("", "value")
        assert trie.get("") is None
        assert trie.contains("") is False
        assert len(trie) == 0

    def test_extended_ascii_symbols(self):
        """Test symbols above 127 within the default alphabet."""
        trie = RWayTrie()
        trie.put("café", 1)
        trie.put("caf", 2)
        assert trie.get("café") == 1
        assert trie.keys_with_prefix("caf") == ["caf", "café"]

    def test_symbol_outside_alphabet_rejected(self):
        """Test put raises and leaves no partial path."""
        trie = RWayTrie(Alphabet(size=128))
        with pytest.raises(SymbolError):
            trie.put("café", 1)
        assert len(trie) == 0
        assert trie._root is None

    def test_lookups_outside_alphabet(self):
        """Test reads never raise for symbols outside the alphabet."""
        trie = RWayTrie(Alphabet(size=128))
        trie.put("caf", 1)
        assert trie.get("café") is None
        assert trie.contains("café") is False
        assert trie.longest_prefix_of("caféine") == "caf"
        assert trie.keys_with_prefix("café") == []
        assert trie.keys_that_match("café") == []
        trie.delete("café")
        assert len(trie) == 1

    def test_custom_wildcard(self):
        """Test a configured wildcard replaces '.'."""
        trie = _build(alphabet=Alphabet(wildcard='?'))
        assert trie.keys_that_match("?he") == ["she", "the"]
        assert trie.keys_that_match(".he") == []

    def test_literal_dot_key(self):
        """Test '.' can be stored and is matched by the wildcard."""
        trie = RWayTrie()
        trie.put("a.b", 1)
        trie.put("axb", 2)
        assert trie.keys_that_match("a.b") == ["a.b", "axb"]
        assert trie.get("a.b") == 1


LONG_KEY = "a" * 5000


class TestRWayTrieLongKeys:
    """Tests for keys deeper than the interpreter's recursion limit."""

    def test_long_key_queries(self):
        """Test put, get and every query on a 5000 symbol key."""
        trie = RWayTrie()
        trie.put(LONG_KEY, 1)
        trie.put(LONG_KEY[:10], 2)
        assert len(trie) == 2
        assert trie.get(LONG_KEY) == 1
        assert trie.keys() == [LONG_KEY[:10], LONG_KEY]
        assert trie.keys_with_prefix("a" * 4000) == [LONG_KEY]
        assert trie.keys_that_match("." * 5000) == [LONG_KEY]
        assert trie.longest_prefix_of(LONG_KEY + "b") == LONG_KEY

    def test_long_key_delete_prunes(self):
        """Test deleting a long key unlinks its whole branch."""
        trie = RWayTrie()
        trie.put(LONG_KEY, 1)
        trie.put("b", 2)
        trie.delete(LONG_KEY)
        assert len(trie) == 1
        assert trie.get(LONG_KEY) is None
        assert trie._get_node("a") is None
        assert trie.keys() == ["b"]
        assert not any(node.is_dead() for node in _walk(trie._root))

    def test_long_key_delete_keeps_prefix_key(self):
        """Test pruning stops at the node of a shorter stored key."""
        trie = RWayTrie()
        trie.put(LONG_KEY, 1)
        trie.put(LONG_KEY[:10], 2)
        trie.delete(LONG_KEY)
        assert trie.keys() == [LONG_KEY[:10]]
        assert trie._get_node(LONG_KEY[:11]) is None
