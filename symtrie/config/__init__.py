"""YAML-based trie definitions.

This module loads trie contents and settings from YAML files and exposes a
small command-line tool for querying them.

Example trie.yaml:
    config:
      kind: rway
      alphabet_size: 128

    keys:
      - she
      - sells
      - shells

Usage:
    from symtrie.config import load_trie
    trie = load_trie('trie.yaml')

CLI:
    python -m symtrie.config trie.yaml --prefix sh
"""

from .parser import (
    parse_trie_file,
    parse_trie_string,
    TrieDefinition,
    ConfigParseError,
)
from .loader import make_trie, build_trie, load_trie
from .runner import main

__all__ = [
    'parse_trie_file',
    'parse_trie_string',
    'TrieDefinition',
    'ConfigParseError',
    'make_trie',
    'build_trie',
    'load_trie',
    'main',
]
