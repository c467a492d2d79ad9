"""Command-line queries against a trie definition file.

This module provides the main entry point for loading a trie from YAML and
running prefix, pattern and lookup queries on it.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from symtrie.tries import SymbolError

from .loader import load_trie
from .parser import ConfigParseError

logger = logging.getLogger(__name__)


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point for querying a trie.

    Usage:
        python -m symtrie.config [options] [yaml_file]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Query a trie loaded from a YAML definition',
        prog='python -m symtrie.config',
    )
    parser.add_argument(
        'yaml_file',
        nargs='?',
        default='trie.yaml',
        help='Path to the YAML file (default: trie.yaml)',
    )
    query = parser.add_mutually_exclusive_group()
    query.add_argument(
        '--prefix',
        default=None,
        help='Print keys starting with PREFIX',
    )
    query.add_argument(
        '--match',
        default=None,
        metavar='PATTERN',
        help='Print keys matching PATTERN (wildcard matches any symbol)',
    )
    query.add_argument(
        '--longest',
        default=None,
        metavar='QUERY',
        help='Print the longest stored key that is a prefix of QUERY',
    )
    query.add_argument(
        '--get',
        default=None,
        metavar='KEY',
        help='Print the value stored for KEY',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    parsed = parser.parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        trie = load_trie(Path(parsed.yaml_file))
        logger.debug("Loaded %d key(s) from %s", len(trie), parsed.yaml_file)

        if parsed.get is not None:
            if not trie.contains(parsed.get):
                print(f"Error: key not found: {parsed.get}", file=sys.stderr)
                return 1
            print(trie.get(parsed.get))
            return 0

        if parsed.longest is not None:
            print(trie.longest_prefix_of(parsed.longest))
            return 0

        if parsed.prefix is not None:
            keys = trie.keys_with_prefix(parsed.prefix)
        elif parsed.match is not None:
            keys = trie.keys_that_match(parsed.match)
        else:
            keys = trie.keys()

        for key in keys:
            print(key)
        return 0

    except (FileNotFoundError, ConfigParseError, SymbolError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
