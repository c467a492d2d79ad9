"""CLI entry point for symtrie.config module.

Usage:
    python -m symtrie.config [options] [yaml_file]

Example:
    python -m symtrie.config words.yaml
    python -m symtrie.config --prefix sh words.yaml
    python -m symtrie.config --match .he.l. words.yaml
    python -m symtrie.config --longest shellsort words.yaml
    python -m symtrie.config --get sea words.yaml
"""

import sys

from .runner import main

if __name__ == '__main__':
    sys.exit(main())
