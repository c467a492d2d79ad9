"""YAML parsing and validation for trie definition files.

A definition names the trie engine, its alphabet and the entries to load:

    config:
      kind: ternary
      alphabet_size: 256
      wildcard: "."
    keys:
      - she
      - sells
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Tuple, Union

try:
    import yaml
except ImportError:
    yaml = None

logger = logging.getLogger(__name__)

TRIE_KINDS = ('rway', 'rway-set', 'ternary')
DEFAULT_KIND = 'ternary'


@dataclass
class TrieDefinition:
    """Parsed trie definition.

    Attributes:
        config: Validated settings (kind, alphabet_size, wildcard).
        entries: (key, value) pairs in file order. Keys given as a list
            get their list position as value.
    """
    config: Dict[str, Any] = field(default_factory=dict)
    entries: List[Tuple[str, Any]] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return self.config.get('kind', DEFAULT_KIND)


class ConfigParseError(Exception):
    """Error parsing or validating a trie definition."""
    pass


def _ensure_yaml_available():
    """Raise ImportError if PyYAML is not installed."""
    if yaml is None:
        raise ImportError(
            "PyYAML is required for trie definition files. "
            "Install it with: pip install pyyaml"
        )


def parse_trie_file(path: Union[str, Path]) -> TrieDefinition:
    """Parse and validate a trie definition file.

    Args:
        path: Path to the YAML file

    Returns:
        TrieDefinition with validated settings and entries

    Raises:
        ConfigParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
        ImportError: If PyYAML is not installed
    """
    _ensure_yaml_available()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trie definition not found: {path}")

    logger.debug("Parsing trie definition %s", path)
    with open(path) as f:
        return _load(f)


def parse_trie_string(content: str) -> TrieDefinition:
    """Parse a trie definition from a string.

    Args:
        content: YAML content as string

    Returns:
        TrieDefinition with validated settings and entries
    """
    _ensure_yaml_available()
    return _load(content)


def _load(stream: Any) -> TrieDefinition:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigParseError("YAML root must be a mapping")

    return _validate_definition(data)


def _validate_definition(data: Dict[str, Any]) -> TrieDefinition:
    """Validate parsed YAML data structure.

    Args:
        data: Parsed YAML dictionary

    Returns:
        Validated TrieDefinition

    Raises:
        ConfigParseError: If validation fails
    """
    config = data.get('config') or {}
    if not isinstance(config, dict):
        raise ConfigParseError("'config' must be a mapping")

    entries = _validate_keys(data.get('keys', []))
    return TrieDefinition(config=_validate_config(config), entries=entries)


def _validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    unknown = set(config) - {'kind', 'alphabet_size', 'wildcard'}
    if unknown:
        raise ConfigParseError(f"Unknown config option(s): {sorted(unknown)}")

    kind = config.get('kind', DEFAULT_KIND)
    if kind not in TRIE_KINDS:
        raise ConfigParseError(
            f"Invalid trie kind '{kind}'. Valid kinds: {list(TRIE_KINDS)}"
        )

    size = config.get('alphabet_size', 256)
    if not isinstance(size, int) or isinstance(size, bool):
        raise ConfigParseError("'alphabet_size' must be an integer")
    if size < 1 or size > 0x110000:
        raise ConfigParseError(f"'alphabet_size' out of range: {size}")

    wildcard = config.get('wildcard', '.')
    if not isinstance(wildcard, str) or len(wildcard) != 1:
        raise ConfigParseError("'wildcard' must be a single character")

    return {'kind': kind, 'alphabet_size': size, 'wildcard': wildcard}


def _validate_keys(keys: Any) -> List[Tuple[str, Any]]:
    """Normalize the 'keys' section into (key, value) pairs.

    Raises:
        ConfigParseError: If keys is not a list or mapping of strings
    """
    if keys is None:
        return []

    if isinstance(keys, list):
        pairs = [(key, i) for i, key in enumerate(keys)]
    elif isinstance(keys, dict):
        pairs = list(keys.items())
    else:
        raise ConfigParseError("'keys' must be a list or a mapping")

    for i, (key, _) in enumerate(pairs):
        if not isinstance(key, str):
            raise ConfigParseError(f"Key {i} must be a string, got {key!r}")

    return pairs
