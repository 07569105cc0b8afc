"""Translation placeholder parsing and resolution.

Configuration documents may contain strings of the exact form
``t('config.header.logo.text')``. A document is parsed once into a tree of
tagged nodes (LiteralNode | TranslationRef) so that rendering for a locale is
a plain walk with no pattern matching.

Usage:
    template = ConfigTemplate({"logo": {"text": "t('config.header.logo.text')"}})
    template.render(lambda key: translations[key])

    # One-shot helper
    resolve_translations(document, lookup)
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator

import yaml

Lookup = Callable[[str], str]

PLACEHOLDER_PATTERN = re.compile(r"t\('(.+)'\)")


@dataclass(frozen=True)
class LiteralNode:
    """A value copied to the output as-is."""

    value: Any


@dataclass(frozen=True)
class TranslationRef:
    """A value replaced by ``lookup(key)`` at render time."""

    key: str


def parse_placeholder(value: str) -> LiteralNode | TranslationRef:
    """Classify a single string. Anything but an exact marker is literal."""
    match = PLACEHOLDER_PATTERN.fullmatch(value)
    if match:
        return TranslationRef(match.group(1))
    return LiteralNode(value)


def parse_template(tree: Any) -> Any:
    """Parse a nested document into tagged nodes.

    Dicts and lists keep their shape; strings become LiteralNode or
    TranslationRef; every other value becomes a LiteralNode.
    """
    if isinstance(tree, str):
        return parse_placeholder(tree)
    if isinstance(tree, dict):
        return {key: parse_template(value) for key, value in tree.items()}
    if isinstance(tree, (list, tuple)):
        return [parse_template(item) for item in tree]
    return LiteralNode(tree)


def render_template(node: Any, lookup: Lookup) -> Any:
    """Produce a plain document from parsed nodes."""
    if isinstance(node, TranslationRef):
        return lookup(node.key)
    if isinstance(node, LiteralNode):
        return node.value
    if isinstance(node, dict):
        return {key: render_template(value, lookup) for key, value in node.items()}
    if isinstance(node, list):
        return [render_template(item, lookup) for item in node]
    raise TypeError(f"Unexpected template node: {node!r}")


def _iter_refs(node: Any) -> Iterator[TranslationRef]:
    if isinstance(node, TranslationRef):
        yield node
    elif isinstance(node, dict):
        for value in node.values():
            yield from _iter_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_refs(item)


class ConfigTemplate:
    """A configuration document parsed once and rendered per locale.

    Attributes:
        root: Parsed node tree.
    """

    def __init__(self, document: Any):
        self.root = parse_template(document)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ConfigTemplate":
        """Load and parse a YAML document.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the YAML cannot be parsed.
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse {path}: {e}") from e
        return cls(document or {})

    def keys(self) -> list[str]:
        """Translation keys referenced by the document, in document order."""
        return [ref.key for ref in _iter_refs(self.root)]

    def render(self, lookup: Lookup) -> Any:
        """Return a fresh document with every marker replaced by ``lookup(key)``."""
        return render_template(self.root, lookup)


def resolve_translations(tree: Any, lookup: Lookup) -> Any:
    """Replace every ``t('key')`` string in ``tree`` with ``lookup(key)``.

    Pure: the input is not modified and the same input with a stable lookup
    always produces an equal output.
    """
    return render_template(parse_template(tree), lookup)
