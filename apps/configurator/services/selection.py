"""
Selection state: one chosen token (or none) per attribute type slug.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, List, Optional, Tuple

from .dimensions import DimensionReader


class SelectionState:
    """
    The user's in-progress choice.

    Selecting an empty token clears that attribute. Tokens are stored as
    strings since they are compared against display strings.
    """

    def __init__(self, initial: Optional[Mapping] = None):
        self._tokens: Dict[str, str] = {}
        for slug, token in (initial or {}).items():
            self.select(slug, token)

    def select(self, slug: str, token) -> None:
        if token is None or token == '':
            self._tokens.pop(slug, None)
        else:
            self._tokens[slug] = str(token)

    def deselect(self, slug: str) -> None:
        self._tokens.pop(slug, None)

    def clear(self) -> None:
        self._tokens.clear()

    def get(self, slug: str, default=None):
        return self._tokens.get(slug, default)

    def items(self):
        return self._tokens.items()

    def as_dict(self) -> Dict[str, str]:
        return dict(self._tokens)

    def __contains__(self, slug):
        return slug in self._tokens

    def __iter__(self):
        return iter(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __eq__(self, other):
        if isinstance(other, SelectionState):
            return self._tokens == other._tokens
        if isinstance(other, Mapping):
            return self._tokens == dict(other)
        return NotImplemented

    def __repr__(self):
        return f'SelectionState({self._tokens!r})'


def relevant_slugs(attribute_types: Iterable) -> List[str]:
    """Slugs of attribute types, given as catalog entries or plain slugs."""
    slugs = []
    for attribute_type in attribute_types or []:
        slug = attribute_type.get('slug') if isinstance(attribute_type, Mapping) else attribute_type
        if slug and slug not in slugs:
            slugs.append(slug)
    return slugs


def active_selections(selection, attribute_types) -> List[Tuple[str, str]]:
    """(slug, token) pairs for relevant types that currently have a token."""
    if selection is None:
        return []
    pairs = []
    for slug in relevant_slugs(attribute_types):
        token = selection.get(slug)
        if token is not None and token != '':
            pairs.append((slug, str(token)))
    return pairs


def matches_selection(variant, selected: Iterable[Tuple[str, str]], reader: DimensionReader) -> bool:
    """True if the variant shows the selected token for every selected type."""
    return all(reader.shows(variant, slug, token) for slug, token in selected)
