"""
Reads attribute dimensions out of variant payloads.

Variants reach the engine in more than one shape, depending on which API path
produced them:

- populated: ``color``/``sizes[].size`` objects and ``attribute_values`` objects
  carrying their own ``attribute_type``
- structural: ``attribute_dimensions`` entries with a type id/name and a raw
  value id
- raw: a flat ``attributes`` mapping of ``{attribute_slug: token}``

Every other service goes through DimensionReader, so the "populated first,
then structural, then raw" policy lives in one place.
"""

import logging
from collections import namedtuple
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.text import slugify

from apps.configurator.conf import SELECTION_KEYS, configurator_settings

logger = logging.getLogger(__name__)

COLOR = 'COLOR'
SIZE = 'SIZE'
ATTR = 'ATTR'

COLOR_SLUG = 'color'
SIZE_SLUG = 'size'

ROLE_SPECIFICATION = 'SPECIFICATION'


def normalize_id(raw: Any) -> Optional[str]:
    """Trimmed, lower-cased string form of an id, or None if there is none."""
    if raw is None or isinstance(raw, (bool, Mapping, list, tuple)):
        return None
    text = str(raw).strip().lower()
    return text or None


def tokens_match(value: Any, token: Any) -> bool:
    if value is None or token is None:
        return False
    return str(value) == str(token)


def size_slug(position: int, category) -> str:
    """
    Slug of the attribute type a size dimension belongs to.

    A variant's first size is the ``size`` type; every further size gets a type
    of its own named after its category (``size-shoe``), so each one can be
    selected independently.
    """
    if position == 0:
        return SIZE_SLUG
    suffix = slugify(str(category)) if category not in (None, '') else ''
    return f'{SIZE_SLUG}-{suffix or position + 1}'


class Dimension(namedtuple('Dimension', [
    'kind', 'type_slug', 'type_name', 'type_ref',
    'value_id', 'label', 'slug', 'hex_code', 'role',
])):
    """One populated axis of one variant."""
    __slots__ = ()

    @property
    def token(self) -> Optional[str]:
        token = self.slug or self.label
        return str(token) if token not in (None, '') else None

    @property
    def segment(self) -> Optional[str]:
        """
        Identity key segment, or None when an id is missing or the attribute
        type could not be resolved to a slug.
        """
        if not self.type_slug:
            return None
        value_id = normalize_id(self.value_id)
        if value_id is None:
            return None
        if self.kind == COLOR:
            return f'{COLOR}:{value_id}'
        type_ref = normalize_id(self.type_ref)
        if type_ref is None:
            return None
        return f'{self.kind}:{type_ref}:{value_id}'


class DimensionReader:
    """
    Extracts Dimensions from variant payloads using the configured attribute
    types to map type ids to slugs.

    Args:
        attribute_types: List of attribute type configs
            (``{'id', 'slug', 'name', 'input_type', 'priority'}``)
        selection_key: 'label' to select by ``slug or label``, 'id' to select
            by value id. Defaults to the VARIANT_CONFIGURATOR setting.
    """

    def __init__(self, attribute_types=None, selection_key: Optional[str] = None):
        self.selection_key = selection_key or configurator_settings.SELECTION_KEY
        if self.selection_key not in SELECTION_KEYS:
            raise ImproperlyConfigured(
                f"selection_key must be one of {SELECTION_KEYS}, got '{self.selection_key}'"
            )
        self.types_by_slug: Dict[str, Mapping] = {}
        self.types_by_id: Dict[str, Mapping] = {}
        for config in attribute_types or []:
            if not isinstance(config, Mapping) or not config.get('slug'):
                continue
            self.types_by_slug[config['slug']] = config
            type_id = normalize_id(config.get('id'))
            if type_id is not None:
                self.types_by_id[type_id] = config

    # -- public API ---------------------------------------------------------

    def dimensions(self, variant) -> List[Dimension]:
        if not isinstance(variant, Mapping):
            return []
        dimensions = []
        color = self.color(variant)
        if color is not None:
            dimensions.append(color)
        dimensions.extend(self.sizes(variant))
        dimensions.extend(self.custom(variant, covered={d.type_slug for d in dimensions}))
        return dimensions

    def display_dimension(self, variant, slug: str) -> Optional[Dimension]:
        for dimension in self.dimensions(variant):
            if dimension.type_slug == slug:
                return dimension
        return None

    def display_token(self, variant, slug: str) -> Optional[str]:
        """The token a variant shows for one attribute type."""
        dimension = self.display_dimension(variant, slug)
        return self.token_of(dimension) if dimension is not None else None

    def token_of(self, dimension: Dimension) -> Optional[str]:
        if self.selection_key == 'id':
            return str(dimension.value_id) if dimension.value_id is not None else None
        return dimension.token

    def token_matches(self, value, token) -> bool:
        """Ids compare trimmed and case-insensitively, labels compare exactly."""
        if self.selection_key == 'id':
            value_id = normalize_id(value)
            return value_id is not None and value_id == normalize_id(token)
        return tokens_match(value, token)

    def shows(self, variant, slug: str, token) -> bool:
        return self.token_matches(self.display_token(variant, slug), token)

    # -- per-axis readers ---------------------------------------------------

    def color(self, variant) -> Optional[Dimension]:
        color = variant.get('color')
        if color is None:
            return None
        if not isinstance(color, Mapping):
            logger.debug('Variant %s has an unpopulated color reference', variant.get('id'))
            return None
        label = color.get('name') or color.get('label')
        if color.get('id') is None and not label:
            return None
        return Dimension(
            kind=COLOR,
            type_slug=COLOR_SLUG,
            type_name=self._type_name(COLOR_SLUG),
            type_ref=COLOR_SLUG,
            value_id=color.get('id'),
            label=label,
            slug=color.get('slug'),
            hex_code=color.get('hex_code'),
            role=None,
        )

    def sizes(self, variant) -> List[Dimension]:
        result = []
        for entry in variant.get('sizes') or []:
            if not isinstance(entry, Mapping):
                continue
            size = entry.get('size')
            if not isinstance(size, Mapping):
                logger.debug('Variant %s has an unpopulated size reference', variant.get('id'))
                continue
            category = entry.get('category') or size.get('category')
            slug = size_slug(len(result), category)
            result.append(Dimension(
                kind=SIZE,
                type_slug=slug,
                type_name=self._size_type_name(slug, category),
                type_ref=category,
                value_id=size.get('id'),
                label=size.get('name') or size.get('label'),
                slug=size.get('slug'),
                hex_code=None,
                role=None,
            ))
        return result

    def custom(self, variant, covered=frozenset()) -> List[Dimension]:
        populated = [
            value for value in variant.get('attribute_values') or []
            if isinstance(value, Mapping)
        ]
        if populated:
            dimensions = [self._from_populated(variant, value) for value in populated]
        else:
            dimensions = [
                self._from_structural(variant, dim)
                for dim in variant.get('attribute_dimensions') or []
                if isinstance(dim, Mapping)
            ]
        dimensions = [d for d in dimensions if d is not None and d.role != ROLE_SPECIFICATION]

        seen = set(covered) | {d.type_slug for d in dimensions}
        dimensions.extend(self._from_raw(variant, seen))
        return dimensions

    # -- shape handlers -----------------------------------------------------

    def _from_populated(self, variant, value: Mapping) -> Optional[Dimension]:
        attribute_type = value.get('attribute_type')
        if isinstance(attribute_type, Mapping):
            type_id = attribute_type.get('id')
            config = self.types_by_id.get(normalize_id(type_id)) or {}
            slug = attribute_type.get('slug') or config.get('slug')
            name = attribute_type.get('name') or config.get('name')
        else:
            type_id = attribute_type
            config = self.types_by_id.get(normalize_id(type_id)) or {}
            slug = config.get('slug')
            name = config.get('name')

        type_ref = type_id if type_id is not None else (name or slug)
        if type_ref is None:
            logger.debug(
                'Dropping attribute value %s on variant %s: no attribute type reference',
                value.get('id'), variant.get('id'),
            )
            return None

        return Dimension(
            kind=ATTR,
            type_slug=slug,
            type_name=name,
            type_ref=type_ref,
            value_id=value.get('id'),
            label=value.get('label') or value.get('value') or value.get('name'),
            slug=value.get('slug'),
            hex_code=value.get('hex_code'),
            role=value.get('role'),
        )

    def _from_structural(self, variant, dim: Mapping) -> Optional[Dimension]:
        type_id = dim.get('attribute_id')
        name = dim.get('attribute_name')
        value_id = dim.get('value_id')
        if value_id in (None, ''):
            return None

        config = self.types_by_id.get(normalize_id(type_id)) or {}
        slug = config.get('slug') or (slugify(name) if name else None)
        type_ref = type_id if type_id is not None else name
        if type_ref is None:
            logger.debug(
                'Dropping attribute dimension %s on variant %s: no attribute type reference',
                value_id, variant.get('id'),
            )
            return None

        # Raw value id doubles as slug and label
        return Dimension(
            kind=ATTR,
            type_slug=slug,
            type_name=config.get('name') or name,
            type_ref=type_ref,
            value_id=value_id,
            label=str(value_id),
            slug=str(value_id),
            hex_code=None,
            role=dim.get('role'),
        )

    def _from_raw(self, variant, seen) -> List[Dimension]:
        attributes = variant.get('attributes')
        if not isinstance(attributes, Mapping):
            return []
        result = []
        for slug, token in attributes.items():
            if slug in seen or token in (None, '') or isinstance(token, Mapping):
                continue
            result.append(Dimension(
                kind=ATTR,
                type_slug=slug,
                type_name=self._type_name(slug),
                type_ref=None,
                value_id=None,
                label=str(token),
                slug=None,
                hex_code=None,
                role=None,
            ))
        return result

    def _size_type_name(self, slug: str, category) -> Optional[str]:
        if slug == SIZE_SLUG or slug in self.types_by_slug:
            return self._type_name(slug)
        base = self._type_name(SIZE_SLUG) or 'Tamanho'
        return f'{base} ({category})' if category else base

    def _type_name(self, slug: str) -> Optional[str]:
        config = self.types_by_slug.get(slug)
        return config.get('name') if config else None
