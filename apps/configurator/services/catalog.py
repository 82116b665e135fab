"""
Builds the attribute types and values a product actually offers.

The configured attribute types (may be empty) are merged with the dimensions
observed on the variants; only types with at least one value come out.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from apps.configurator.conf import configurator_settings
from .dimensions import SIZE, SIZE_SLUG, DimensionReader

logger = logging.getLogger(__name__)

# Fields filled in on a value the first time some variant supplies them
ENRICHABLE_FIELDS = ('id', 'slug', 'hex_code', 'preview_image', 'preview_price')


def first_image(variant) -> Optional[str]:
    images = variant.get('images') or []
    if not images:
        return None
    image = images[0]
    if isinstance(image, Mapping):
        return image.get('url')
    return image or None


class AttributeCatalogBuilder:
    """
    Example output:
        [
            {'slug': 'color', 'name': 'Cor', 'input_type': 'color_swatch',
             'priority': 1, 'values': [{'label': 'Red', 'token': 'Red', ...}]},
            {'slug': 'size', ...},
        ]
    """

    def __init__(self, reader: DimensionReader, attribute_types=None):
        self.reader = reader
        self.attribute_types = attribute_types or list(reader.types_by_slug.values())

    def build(self, variants) -> List[Dict[str, Any]]:
        types = self._seed_types()
        values: Dict[str, Dict[str, dict]] = {}

        for variant in variants:
            if not isinstance(variant, Mapping):
                continue
            preview_image = first_image(variant)
            preview_price = variant.get('price')

            shown = set()
            for dimension in self.reader.dimensions(variant):
                if not dimension.type_slug:
                    logger.debug(
                        'Variant %s: dimension %r has no attribute type slug, skipped',
                        variant.get('id'), dimension.value_id,
                    )
                    continue
                # Only the dimension a variant displays for a type is selectable
                if dimension.type_slug in shown:
                    continue
                shown.add(dimension.type_slug)
                dedupe_key = dimension.token
                if dedupe_key is None:
                    continue
                if dimension.type_slug not in types:
                    types[dimension.type_slug] = self._synthesize_type(dimension, types)

                self._register(
                    values.setdefault(dimension.type_slug, {}),
                    dedupe_key,
                    {
                        'id': dimension.value_id,
                        'label': dimension.label or dedupe_key,
                        'slug': dimension.slug,
                        'token': self.reader.token_of(dimension),
                        'hex_code': dimension.hex_code,
                        'preview_image': preview_image,
                        'preview_price': preview_price,
                    },
                )

        relevant = [
            dict(entry, values=list(values[slug].values()))
            for slug, entry in types.items()
            if values.get(slug)
        ]
        # sort() is stable: equal priorities keep configuration order
        relevant.sort(key=lambda entry: entry['priority'])
        return relevant

    def _register(self, bucket: Dict[str, dict], dedupe_key: str, value: dict) -> None:
        existing = bucket.get(dedupe_key)
        if existing is None:
            bucket[dedupe_key] = value
            return
        for field in ENRICHABLE_FIELDS + ('token',):
            if existing.get(field) is None and value.get(field) is not None:
                existing[field] = value[field]

    def _seed_types(self) -> Dict[str, dict]:
        types = {}
        for config in self.attribute_types:
            if isinstance(config, Mapping) and config.get('slug'):
                types[config['slug']] = self._normalize_type(config)
        for default in configurator_settings.DEFAULT_ATTRIBUTE_TYPES:
            if default['slug'] not in types:
                types[default['slug']] = self._normalize_type(default)
        return types

    def _normalize_type(self, config: Mapping) -> dict:
        priority = config.get('priority')
        return {
            'id': config.get('id'),
            'slug': config['slug'],
            'name': config.get('name') or config['slug'].replace('-', ' ').title(),
            'input_type': config.get('input_type') or configurator_settings.DEFAULT_INPUT_TYPE,
            'priority': priority if priority is not None else configurator_settings.DEFAULT_PRIORITY,
        }

    def _synthesize_type(self, dimension, types) -> dict:
        if dimension.kind == SIZE:
            # Secondary size categories sort and render like the size type
            size_type = types.get(SIZE_SLUG) or self._normalize_type({'slug': SIZE_SLUG})
            return self._normalize_type({
                'slug': dimension.type_slug,
                'name': dimension.type_name,
                'input_type': size_type['input_type'],
                'priority': size_type['priority'],
            })
        return self._normalize_type({
            'id': dimension.type_ref if dimension.type_ref != dimension.type_name else None,
            'slug': dimension.type_slug,
            'name': dimension.type_name,
        })


def build_catalog(variants, attribute_types=None, reader: Optional[DimensionReader] = None):
    reader = reader or DimensionReader(attribute_types)
    return AttributeCatalogBuilder(reader, attribute_types).build(variants)
