"""
Canonical identity keys and the key -> variant index.

A key has one segment per populated dimension:

    COLOR:<colorId>
    SIZE:<category>:<sizeId>
    ATTR:<attributeTypeId>:<valueId>

Segments are sorted before joining, so the key does not depend on the order
dimensions were declared in.
"""

import logging
from typing import Dict, Iterable, List, Optional

from apps.configurator.conf import configurator_settings
from .dimensions import DimensionReader

logger = logging.getLogger(__name__)


def join_segments(segments: Iterable[str]) -> str:
    return configurator_settings.KEY_SEPARATOR.join(sorted(segments))


def identity_segments(variant, reader: Optional[DimensionReader] = None) -> List[str]:
    reader = reader or DimensionReader()
    return [
        segment for segment in (d.segment for d in reader.dimensions(variant))
        if segment is not None
    ]


def build_identity_key(variant, reader: Optional[DimensionReader] = None) -> str:
    """
    Build the canonical identity key for a variant.

    Returns an empty string for variants without any identifiable dimension.
    """
    return join_segments(identity_segments(variant, reader))


def build_index(variants, reader: Optional[DimensionReader] = None) -> Dict[str, dict]:
    """
    Map identity key -> variant.

    Variants with an empty key are skipped. When two variants share a key the
    later one wins.
    """
    reader = reader or DimensionReader()
    index = {}
    for variant in variants:
        key = build_identity_key(variant, reader)
        if not key:
            logger.debug('Variant %s has no identity key, not indexed', _variant_id(variant))
            continue
        if key in index:
            logger.debug(
                'Identity key collision on %s: variant %s replaces %s',
                key, _variant_id(variant), _variant_id(index[key]),
            )
        index[key] = variant
    return index


class VariantIndex:
    """
    Identity index bound to the variant list it was built from.

    The list is compared by identity, so a session rebuilds the index only
    when it receives a new variant list.
    """

    def __init__(self, variants, reader: Optional[DimensionReader] = None):
        self.source = variants
        self.entries = build_index(variants, reader)

    def is_stale(self, variants) -> bool:
        return variants is not self.source

    def get(self, key: str, default=None):
        if not key:
            return default
        return self.entries.get(key, default)

    def keys(self):
        return self.entries.keys()

    def __contains__(self, key):
        return bool(key) and key in self.entries

    def __len__(self):
        return len(self.entries)


def _variant_id(variant):
    return variant.get('id') if hasattr(variant, 'get') else None
