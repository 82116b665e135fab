"""
Maps a selection to the single variant it describes.
"""

import logging
from typing import List, Optional, Tuple

from .dimensions import DimensionReader
from .identity import join_segments
from .selection import active_selections, matches_selection

logger = logging.getLogger(__name__)

PATH_INDEX = 'index'
PATH_SCAN = 'scan'


def selection_identity_key(selected: List[Tuple[str, str]], variants, reader: DimensionReader) -> Optional[str]:
    """
    Rebuild the identity key a selection points at.

    The UI selects display tokens, not ids, so for each selected type we find a
    loaded variant showing that token and read its dimension ids. Returns None
    when any id cannot be recovered.
    """
    segments = []
    for slug, token in selected:
        source = next((v for v in variants if reader.shows(v, slug, token)), None)
        if source is None:
            return None
        segment = reader.display_dimension(source, slug).segment
        if segment is None:
            return None
        segments.append(segment)
    return join_segments(segments)


def resolve_with_path(selection, variants, attribute_types, index,
                      reader: Optional[DimensionReader] = None):
    """
    Resolve a selection and report which path found the variant.

    Returns:
        Tuple of (variant or None, 'index' | 'scan' | None)
    """
    reader = reader or DimensionReader(attribute_types)
    selected = active_selections(selection, attribute_types)
    if not selected:
        return None, None

    key = selection_identity_key(selected, variants, reader)
    if key:
        match = index.get(key)
        if match is not None:
            return match, PATH_INDEX

    # Legacy or partially populated data: first variant in list order whose
    # display values match every selected type. Unselected types are wildcards.
    for variant in variants:
        if matches_selection(variant, selected, reader):
            logger.debug('Selection %s resolved by scan (key %r missed)', dict(selected), key)
            return variant, PATH_SCAN

    return None, None


def resolve(selection, variants, attribute_types, index,
            reader: Optional[DimensionReader] = None) -> Optional[dict]:
    """
    Find the variant matching the selection.

    Args:
        selection: SelectionState or mapping of {attribute_slug: token}
        variants: Variant payloads, in external data order
        attribute_types: Relevant attribute types (catalog entries or slugs)
        index: Identity key -> variant mapping (dict or VariantIndex)

    Returns:
        Matching variant or None
    """
    variant, _ = resolve_with_path(selection, variants, attribute_types, index, reader)
    return variant
