"""
Whether an attribute value can be chosen given the rest of the selection.
"""

from typing import Optional

from .dimensions import DimensionReader
from .selection import active_selections, matches_selection

STATUS_ACTIVE = 'ACTIVE'


def is_active(variant) -> bool:
    """Variants without a status are assumed active (the feed only sends ACTIVE ones)."""
    status = variant.get('status')
    return status is None or str(status).upper() == STATUS_ACTIVE


def has_stock(variant) -> bool:
    """
    Unknown stock (None) counts as available; the purchase-time check is the
    real gate. Zero or negative stock does not.
    """
    stock = variant.get('stock')
    if stock is None:
        return True
    try:
        return float(stock) > 0
    except (TypeError, ValueError):
        return True


def is_sellable(variant) -> bool:
    return variant is not None and is_active(variant) and has_stock(variant)


def is_available(attribute_slug: str, token, selection, variants, attribute_types,
                 reader: Optional[DimensionReader] = None) -> bool:
    """
    True if at least one active, in-stock variant matches every other current selection
    and shows ``token`` for ``attribute_slug``.

    Linear scan over the in-memory variants; the tested type itself is left out
    of the "others must match" check.
    """
    reader = reader or DimensionReader(attribute_types)
    others = [
        (slug, selected) for slug, selected in active_selections(selection, attribute_types)
        if slug != attribute_slug
    ]
    for variant in variants:
        if not is_sellable(variant):
            continue
        if not matches_selection(variant, others, reader):
            continue
        if reader.shows(variant, attribute_slug, token):
            return True
    return False
