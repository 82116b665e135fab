"""
Product-view session: owns the catalog, index and selection for one product.
"""

import logging
from typing import Any, Dict, List, Optional

from .availability import is_active, is_available, is_sellable
from .catalog import AttributeCatalogBuilder
from .dimensions import DimensionReader
from .identity import VariantIndex, build_identity_key
from .resolver import resolve_with_path
from .selection import SelectionState, relevant_slugs

logger = logging.getLogger(__name__)


class ProductConfigurator:
    """
    Everything the presentation layer needs for one product view.

    The catalog and the identity index are built once per variant list;
    select()/is_available()/resolve() then run in memory on every click.
    Navigating to another product means building a new ProductConfigurator,
    nothing is carried over.

    Example:
        configurator = ProductConfigurator(variants, attribute_types)
        configurator.select('color', 'Red')
        configurator.is_available('size', 'Medium')  # False when out of stock
        configurator.select('size', 'Small')
        configurator.resolve()  # -> variant dict or None
    """

    def __init__(
        self,
        variants,
        attribute_types: Optional[List[Dict[str, Any]]] = None,
        selection: Optional[Dict[str, str]] = None,
        selection_key: Optional[str] = None,
    ):
        self.attribute_type_configs = list(attribute_types or [])
        self.reader = DimensionReader(self.attribute_type_configs, selection_key)
        self.selection = SelectionState()
        self.rebuild(variants)
        for slug, token in (selection or {}).items():
            self.select(slug, token)

    @property
    def selection_key(self) -> str:
        return self.reader.selection_key

    def rebuild(self, variants) -> None:
        """Replace the variant set: catalog, index and selection start over."""
        self.source_variants = variants
        self.variants = [v for v in variants or [] if hasattr(v, 'get') and is_active(v)]
        self.attribute_types = AttributeCatalogBuilder(
            self.reader, self.attribute_type_configs
        ).build(self.variants)
        self.index = VariantIndex(self.variants, self.reader)
        self.selection.clear()
        logger.debug(
            'Configurator built: %d active variants, %d indexed, types=%s',
            len(self.variants), len(self.index), self.slugs,
        )

    def refresh(self, variants) -> bool:
        """Rebuild only if given a different variant list. Returns True if rebuilt."""
        if variants is self.source_variants:
            return False
        self.rebuild(variants)
        return True

    @property
    def slugs(self) -> List[str]:
        return relevant_slugs(self.attribute_types)

    def get_attribute_type(self, slug: str) -> Optional[dict]:
        return next((t for t in self.attribute_types if t['slug'] == slug), None)

    # -- selection ------------------------------------------------------------

    def select(self, slug: str, token) -> None:
        if slug not in self.slugs:
            logger.debug("Ignoring selection for '%s': not an attribute of this product", slug)
            return
        self.selection.select(slug, token)

    def deselect(self, slug: str) -> None:
        self.selection.deselect(slug)

    def reset(self) -> None:
        self.selection.clear()

    def select_variant(self, variant) -> None:
        """Replace the selection with the tokens a variant shows."""
        self.selection.clear()
        for slug in self.slugs:
            token = self.reader.display_token(variant, slug)
            if token is not None:
                self.selection.select(slug, token)

    # -- queries --------------------------------------------------------------

    def is_available(self, slug: str, token) -> bool:
        return is_available(
            slug, token, self.selection, self.variants, self.attribute_types, self.reader
        )

    def resolve_with_path(self):
        return resolve_with_path(
            self.selection, self.variants, self.attribute_types, self.index, self.reader
        )

    def resolve(self) -> Optional[dict]:
        variant, _ = self.resolve_with_path()
        return variant

    @property
    def resolved_variant(self) -> Optional[dict]:
        return self.resolve()

    @property
    def is_sellable(self) -> bool:
        """Resolution and sellability are separate: a resolved variant may have zero stock."""
        return is_sellable(self.resolve())

    def identity_key(self, variant) -> str:
        return build_identity_key(variant, self.reader)

    # -- render model -----------------------------------------------------------

    def options(self) -> List[Dict[str, Any]]:
        """Attribute types with their values, flagged as selected/available."""
        result = []
        for attribute_type in self.attribute_types:
            slug = attribute_type['slug']
            current = self.selection.get(slug)
            result.append({
                **{k: v for k, v in attribute_type.items() if k != 'values'},
                'selected': current,
                'values': [
                    {
                        **value,
                        'is_selected': self.reader.token_matches(value['token'], current),
                        'is_available': self.is_available(slug, value['token']),
                    }
                    for value in attribute_type['values']
                ],
            })
        return result

    def as_dict(self) -> Dict[str, Any]:
        variant, path = self.resolve_with_path()
        return {
            'selection_key': self.selection_key,
            'selection': self.selection.as_dict(),
            'attribute_types': self.options(),
            'variant': variant,
            'resolution': path,
            'is_sellable': is_sellable(variant),
        }
