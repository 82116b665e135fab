"""
Renders persisted variants into the payload shape the engine consumes.
"""

import logging
from typing import Any, Dict, List, Optional

from apps.configurator.models import AttributeType, Product, Variant
from .configurator import ProductConfigurator

logger = logging.getLogger(__name__)


class VariantPayloadLoader:
    """
    Reads one product's ACTIVE variants with everything prefetched, so
    rendering the payloads costs a fixed number of queries.
    """

    def __init__(self, request=None):
        self.request = request

    def load(self, product: Product) -> List[Dict[str, Any]]:
        queryset = Variant.objects.filter(
            product=product,
            status=Variant.STATUS_ACTIVE,
        ).select_related('color').prefetch_related(
            'images',
            'variantsize_set__size',
            'variantattribute_set__attribute_value__attribute_type',
        )
        return [self.variant_payload(variant) for variant in queryset]

    def load_attribute_types(self) -> List[Dict[str, Any]]:
        return [
            {
                'id': attr_type.id,
                'slug': attr_type.slug,
                'name': attr_type.name,
                'input_type': attr_type.input_type,
                'priority': attr_type.priority,
            }
            for attr_type in AttributeType.objects.all()
        ]

    def variant_payload(self, variant: Variant) -> Dict[str, Any]:
        color = variant.color
        return {
            'id': variant.id,
            'sku': variant.sku,
            'status': variant.status,
            'stock': variant.stock,
            'price': str(variant.price) if variant.price is not None else None,
            'images': [self._image_url(img) for img in variant.images.all()],
            'color': {
                'id': color.id,
                'name': color.name,
                'hex_code': color.hex_code or None,
            } if color else None,
            'sizes': [
                {
                    'category': vs.category,
                    'size': {'id': vs.size.id, 'name': vs.size.name},
                }
                for vs in variant.variantsize_set.all()
            ],
            'attribute_values': [
                {
                    'id': va.attribute_value.id,
                    'label': va.attribute_value.label,
                    'slug': va.attribute_value.slug or None,
                    'role': va.attribute_value.role,
                    'hex_code': va.attribute_value.hex_code or None,
                    'attribute_type': {
                        'id': va.attribute_value.attribute_type.id,
                        'slug': va.attribute_value.attribute_type.slug,
                        'name': va.attribute_value.attribute_type.name,
                    },
                }
                for va in variant.variantattribute_set.all()
            ],
            'attribute_dimensions': list(variant.attribute_dimensions or []),
        }

    def _image_url(self, image) -> Optional[str]:
        if not image.image:
            return None
        if self.request:
            return self.request.build_absolute_uri(image.image.url)
        return image.image.url


def build_configurator(product: Product, selection=None, selection_key=None,
                       request=None) -> ProductConfigurator:
    """Load a product's variants and attribute types into a fresh session."""
    loader = VariantPayloadLoader(request)
    variants = loader.load(product)
    configurator = ProductConfigurator(
        variants,
        loader.load_attribute_types(),
        selection=selection,
        selection_key=selection_key,
    )
    logger.info(
        "Configurator for product '%s': %d variants, %d attribute types",
        product.slug, len(configurator.variants), len(configurator.attribute_types),
    )
    return configurator
