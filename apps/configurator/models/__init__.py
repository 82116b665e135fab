"""
Configurator models for products with dimensioned variants.

Model Hierarchy:
- Product: Base product (e.g., "Camiseta Básica")
- AttributeType: Configurable attribute types (Storage, Material, ...)
- AttributeValue: Values for each attribute type (128GB, Algodão)
- Color / Size: Master data for the two built-in dimensions
- Variant: Individual SKU, one combination of color, sizes and attribute values
"""

from .product import Product
from .attribute import AttributeType, AttributeValue
from .dimension import Color, Size
from .variant import Variant, VariantSize, VariantAttribute, VariantImage

__all__ = [
    'Product',
    'AttributeType',
    'AttributeValue',
    'Color',
    'Size',
    'Variant',
    'VariantSize',
    'VariantAttribute',
    'VariantImage',
]
